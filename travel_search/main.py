import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from travel_search.config import Settings
from travel_search.exceptions.custom import SearchParameterError
from travel_search.exceptions.handlers import search_parameter_error_handler
from travel_search.routers.search import router as search_router
from travel_search.services.llm import TravelLLMService
from travel_search.services.proxy import ScraperProxyClient
from travel_search.services.scraper import ScraperService
from travel_search.services.search import TravelSearchService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=30.0) as client:
        proxy = ScraperProxyClient(
            client,
            settings.scraper_api_key,
            api_url=settings.scraper_api_url,
            timeout=settings.scraper_timeout,
            render_js=settings.scraper_render_js,
            cache_ttl=settings.scrape_cache_ttl,
            cache_max_entries=settings.scrape_cache_max_entries,
        )

        llm: TravelLLMService | None = None
        if settings.anthropic_api_key:
            llm = TravelLLMService(settings.anthropic_api_key, model=settings.llm_model)

        app.state.search_service = TravelSearchService(
            ScraperService(proxy),
            llm=llm,
            mock_hotel_fallback=settings.mock_hotel_fallback,
            mock_hotel_count=settings.mock_hotel_count,
        )

        yield


app = FastAPI(title="Travel Search", lifespan=lifespan)

app.add_exception_handler(SearchParameterError, search_parameter_error_handler)

app.include_router(search_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
