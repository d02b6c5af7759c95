import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("SCRAPER_API_KEY", "test-scraper-key")
    monkeypatch.setenv("SCRAPER_API_URL", "http://api.scraperapi.com")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")
    monkeypatch.setenv("SCRAPE_CACHE_TTL", "0")
    monkeypatch.setenv("MOCK_HOTEL_FALLBACK", "true")
    monkeypatch.setenv("MOCK_HOTEL_COUNT", "10")


@pytest.fixture
async def client(mock_env):
    from travel_search.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
