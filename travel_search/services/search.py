from __future__ import annotations

import logging

from travel_search.schemas.search import (
    BusQuery,
    BusSearchResponse,
    FlightQuery,
    FlightSearchResponse,
    HotelQuery,
    HotelSearchResponse,
    TrainQuery,
    TrainSearchResponse,
)
from travel_search.services.llm import TravelLLMService
from travel_search.services.mock_data import generate_mock_hotels
from travel_search.services.scraper import ScraperService

logger = logging.getLogger(__name__)


class TravelSearchService:
    """Fallback policy around the scraper: live results first, then the LLM
    (when configured), then synthetic hotels (hotels only)."""

    def __init__(
        self,
        scraper: ScraperService,
        llm: TravelLLMService | None = None,
        mock_hotel_fallback: bool = True,
        mock_hotel_count: int = 10,
    ):
        self._scraper = scraper
        self._llm = llm
        self._mock_hotel_fallback = mock_hotel_fallback
        self._mock_hotel_count = mock_hotel_count

    async def hotels(self, query: HotelQuery) -> HotelSearchResponse:
        hotels = await self._scraper.search_hotels(query)
        source = "scraper"

        if not hotels and self._llm:
            hotels = await self._llm.generate_hotels(query)
            source = "llm"

        if not hotels and self._mock_hotel_fallback:
            logger.info("No live hotels for %s, using mock data", query.city)
            hotels = generate_mock_hotels(query.city, self._mock_hotel_count)
            source = "mock"

        return HotelSearchResponse(
            count=len(hotels), source=source if hotels else "none", hotels=hotels
        )

    async def flights(self, query: FlightQuery) -> FlightSearchResponse:
        flights = await self._scraper.search_flights(query)
        source = "scraper"

        if not flights and self._llm:
            flights = await self._llm.generate_flights(query)
            source = "llm"

        return FlightSearchResponse(
            count=len(flights), source=source if flights else "none", flights=flights
        )

    async def buses(self, query: BusQuery) -> BusSearchResponse:
        buses = await self._scraper.search_buses(query)
        source = "scraper"

        if not buses and self._llm:
            buses = await self._llm.generate_buses(query)
            source = "llm"

        return BusSearchResponse(
            count=len(buses), source=source if buses else "none", buses=buses
        )

    async def trains(self, query: TrainQuery) -> TrainSearchResponse:
        trains = await self._scraper.search_trains(query)
        source = "scraper"

        if not trains and self._llm:
            trains = await self._llm.generate_trains(query)
            source = "llm"

        return TrainSearchResponse(
            count=len(trains), source=source if trains else "none", trains=trains
        )
