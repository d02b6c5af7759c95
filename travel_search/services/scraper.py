import logging
import random

from travel_search.adapters.base import SourceAdapter
from travel_search.adapters.google_flights import GoogleFlightsAdapter
from travel_search.adapters.google_hotels import GoogleHotelsAdapter
from travel_search.adapters.makemytrip import MakeMyTripTrainsAdapter
from travel_search.adapters.redbus import RedBusAdapter
from travel_search.exceptions.custom import ScrapeTransportError
from travel_search.schemas.search import (
    Bus,
    BusQuery,
    Flight,
    FlightQuery,
    Hotel,
    HotelQuery,
    Train,
    TrainQuery,
)
from travel_search.services.proxy import ScraperProxyClient

logger = logging.getLogger(__name__)


class ScraperService:
    """Live travel search over scraped pages. Best-effort: every search
    returns a (possibly empty) list and never raises."""

    def __init__(
        self,
        proxy: ScraperProxyClient,
        *,
        hotels: SourceAdapter[HotelQuery, Hotel] | None = None,
        flights: SourceAdapter[FlightQuery, Flight] | None = None,
        buses: SourceAdapter[BusQuery, Bus] | None = None,
        trains: SourceAdapter[TrainQuery, Train] | None = None,
        rng: random.Random | None = None,
    ):
        self._proxy = proxy
        rng = rng or random.Random()
        self._hotels = hotels or GoogleHotelsAdapter(rng)
        self._flights = flights or GoogleFlightsAdapter(rng)
        self._buses = buses or RedBusAdapter(rng)
        self._trains = trains or MakeMyTripTrainsAdapter(rng)

    async def search_hotels(self, query: HotelQuery) -> list[Hotel]:
        hotels = await self._search(self._hotels, query)
        logger.info("Found %d hotels in %s", len(hotels), query.city)
        return hotels

    async def search_flights(self, query: FlightQuery) -> list[Flight]:
        flights = await self._search(self._flights, query)
        logger.info(
            "Found %d flights from %s to %s", len(flights), query.origin, query.destination
        )
        return flights

    async def search_buses(self, query: BusQuery) -> list[Bus]:
        buses = await self._search(self._buses, query)
        logger.info(
            "Found %d buses from %s to %s", len(buses), query.origin, query.destination
        )
        return buses

    async def search_trains(self, query: TrainQuery) -> list[Train]:
        trains = await self._search(self._trains, query)
        logger.info(
            "Found %d trains from %s to %s", len(trains), query.origin, query.destination
        )
        return trains

    async def _search(self, adapter: SourceAdapter, query) -> list:
        try:
            url = adapter.build_url(query)
            html = await self._proxy.scrape(url)
            return adapter.parse(html, query)
        except ScrapeTransportError as exc:
            logger.error("%s search failed: %s", adapter.name, exc.message)
            return []
        except Exception:
            logger.exception("%s search failed", adapter.name)
            return []
