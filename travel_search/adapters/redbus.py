from bs4 import Tag

from travel_search.adapters.base import SourceAdapter, build_record, text_of
from travel_search.adapters.google_hotels import encode_component
from travel_search.mappers.normalize import digits_to_int, leading_int
from travel_search.schemas.search import BUS_AMENITIES, Bus, BusQuery

REDBUS_URL = (
    "https://www.redbus.in/bus-tickets/{origin}-to-{destination}"
    "?fromCityName={origin}&toCityName={destination}&onward={date}"
)


class RedBusAdapter(SourceAdapter[BusQuery, Bus]):
    """RedBus result list. Each ``.travels`` node names an operator; the other
    fields live elsewhere inside the enclosing ``.bus-item``."""

    name = "redbus"
    card_selector = ".travels"

    def build_url(self, query: BusQuery) -> str:
        return REDBUS_URL.format(
            origin=encode_component(query.origin),
            destination=encode_component(query.destination),
            date=query.date,
        )

    def parse_card(self, card: Tag, query: BusQuery) -> Bus:
        item = card.find_parent(class_="bus-item")

        return build_record(
            Bus,
            operator=card.get_text(strip=True),
            bus_type=text_of(item, ".bus-type") or "AC Sleeper",
            origin=query.origin,
            destination=query.destination,
            departure_time=text_of(item, ".dp-time") or "10:00 PM",
            arrival_time=text_of(item, ".bp-time") or "6:00 AM",
            duration=text_of(item, ".dur") or "8h",
            price=digits_to_int(text_of(item, ".fare")),
            seats_available=leading_int(text_of(item, ".seat-left"), default=20),
            date=query.date,
            amenities=list(BUS_AMENITIES),
        )

    def is_usable(self, record: Bus) -> bool:
        return bool(record.operator) and record.price > 0
