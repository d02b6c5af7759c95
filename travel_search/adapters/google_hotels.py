from urllib.parse import quote

from bs4 import Tag

from travel_search.adapters.base import SourceAdapter, build_record, text_of
from travel_search.mappers.normalize import compress_rating, digits_to_int, leading_float
from travel_search.schemas.search import HOTEL_AMENITIES, Coordinates, Hotel, HotelQuery

HOTELS_URL = (
    "https://www.google.com/travel/hotels/{city}"
    "?q=hotels%20in%20{city}"
    "&g2lb=2502548%2C2503771%2C2503781%2C4258168%2C4270442%2C4306835%2C4317915"
    "%2C4371334%2C4401769%2C4419364%2C4482438%2C4486153%2C4270859%2C4284970%2C4291517"
    "&hl=en-IN&gl=in&cs=1&ssta=1"
    "&ts=CAESABogCgIaABIaEhQKBwjmDxABGBsSBwjmDxABGBwYATICEAAqCQoFOgNJTlIaAA"
    "&adults={adults}"
)


def encode_component(value: str) -> str:
    """Percent-encode a value the way browsers encode a URI component."""
    return quote(value, safe="!~*'()")


class GoogleHotelsAdapter(SourceAdapter[HotelQuery, Hotel]):
    name = "google_hotels"
    card_selector = ".yrHgLb"

    def build_url(self, query: HotelQuery) -> str:
        # check-in/check-out are not part of the target; Google picks its own dates
        return HOTELS_URL.format(city=encode_component(query.city), adults=query.adults)

    def parse_card(self, card: Tag, query: HotelQuery) -> Hotel:
        rating = leading_float(text_of(card, ".KFi5wf"))
        image = card.select_one("img[src]")

        return build_record(
            Hotel,
            name=text_of(card, ".BgYkof"),
            location=query.city,
            address=query.city,
            price_per_night=digits_to_int(text_of(card, ".prxS3d")),
            rating=compress_rating(rating),
            reviews_rating=rating,
            reviews_count=digits_to_int(text_of(card, ".bICNze")),
            hotel_type="hotel",
            images=[image["src"]] if image else [],
            amenities=list(HOTEL_AMENITIES),
            coordinates=Coordinates(),
        )

    def is_usable(self, record: Hotel) -> bool:
        return bool(record.name) and record.price_per_night > 0
