import random

from travel_search.schemas.search import Coordinates, Hotel

_NAME_PREFIXES = (
    "Grand", "Royal", "Plaza", "Luxury", "Comfort",
    "Imperial", "Heritage", "Elite", "Premium", "Majestic",
)
_AMENITIES = (
    "WiFi", "Pool", "Gym", "Spa", "Restaurant",
    "Bar", "Room Service", "Airport Shuttle", "Parking", "AC",
)
_HOTEL_TYPES = ("hotel", "resort", "boutique")
_IMAGE_URL = "https://images.unsplash.com/photo-{photo_id}?w=800"


def generate_mock_hotels(
    city: str, count: int = 10, rng: random.Random | None = None
) -> list[Hotel]:
    """Synthetic hotels for ``city``. Always exactly ``count`` records, no I/O."""
    rng = rng or random.Random()
    hotels: list[Hotel] = []

    for i in range(count):
        hotels.append(
            Hotel(
                name=f"{_NAME_PREFIXES[i % len(_NAME_PREFIXES)]} {city} Hotel",
                location=city,
                address=f"{i + 1} Main Street, {city}",
                price_per_night=rng.randint(50, 349),
                rating=rng.randint(3, 4),
                reviews_rating=round(rng.uniform(3.0, 5.0), 1),
                reviews_count=rng.randint(100, 1099),
                hotel_type=_HOTEL_TYPES[i % len(_HOTEL_TYPES)],
                amenities=list(_AMENITIES[: rng.randint(3, 7)]),
                images=[_IMAGE_URL.format(photo_id=1560000000 + i)],
                coordinates=Coordinates(),
            )
        )

    return hotels
