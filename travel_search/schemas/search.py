from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

HOTEL_AMENITIES = ["WiFi", "Air Conditioning", "Room Service"]
BUS_AMENITIES = ["AC", "WiFi", "Charging Point", "Water Bottle"]
TRAIN_AMENITIES = ["AC", "Charging Point", "Pantry"]


# --- Queries ---


class HotelQuery(BaseModel):
    city: str
    check_in: str | None = None  # accepted, not forwarded to the scrape target
    check_out: str | None = None
    adults: int = 2


class FlightQuery(BaseModel):
    origin: str
    destination: str
    depart_date: str
    return_date: str | None = None

    @property
    def one_way(self) -> bool:
        return not self.return_date


class BusQuery(BaseModel):
    origin: str
    destination: str
    date: str


class TrainQuery(BaseModel):
    origin: str
    destination: str
    date: str


# --- Normalized records ---


class _Record(BaseModel):
    # Wire names ("from", "to", "class") are aliases; serialize with by_alias.
    model_config = ConfigDict(populate_by_name=True)


class Coordinates(BaseModel):
    lat: float = 0.0
    lng: float = 0.0


class Hotel(_Record):
    name: str
    location: str = ""
    address: str = ""
    price_per_night: int = 0
    rating: int = 0  # 5-point scale
    reviews_rating: float = 0.0  # raw source value, usually 10-point
    reviews_count: int = 0
    hotel_type: str = "hotel"
    amenities: list[str] = []
    images: list[str] = []
    coordinates: Coordinates = Field(default_factory=Coordinates)


class Flight(_Record):
    airline: str
    origin: str = Field(alias="from")
    destination: str = Field(alias="to")
    departure_time: str = "10:00 AM"
    arrival_time: str = "12:00 PM"
    duration: str = ""
    stops: int = 0
    price: int = 0
    date: str = ""
    flight_number: str = ""
    cabin_class: str = "Economy"
    baggage: str = "15 kg"
    type: Literal["one-way", "round-trip"] = "one-way"


class Bus(_Record):
    operator: str
    bus_type: str = "AC Sleeper"
    origin: str = Field(alias="from")
    destination: str = Field(alias="to")
    departure_time: str = "10:00 PM"
    arrival_time: str = "6:00 AM"
    duration: str = "8h"
    price: int = 0
    seats_available: int = 20
    date: str = ""
    amenities: list[str] = Field(default_factory=lambda: list(BUS_AMENITIES))


class Train(_Record):
    train_name: str
    train_number: str = ""
    origin: str = Field(alias="from")
    destination: str = Field(alias="to")
    departure_time: str = "10:00 AM"
    arrival_time: str = "6:00 PM"
    duration: str = "8h"
    price: int = 0
    travel_class: str = Field("3AC", alias="class")
    date: str = ""
    seats_available: int = 0
    amenities: list[str] = Field(default_factory=lambda: list(TRAIN_AMENITIES))


SearchSource = Literal["scraper", "llm", "mock", "none"]


# --- Response envelopes ---


class HotelSearchResponse(BaseModel):
    success: bool = True
    count: int
    source: SearchSource
    hotels: list[Hotel]


class FlightSearchResponse(BaseModel):
    success: bool = True
    count: int
    source: SearchSource
    flights: list[Flight]


class BusSearchResponse(BaseModel):
    success: bool = True
    count: int
    source: SearchSource
    buses: list[Bus]


class TrainSearchResponse(BaseModel):
    success: bool = True
    count: int
    source: SearchSource
    trains: list[Train]
