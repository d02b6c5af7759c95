from bs4 import Tag

from travel_search.adapters.base import SourceAdapter, build_record, text_of
from travel_search.adapters.google_hotels import encode_component
from travel_search.mappers.normalize import digits_to_int, infer_stops, synthesize_flight_number
from travel_search.schemas.search import Flight, FlightQuery

FLIGHTS_URL = "https://www.google.com/travel/flights?q=flights%20from%20{origin}%20to%20{destination}%20on%20{depart}"
RETURN_SUFFIX = "%20returning%20{return_date}"

# Google Flights cards do not expose reliable clock times
DEPARTURE_PLACEHOLDER = "10:00 AM"
ARRIVAL_PLACEHOLDER = "12:00 PM"


class GoogleFlightsAdapter(SourceAdapter[FlightQuery, Flight]):
    name = "google_flights"
    card_selector = ".pIav2d"

    def build_url(self, query: FlightQuery) -> str:
        url = FLIGHTS_URL.format(
            origin=encode_component(query.origin),
            destination=encode_component(query.destination),
            depart=query.depart_date,
        )
        if not query.one_way:
            url += RETURN_SUFFIX.format(return_date=query.return_date)
        return url

    def parse_card(self, card: Tag, query: FlightQuery) -> Flight:
        airline = text_of(card, ".sSHqwe")

        return build_record(
            Flight,
            airline=airline,
            origin=query.origin,
            destination=query.destination,
            departure_time=DEPARTURE_PLACEHOLDER,
            arrival_time=ARRIVAL_PLACEHOLDER,
            duration=text_of(card, ".Ak5kof"),
            stops=infer_stops(text_of(card, ".BbR8Ec")),
            price=digits_to_int(text_of(card, ".YMlIz")),
            date=query.depart_date,
            flight_number=synthesize_flight_number(airline, self._rng),
            type="one-way" if query.one_way else "round-trip",
        )

    def is_usable(self, record: Flight) -> bool:
        return bool(record.airline) and record.price > 0
