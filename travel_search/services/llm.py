import json
import logging
import math
import re

from anthropic import AsyncAnthropic
from pydantic import BaseModel, ValidationError

from travel_search.config import DEFAULT_LLM_MODEL
from travel_search.exceptions.custom import LLMError
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

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = "You are a JSON API. Return ONLY valid JSON, no markdown."

_HOTELS_PROMPT = (
    "Generate hotel data for {city}, India. Return JSON: "
    '{{"hotels": [{{"name": "Hotel Name", "location": "{city}", "address": "Address", '
    '"price_per_night": 100, "rating": 4, "reviews_rating": 8.5, "reviews_count": 200, '
    '"hotel_type": "hotel", "amenities": ["WiFi", "Pool"], '
    '"coordinates": {{"lat": 0, "lng": 0}}}}]}}. '
    "Include 15 real hotels with accurate GPS."
)

_FLIGHTS_PROMPT = (
    "Generate flight data from {origin} to {destination} on {date}. Return JSON: "
    '{{"flights": [{{"airline": "IndiGo", "from": "{origin}", "to": "{destination}", '
    '"departure_time": "10:00 AM", "arrival_time": "12:30 PM", "duration": "2h 30m", '
    '"stops": 0, "price": 150, "date": "{date}", "flight_number": "6E1234", '
    '"cabin_class": "Economy", "baggage": "15 kg"}}]}}. '
    "Include 10 real Indian airlines."
)

_BUSES_PROMPT = (
    "Generate bus data from {origin} to {destination} on {date}. Return JSON: "
    '{{"buses": [{{"operator": "VRL Travels", "bus_type": "AC Sleeper", '
    '"from": "{origin}", "to": "{destination}", "departure_time": "10:00 PM", '
    '"arrival_time": "6:00 AM", "duration": "8h", "price": 25, "seats_available": 20, '
    '"date": "{date}", "amenities": ["AC", "WiFi", "Charging"]}}]}}. '
    "Include 10 real Indian bus operators."
)

_TRAINS_PROMPT = (
    "Generate train data from {origin} to {destination} on {date}. Return JSON: "
    '{{"trains": [{{"train_name": "Rajdhani Express", "train_number": "12951", '
    '"from": "{origin}", "to": "{destination}", "departure_time": "5:00 PM", '
    '"arrival_time": "9:00 AM", "duration": "16h", "price": 80, "class": "3AC", '
    '"date": "{date}", "seats_available": 30, "amenities": ["AC", "Pantry"]}}]}}. '
    "Include 10 real Indian trains."
)

_FENCE_RE = re.compile(r"```(?:json)?\s*")

# Integer fields per kind; LLMs often answer these with fractions or strings
_INT_FIELDS = {
    "hotels": ("price_per_night", "rating", "reviews_count"),
    "flights": ("price", "stops"),
    "buses": ("price", "seats_available"),
    "trains": ("price", "seats_available"),
}


def _to_int(value):
    """Round numeric-looking values half up; leave anything else for validation."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            value = float(value.replace(",", "").strip())
        except ValueError:
            return value
    if isinstance(value, float) and math.isfinite(value):
        return math.floor(value + 0.5)
    return value


class TravelLLMService:
    """Ask an LLM for travel records when scraping comes back empty.

    The model's answer is treated like any other untrusted source: entries go
    through the record models and the same name/price gate as scraped data.
    """

    def __init__(self, api_key: str, model: str = DEFAULT_LLM_MODEL):
        self._client = AsyncAnthropic(api_key=api_key)
        self._model = model

    async def generate_hotels(self, query: HotelQuery) -> list[Hotel]:
        prompt = _HOTELS_PROMPT.format(city=query.city)
        hotels = await self._generate(prompt, "hotels", Hotel)
        return [h for h in hotels if h.name and h.price_per_night > 0]

    async def generate_flights(self, query: FlightQuery) -> list[Flight]:
        prompt = _FLIGHTS_PROMPT.format(
            origin=query.origin, destination=query.destination, date=query.depart_date
        )
        flights = await self._generate(prompt, "flights", Flight)
        trip_type = "one-way" if query.one_way else "round-trip"
        return [
            f.model_copy(update={"type": trip_type})
            for f in flights
            if f.airline and f.price > 0
        ]

    async def generate_buses(self, query: BusQuery) -> list[Bus]:
        prompt = _BUSES_PROMPT.format(
            origin=query.origin, destination=query.destination, date=query.date
        )
        buses = await self._generate(prompt, "buses", Bus)
        return [b for b in buses if b.operator and b.price > 0]

    async def generate_trains(self, query: TrainQuery) -> list[Train]:
        prompt = _TRAINS_PROMPT.format(
            origin=query.origin, destination=query.destination, date=query.date
        )
        trains = await self._generate(prompt, "trains", Train)
        return [t for t in trains if t.train_name and t.price > 0]

    async def _generate(self, prompt: str, key: str, model: type[BaseModel]) -> list:
        try:
            payload = await self._complete(prompt)
        except LLMError as exc:
            logger.warning("LLM %s generation failed: %s", key, exc.message)
            return []

        items = payload.get(key)
        if not isinstance(items, list):
            logger.warning("LLM response has no '%s' list", key)
            return []

        records = []
        for item in items:
            if isinstance(item, dict):
                item = {
                    k: _to_int(v) if k in _INT_FIELDS[key] else v
                    for k, v in item.items()
                }
            try:
                records.append(model.model_validate(item))
            except ValidationError:
                logger.debug("Dropping invalid LLM %s entry: %r", key, item)
        return records

    async def _complete(self, prompt: str) -> dict:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=4096,
                system=_SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
            text = response.content[0].text
        except Exception as exc:
            logger.exception("LLM API call failed")
            raise LLMError(str(exc)) from exc

        parsed = self._try_parse_json(text)
        if parsed is None:
            raise LLMError("Response did not contain a JSON object")
        return parsed

    @staticmethod
    def _try_parse_json(text: str) -> dict | None:
        stripped = _FENCE_RE.sub("", text).strip().rstrip("`")

        try:
            obj = json.loads(stripped)
            if isinstance(obj, dict):
                return obj
        except (json.JSONDecodeError, ValueError):
            pass

        # Fallback: outermost braces in surrounding prose
        start, end = stripped.find("{"), stripped.rfind("}")
        if start != -1 and end > start:
            try:
                obj = json.loads(stripped[start : end + 1])
                if isinstance(obj, dict):
                    return obj
            except (json.JSONDecodeError, ValueError):
                pass

        return None
