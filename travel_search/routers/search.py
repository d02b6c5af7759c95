from fastapi import APIRouter, Query

from travel_search.dependencies import SearchDep
from travel_search.exceptions.custom import SearchParameterError
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

router = APIRouter(prefix="/search")


@router.get("/hotels", response_model=HotelSearchResponse)
async def search_hotels(
    service: SearchDep,
    city: str | None = None,
    check_in: str | None = Query(None, alias="checkIn"),
    check_out: str | None = Query(None, alias="checkOut"),
    adults: str = "2",
) -> HotelSearchResponse:
    if not city:
        raise SearchParameterError("City parameter is required")
    if not (adults.isascii() and adults.isdigit()) or int(adults) < 1:
        raise SearchParameterError("adults must be a positive integer")

    query = HotelQuery(city=city, check_in=check_in, check_out=check_out, adults=int(adults))
    return await service.hotels(query)


@router.get("/flights", response_model=FlightSearchResponse)
async def search_flights(
    service: SearchDep,
    origin: str | None = Query(None, alias="from"),
    destination: str | None = Query(None, alias="to"),
    depart_date: str | None = Query(None, alias="departDate"),
    return_date: str | None = Query(None, alias="returnDate"),
) -> FlightSearchResponse:
    if not (origin and destination and depart_date):
        raise SearchParameterError("from, to, and departDate parameters are required")

    query = FlightQuery(
        origin=origin,
        destination=destination,
        depart_date=depart_date,
        return_date=return_date or None,
    )
    return await service.flights(query)


@router.get("/buses", response_model=BusSearchResponse)
async def search_buses(
    service: SearchDep,
    origin: str | None = Query(None, alias="from"),
    destination: str | None = Query(None, alias="to"),
    date: str | None = None,
) -> BusSearchResponse:
    if not (origin and destination and date):
        raise SearchParameterError("from, to, and date parameters are required")

    return await service.buses(BusQuery(origin=origin, destination=destination, date=date))


@router.get("/trains", response_model=TrainSearchResponse)
async def search_trains(
    service: SearchDep,
    origin: str | None = Query(None, alias="from"),
    destination: str | None = Query(None, alias="to"),
    date: str | None = None,
) -> TrainSearchResponse:
    if not (origin and destination and date):
        raise SearchParameterError("from, to, and date parameters are required")

    return await service.trains(TrainQuery(origin=origin, destination=destination, date=date))
