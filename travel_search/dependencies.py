from typing import Annotated

from fastapi import Depends, Request

from travel_search.services.search import TravelSearchService


def get_search_service(request: Request) -> TravelSearchService:
    return request.app.state.search_service


SearchDep = Annotated[TravelSearchService, Depends(get_search_service)]
