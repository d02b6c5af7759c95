import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import SearchParameterError

logger = logging.getLogger(__name__)


async def search_parameter_error_handler(
    _request: Request, exc: SearchParameterError
) -> JSONResponse:
    logger.info("Rejected search request: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": exc.message},
    )
