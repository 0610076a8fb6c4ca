from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status


class AdServiceError(Exception):
    """Error with a fixed client-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidAdData(AdServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid ad data"


class StorageError(AdServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def service_error_handler(request: Request, exc: AdServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await service_error_handler(request, InvalidAdData())
