"""Exception handlers that turn failures into JSON responses without leaking internals."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.modules.listings.utils.validators import ListingFilterError

logger = logging.getLogger("uvicorn.error")


async def listing_filter_error_handler(request: Request, exc: ListingFilterError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": "One or more validation errors occurred.",
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": [
                {"kind": error.kind.value, "message": error.message} for error in exc.errors
            ],
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unexpected error on {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "title": "Internal server error",
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "detail": "An unexpected error occurred. Please try again later.",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ListingFilterError, listing_filter_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
