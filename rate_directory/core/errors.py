"""Error taxonomy for the rate directory and the FastAPI handlers mapping it.

Every domain failure derives from ``RateDirectoryError`` and knows its HTTP
status and error code, so routers simply let them propagate. Store failures
carry a generic message only; the underlying exception is logged where it is
caught (``services.directory``) and never reaches the response body.
"""

from typing import Any, Dict

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("rate_directory.errors")


class RateDirectoryError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "internal_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.error, "detail": self.detail}


class InvalidCurrency(RateDirectoryError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "invalid_currency"

    def __init__(self, field: str, value: Any):
        super().__init__(f"Unsupported {field} currency: {value}")
        self.field = field
        self.value = value

    def to_body(self) -> Dict[str, Any]:
        body = super().to_body()
        body.update({"field": self.field, "value": self.value})
        return body


class RateNotFound(RateDirectoryError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"

    def __init__(self, origin: str, destination: str):
        super().__init__(f"Exchange rate not found: {origin} -> {destination}")
        self.origin = origin
        self.destination = destination


class InvalidAmount(RateDirectoryError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "invalid_amount"

    def __init__(self, value: Any):
        super().__init__(f"Invalid amount: {value}")
        self.value = value


class StoreFailure(RateDirectoryError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "store_failure"


def directory_error_handler(request: Request, exc: RateDirectoryError):  # type: ignore
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "not_found",
                "detail": f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # pydantic v2 may put the raw exception object under ctx["error"]
    cleaned = []
    for err in exc.errors():
        err = dict(err)
        ctx = err.get("ctx")
        if ctx:
            err["ctx"] = {k: str(v) for k, v in ctx.items()}
        cleaned.append(err)
    return jsonable_encoder(cleaned)


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
