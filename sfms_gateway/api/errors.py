"""Uniform error envelope for the HTTP boundary"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sfms_gateway.api.v1.schemas import ErrorResponse


class InvalidRequest(Exception):
    """Request rejected at the HTTP boundary; rendered as 400 {success: false, error}"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def format_validation_error(exc: RequestValidationError) -> str:
    """Collapse pydantic errors into one readable line, e.g. 'userId: Field required'"""
    parts = []
    for err in exc.errors():
        # Drop the leading "body" segment FastAPI adds to locations
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request body"


async def invalid_request_handler(request: Request, exc: InvalidRequest) -> JSONResponse:
    return error_response(exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_error(exc)
    logging.warning(
        f"Rejected request body: {message}",
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
    )
    return error_response(message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidRequest, invalid_request_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
