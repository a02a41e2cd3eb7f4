from fastapi import Request
from fastapi.responses import JSONResponse

from app.exceptions import (
    AppError,
    InvalidSchemaError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
    ValidationError,
)


def _error_response(status_code: int, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(500, exc)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(404, exc)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(422, exc)


async def upstream_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(502, exc)


def register_exception_handlers(app):
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(MalformedResponseError, upstream_error_handler)
    app.add_exception_handler(InvalidSchemaError, upstream_error_handler)
    app.add_exception_handler(TransportError, upstream_error_handler)
    app.add_exception_handler(AppError, app_error_handler)
