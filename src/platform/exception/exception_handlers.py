from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError


ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def error_body(status_code: int, detail: Any, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail, 'error': error})


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CustomBaseError):
        exc = CustomBaseError(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return error_body(exc.status_code, exc.message, exc.error_code)


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_body(status.HTTP_400_BAD_REQUEST, str(exc), 'validation_error')


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return error_body(status.HTTP_400_BAD_REQUEST, errors, 'validation_error')


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_body(
        status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error', 'internal_error'
    )


# Starlette matches the most specific class first, so Exception only catches leftovers
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: request_validation_handler,
    Exception: unhandled_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
