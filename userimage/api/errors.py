from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import (
    http_exception_handler as fastapi_http_exception_handler,
)
from fastapi.exception_handlers import (
    request_validation_exception_handler as fastapi_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from userimage.api.responses import message_response
from userimage.services.user_images.exceptions import UserImageServiceError


def _is_api_path(path: str) -> bool:
    return path.startswith("/api/")


class ApiException(Exception):
    def __init__(self, *, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @classmethod
    def from_service_error(cls, exc: UserImageServiceError) -> ApiException:
        return cls(status_code=exc.status_code, message=exc.message)


def register_api_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiException)
    async def _handle_api_exception(request: Request, exc: ApiException):
        return message_response(exc.message, status_code=exc.status_code)

    # Routing 404/405 raise Starlette's HTTPException, which FastAPI's subclasses.
    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(request: Request, exc: StarletteHTTPException):
        if not _is_api_path(request.url.path):
            return await fastapi_http_exception_handler(request, exc)
        message = str(exc.detail) if exc.detail is not None else "Request failed."
        return message_response(message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_exception(request: Request, exc: RequestValidationError):
        if not _is_api_path(request.url.path):
            return await fastapi_validation_exception_handler(request, exc)
        return message_response("Request validation failed.", status_code=422)
