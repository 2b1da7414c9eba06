from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, Response


def json_response(
    content: Any,
    *,
    status_code: int = 200,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def message_response(message: str, *, status_code: int = 200) -> JSONResponse:
    return json_response({"message": message}, status_code=status_code)


def empty_response(*, status_code: int = 200) -> Response:
    return Response(status_code=status_code)
