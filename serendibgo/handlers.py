from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from .models import Message

ROOT_BODY = "Hello, World!"
HELLO_MESSAGE = "Hello, World!"
HEALTH_MESSAGE = "OK"
NOT_FOUND_MESSAGE = "Not Found"


def message_response(message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(Message(message=message).model_dump(), status_code=status_code)


# === Endpoints ===
# Handlers ignore the request entirely, so every method gets the same answer.


def root(request: Request) -> Response:
    # No media type: the body goes out without a Content-Type header.
    return Response(content=ROOT_BODY, status_code=200)


def hello(request: Request) -> JSONResponse:
    return message_response(HELLO_MESSAGE)


def health(request: Request) -> JSONResponse:
    """Liveness probe. Always answers OK while the process is serving."""
    return message_response(HEALTH_MESSAGE)


def not_found(request: Request, exc: Exception) -> JSONResponse:
    return message_response(NOT_FOUND_MESSAGE, status_code=404)
