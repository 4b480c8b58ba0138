from __future__ import annotations

from pydantic import BaseModel


class Message(BaseModel):
    """Body shape shared by the JSON endpoints."""

    message: str
