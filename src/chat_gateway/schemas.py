from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel


class IncomingMessage(BaseModel):
    """Raw chat message as sent by the client; ``role`` is free text."""

    role: str
    content: str


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"duplicate field '{key}'")
        obj[key] = value
    return obj


class IncomingPayload(BaseModel):
    messages: list[IncomingMessage]

    @classmethod
    def from_json(cls, body: bytes) -> "IncomingPayload":
        """Decode ``body`` strictly.

        Raises ``ValidationError`` for malformed or incomplete bodies and
        ``ValueError`` when any object repeats a key.
        """
        payload = cls.model_validate_json(body)
        json.loads(body, object_pairs_hook=_reject_duplicate_keys)
        return payload


Header = tuple[str, str]


@dataclass(slots=True)
class HttpRequest:
    method: str
    url: str
    headers: list[Header] = field(default_factory=list)
    body: bytes = b""


@dataclass(slots=True)
class HttpResponse:
    status: int
    headers: list[Header] = field(default_factory=list)
    body: bytes = b""
