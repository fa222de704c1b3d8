"""Shared test helpers for building boundary requests."""

from __future__ import annotations

from chat_gateway.schemas import HttpRequest, HttpResponse


def make_request(method: str = "POST", url: str = "/chat", body: bytes = b"") -> HttpRequest:
    """Build an HttpRequest with typical browser headers."""
    return HttpRequest(
        method=method,
        url=url,
        headers=[("Content-Type", "application/json"), ("Accept", "*/*")],
        body=body,
    )


def header_value(response: HttpResponse, name: str) -> str | None:
    """First value for ``name`` (case-insensitive), or None."""
    lowered = name.lower()
    for key, value in response.headers:
        if key.lower() == lowered:
            return value
    return None
