"""Transport-independent HTTP dispatch for the chat endpoint."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from .gateway import InferenceGateway
from .messages import map_messages
from .schemas import HttpRequest, HttpResponse, IncomingPayload

logger = logging.getLogger(__name__)

CHAT_PATH_PREFIX = "/chat"

PREFLIGHT_HEADERS = [
    ("Access-Control-Allow-Origin", "*"),
    ("Access-Control-Allow-Methods", "POST, OPTIONS"),
    ("Access-Control-Allow-Headers", "Content-Type"),
]


def _text_response(status: int, body: bytes) -> HttpResponse:
    return HttpResponse(
        status=status,
        headers=[
            ("Content-Type", "text/plain"),
            ("Access-Control-Allow-Origin", "*"),
        ],
        body=body,
    )


def preflight() -> HttpResponse:
    return HttpResponse(status=204, headers=list(PREFLIGHT_HEADERS), body=b"")


def not_found() -> HttpResponse:
    return _text_response(404, b"Not Found")


async def handle_chat(body: bytes, gateway: InferenceGateway) -> HttpResponse:
    try:
        payload = IncomingPayload.from_json(body)
    except (ValidationError, ValueError) as exc:
        logger.warning("[HTTP] JSON parse error: %s", exc)
        return _text_response(400, f"Invalid JSON: {exc}".encode("utf-8"))

    logger.info("[HTTP] Parsed JSON: %r", payload)
    reply_text = await gateway.chat(map_messages(payload.messages))
    return _text_response(200, reply_text.encode("utf-8"))


async def handle_http_request(request: HttpRequest, gateway: InferenceGateway) -> HttpResponse:
    """Route one request: CORS preflight, the chat handler, or 404."""
    logger.info(
        "[HTTP] http_request: method=%s url=%s headers=%r",
        request.method,
        request.url,
        request.headers,
    )
    logger.debug("[HTTP] Raw body: %s", request.body.decode("utf-8", errors="replace"))

    method = request.method.upper()
    if method == "OPTIONS":
        return preflight()

    # Prefix match: /chat, /chat/ and /chatbot all reach the chat handler.
    if method == "POST" and request.url.startswith(CHAT_PATH_PREFIX):
        return await handle_chat(request.body, gateway)

    logger.info("[HTTP] No matching route for %s %s", request.method, request.url)
    return not_found()
