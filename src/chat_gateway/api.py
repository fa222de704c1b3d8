"""FastAPI application exposing the chat gateway."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import Response

from .config import get_settings
from .gateway import InferenceGateway, default_gateway
from .router import handle_http_request
from .schemas import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_gateway(request: Request) -> InferenceGateway:
    return request.app.state.gateway


async def to_http_request(request: Request) -> HttpRequest:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    headers = [(k.decode("latin-1"), v.decode("latin-1")) for k, v in request.headers.raw]
    return HttpRequest(method=request.method, url=url, headers=headers, body=await request.body())


def to_response(result: HttpResponse) -> Response:
    response = Response(content=result.body, status_code=result.status)
    for name, value in result.headers:
        response.headers.append(name, value)
    return response


@router.api_route("/{path:path}", methods=_ALL_METHODS, include_in_schema=False)
async def http_request(
    request: Request,
    gateway: InferenceGateway = Depends(get_gateway),
) -> Response:
    result = await handle_http_request(await to_http_request(request), gateway)
    return to_response(result)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "gateway", None) is None:
        app.state.gateway = default_gateway()
    logger.info("Chat gateway starting up (model=%s)", get_settings().llm_model)
    yield
    logger.info("Chat gateway shutting down")


def create_app(gateway: InferenceGateway | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Chat Gateway",
        description="Stateless chat endpoint in front of a hosted language model",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    # CORS headers are written by the router; CORSMiddleware would alter the preflight reply.
    app.state.gateway = gateway
    app.include_router(router)
    return app
