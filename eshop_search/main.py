"""
FastAPI application entry point.
Mount routes, middleware (Prometheus), search engine error translation, client shutdown.
"""

import logging
from contextlib import asynccontextmanager

from elasticsearch import ApiError, TransportError
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from eshop_search.api.v1.endpoints import search
from eshop_search.api.v1.router import api_router
from eshop_search.config import get_settings
from eshop_search.search.elasticsearch_client import close_elasticsearch

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log banner. Shutdown: close the shared Elasticsearch client."""
    settings = get_settings()
    logger.info(
        "===== %s started, searching index %r at %s =====",
        settings.app_name,
        settings.products_index,
        settings.elasticsearch_url.rsplit("@", 1)[-1],
    )
    yield
    await close_elasticsearch()


async def search_engine_unavailable_handler(request: Request, exc: TransportError):
    """Connection refused / timeout talking to ES -> 503."""
    logger.warning("search engine unreachable: %s %s error=%s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Search engine unavailable"},
    )


async def search_engine_error_handler(request: Request, exc: ApiError):
    """ES rejected the request (bad query, missing index, unknown analyzer) -> 502."""
    logger.warning(
        "search engine error: %s %s status=%s error=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Search engine error", "error": exc.message},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        description="Product search over Elasticsearch: keyword, price range and brand queries.",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Engine faults propagate out of the service; shape them into HTTP errors here
    app.add_exception_handler(TransportError, search_engine_unavailable_handler)
    app.add_exception_handler(ApiError, search_engine_error_handler)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")
    # Unversioned paths kept for existing clients of /search/{keyword,price,brand}
    app.include_router(search.router, prefix="/search", tags=["search"], include_in_schema=False)

    return app


app = create_app()
