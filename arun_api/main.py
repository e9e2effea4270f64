"""FastAPI application entrypoint."""

from __future__ import annotations

import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from .config import get_settings
from .errors import WeekdayServiceError
from .routes import get_api_router


settings = get_settings()
app = FastAPI(title=settings.api_title, version=settings.api_version)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins or ["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


REQUEST_COUNT = Counter(
    "arun_request_total",
    "Number of HTTP requests processed",
    ["method", "endpoint", "http_status"],
)
REQUEST_LATENCY = Histogram(
    "arun_request_latency_seconds",
    "Latency of HTTP requests",
    ["method", "endpoint"],
)
UNMATCHED_ENDPOINT = "<unmatched>"


@app.middleware("http")
async def metrics_middleware(request, call_next):
    method = request.method
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    # Label by route template so path parameters do not mint new series.
    route = request.scope.get("route")
    endpoint = getattr(route, "path", UNMATCHED_ENDPOINT)
    REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(elapsed)
    REQUEST_COUNT.labels(method=method, endpoint=endpoint, http_status=response.status_code).inc()
    return response


@app.exception_handler(WeekdayServiceError)
async def weekday_error_handler(request: Request, exc: WeekdayServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
    else:
        logger.warning("{} {} rejected: {}", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    data = generate_latest()
    return Response(data, media_type=CONTENT_TYPE_LATEST)


app.include_router(get_api_router())


@app.on_event("startup")
async def on_startup():  # pragma: no cover - runtime logging
    logger.info(
        "Starting {} v{} (default timezone {})",
        settings.api_title,
        settings.api_version,
        settings.default_timezone,
    )


@app.on_event("shutdown")
async def on_shutdown():  # pragma: no cover - runtime logging
    logger.info("Shutting down {}", settings.api_title)
