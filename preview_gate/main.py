"""
Main FastAPI application for the post preview service.
Serves UUID preview routes, health and metrics.
"""
import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from preview_gate.core.config import settings
from preview_gate.core.logging import configure_logging
from preview_gate.api.routes import health, preview
from preview_gate.preview import LookupFailure, apply_frontend_headers
from preview_gate.utils.metrics import router as metrics_router


configure_logging()
logger = logging.getLogger("preview_gate.http")

app = FastAPI(
    title="Preview Gate",
    description="UUID post previews with paywall cut and redirect rules",
    version="1.0.0",
)

# CORS
origins = settings.cors_origins_list
if not origins:
    origins = ["http://localhost:2368", "http://127.0.0.1:2368"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def frontend_headers(request: Request, call_next):
    """Access log for every request; header hygiene for every preview response, error paths included."""
    request_id = request.headers.get(settings.request_id_header) or uuid4().hex
    started = time.perf_counter()
    response = await call_next(request)
    if request.url.path.startswith(preview.PREVIEW_PREFIX):
        apply_frontend_headers(response)
    response.headers[settings.request_id_header] = request_id
    logger.info(
        "http_request",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
            "latency_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response


@app.exception_handler(LookupFailure)
async def lookup_failure_handler(request: Request, exc: LookupFailure) -> JSONResponse:
    logger.error(
        "preview_lookup_failed",
        extra={"path": request.url.path, "error": str(exc)},
        exc_info=exc,
    )
    return JSONResponse(status_code=503, content={"detail": "post lookup unavailable"})


# Routers
app.include_router(health.router, tags=["health"])
app.include_router(preview.router)
app.include_router(metrics_router)
