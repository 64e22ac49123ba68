"""FastAPI server for the SmileCare receptionist.

Run with:
    uv run uvicorn smilecare.server:app --reload --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from smilecare import __version__
from smilecare.api.routes import apology_response, router
from smilecare.config import CLINIC_NAME, CORS_ORIGINS, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from smilecare.services.metrics import metrics

# ── Logging ──────────────────────────────────────────────────────────
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)

_WIDGET_PATH = Path(__file__).resolve().parent / "static" / "index.html"


# ── Lifespan ─────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Log start-up and push any buffered metrics on shutdown."""
    logger.info("%s receptionist ready (v%s).", CLINIC_NAME, __version__)
    yield
    metrics.flush()


# ── FastAPI application ──────────────────────────────────────────────
app = FastAPI(
    title="SmileCare Dental Receptionist",
    description=(
        "Rule-based dental receptionist — collects appointment details "
        "and answers questions about hours, services and insurance."
    ),
    version=__version__,
    lifespan=lifespan,
)

# ── CORS (needed when the widget is embedded on another origin) ─────
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request-ID middleware ────────────────────────────────────────────
@app.middleware("http")
async def add_request_id(request: Request, call_next) -> Response:
    """Attach a unique request ID to every request for log correlation.

    The ID is echoed in the ``X-Request-ID`` response header and used as
    the prefix of every log line written for the request.
    """
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    request.state.request_id = request_id
    logger.info(
        "[%s] %s %s", request_id, request.method, request.url.path,
    )
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# ── Malformed request bodies ─────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reply with the standard apology instead of pydantic's error detail."""
    request_id = getattr(request.state, "request_id", "?")
    logger.warning("[%s] Rejected malformed request: %s", request_id, exc.errors())
    return apology_response(422)


# ── Register routes ──────────────────────────────────────────────────
app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "SmileCare Dental Receptionist",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/health",
        "widget": "/widget",
    }


@app.get("/widget", include_in_schema=False)
async def widget():
    """The browser chat page."""
    return FileResponse(_WIDGET_PATH, media_type="text/html")


# ── CLI entry point ──────────────────────────────────────────────────

if __name__ == "__main__":
    logger.info("Starting SmileCare API server on %s:%d", SERVER_HOST, SERVER_PORT)
    uvicorn.run(
        "smilecare.server:app",
        host=SERVER_HOST,
        port=SERVER_PORT,
        reload=True,
    )
