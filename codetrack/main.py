"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from codetrack import __version__
from codetrack.api import accounts
from codetrack.api.responses import register_exception_handlers
from codetrack.config import get_settings
from codetrack.database import SessionLocal, init_db
from codetrack.sessions import SessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info("Starting codetrack")
    init_db()
    with SessionLocal() as db:
        SessionStore(db, get_settings()).purge_expired()
    yield
    logger.info("Stopping codetrack")


app = FastAPI(
    title="Codetrack API",
    description="Simple, open-source, self-hosted analytics for your code habits",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and latency."""
    started = time.perf_counter()
    response = await call_next(request)
    latency_ms = (time.perf_counter() - started) * 1000

    address = request.client.host if request.client else "-"
    line = (
        f"{request.method} {request.url.path} from {address} "
        f"-> {response.status_code} in {latency_ms:.1f}ms"
    )
    if response.status_code >= 400:
        logger.error(line)
    elif response.status_code >= 300:
        logger.warning(line)
    else:
        logger.info(line)
    return response


# Register routers
app.include_router(accounts.router)


@app.get("/api/healthcheck")
async def health_check():
    """Health check endpoint."""
    return {"status": 200, "message": "OK"}
