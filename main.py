"""
FastAPI application entry point.

Registers routers, middleware, and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError, HTTPException
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from datetime import datetime, timezone

from nexushub.config.settings import settings
from nexushub.core.dependencies import get_app_state, get_storage
from nexushub.core.state import AppState
from nexushub.core.storage import SnapshotStorage
from nexushub.utils.exceptions import BaseAPIException
from nexushub.utils.exception_handlers import (
    base_api_exception_handler,
    request_validation_exception_handler,
    http_exception_handler,
    rate_limit_exception_handler,
    general_exception_handler,
)
from nexushub.utils.logger import get_logger
from nexushub.apps.departments.routers import router as departments_router
from nexushub.apps.session.routers import router as session_router
from nexushub.apps.tools.routers import router as tools_router, limiter
from nexushub.apps.users.routers import router as users_router

logger = get_logger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load snapshots on startup, flush pending writes on shutdown."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} [{settings.ENVIRONMENT}]")
    state = get_app_state()
    await state.ensure_loaded()
    yield
    await state.flush()
    await state.storage.close()
    logger.info("Shutdown complete")


# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Internal tools directory with department-scoped access",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)
app.state.limiter = limiter


# ── Middleware ────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Exception Handlers ────────────────────────────────────────────────────────

app.add_exception_handler(BaseAPIException, base_api_exception_handler)          # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)        # type: ignore[arg-type]
app.add_exception_handler(HTTPException, http_exception_handler)                  # type: ignore[arg-type]
app.add_exception_handler(Exception, general_exception_handler)


# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(session_router)
app.include_router(tools_router)
app.include_router(users_router)
app.include_router(departments_router)


# ── Health ────────────────────────────────────────────────────────────────────

@app.get("/health", tags=["Infra"])
async def health():
    """Liveness probe: must respond < 200ms."""
    return {"status": "ok", "version": settings.APP_VERSION}


@app.get("/ready", tags=["Infra"])
async def ready(
    storage: SnapshotStorage = Depends(get_storage),
    state: AppState = Depends(get_app_state),
):
    """
    Readiness probe: verifies Redis is reachable and state is loaded.
    Returns 503 if any dependency is down.
    """
    checks = {}
    healthy = True

    # Check Redis
    try:
        await storage.ping()
        checks["redis"] = "ok"
    except Exception as e:
        logger.error(f"Redis health check failed: {e}")
        checks["redis"] = f"error: {str(e)[:80]}"
        healthy = False

    checks["state"] = "loaded" if state.loaded else "not loaded"
    if state.dirty:
        checks["pending_writes"] = sorted(state.dirty)

    payload = {
        "status": "ready" if healthy else "degraded",
        "checks": checks,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if not healthy:
        return JSONResponse(status_code=503, content=payload)

    return payload
