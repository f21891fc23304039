"""
Voice Admin - FastAPI Application

Main entry point for the back-office API.
Provides endpoints for plans, users, API keys, voices, call sessions
and conversation turns.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from voice_admin.config.settings import settings
from voice_admin.infrastructure.exceptions import (
    VoiceAdminError,
    ValidationError,
    NotFoundError,
    ConflictError,
    InvalidStateError,
    QuotaExceededError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info(f"{settings.app_name} starting in {settings.environment} mode...")

    from voice_admin.infrastructure.db.database import init_db, close_db
    try:
        await init_db()
        logger.info("Database connection pool initialized")
    except Exception as e:
        logger.warning(f"Database initialization failed: {e}")

    yield

    # Shutdown
    await close_db()
    logger.info("Database connection pool closed")
    logger.info(f"{settings.app_name} shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Back-office API for the voice-calling platform",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle not found errors."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(ConflictError)
async def conflict_error_handler(request: Request, exc: ConflictError):
    """Handle uniqueness violations."""
    return JSONResponse(
        status_code=409,
        content=exc.to_dict(),
    )


@app.exception_handler(InvalidStateError)
async def invalid_state_error_handler(request: Request, exc: InvalidStateError):
    """Handle lifecycle violations (ended call sessions)."""
    return JSONResponse(
        status_code=409,
        content=exc.to_dict(),
    )


@app.exception_handler(QuotaExceededError)
async def quota_exceeded_error_handler(request: Request, exc: QuotaExceededError):
    """Handle plan quota violations."""
    return JSONResponse(
        status_code=403,
        content=exc.to_dict(),
    )


@app.exception_handler(VoiceAdminError)
async def general_error_handler(request: Request, exc: VoiceAdminError):
    """Handle all other application errors."""
    logger.error(f"Unhandled application error: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"{settings.app_name} API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from voice_admin.api.routes import (  # noqa: E402
    users,
    subscription_plans,
    api_keys,
    voices,
    call_sessions,
    turns,
    analytics,
)

app.include_router(subscription_plans.router, prefix="/api", tags=["Subscription Plans"])
app.include_router(users.router, prefix="/api", tags=["Users"])
app.include_router(api_keys.router, prefix="/api", tags=["API Keys"])
app.include_router(voices.router, prefix="/api", tags=["Voices"])
app.include_router(call_sessions.router, prefix="/api", tags=["Call Sessions"])
app.include_router(turns.router, prefix="/api", tags=["Turns"])
app.include_router(analytics.router, prefix="/api", tags=["Analytics"])
