"""
Main FastAPI application entry point for the plays service.

This is the core application file that:
- Initializes FastAPI with lifespan management
- Configures CORS for frontend integration
- Sets up Logfire observability
- Maps bet catalog failures to gateway errors
- Provides health check endpoints
"""

from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from api.routes import plays_router
from config import settings
from database import init_db, close_db, check_db_connection, get_db_info
from observability.logfire_config import LogfireConfig
from services import play_service
from services.bet_catalog import BetCatalogError, BetCatalogUnavailableError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(
        token=settings.logfire_token,
        environment=settings.environment,
        log_level=settings.log_level,
    )

    # Startup logging
    logfire.info(
        "Starting Plays API Server",
        environment=settings.environment,
        debug=settings.debug,
    )

    await init_db()

    # Check database connection on startup
    db_connected = await check_db_connection()
    db_info = get_db_info()
    if db_connected:
        logfire.info("Database connection successful", url=db_info["url"])
    else:
        logfire.error("Database connection failed", url=db_info["url"])

    logfire.info("Plays API Server startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down Plays API Server")
    await play_service.bet_lookup.close()
    await close_db()


# Initialize FastAPI app
app = FastAPI(
    title="Plays API",
    description="Records and summarizes user plays on bet catalog markets",
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BetCatalogError)
async def bet_catalog_error_handler(request: Request, exc: BetCatalogError):
    """Bet catalog failures are upstream faults, not client errors."""
    logfire.error(
        "Bet catalog request failed",
        path=request.url.path,
        error=str(exc),
        upstream_status=exc.status_code,
    )
    status_code = 503 if isinstance(exc, BetCatalogUnavailableError) else 502
    return JSONResponse(
        status_code=status_code,
        content={"detail": "Bet catalog is unavailable, try again later"},
    )


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status of the application and database
    """
    db_connected = await check_db_connection()

    return {
        "status": "healthy" if db_connected else "degraded",
        "service": "plays-api",
        "version": "0.1.0",
        "database": "connected" if db_connected else "disconnected",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Plays API",
        "version": "0.1.0",
        "description": "Records and summarizes user plays",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

app.include_router(plays_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
