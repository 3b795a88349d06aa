"""
Vyvu Backend - FastAPI Application

German/Vietnamese vocabulary quiz with XP and day streaks.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (parent of backend/)
# Must happen before importing modules that use environment variables
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from vyvu.api.dependencies import cleanup_dependencies, init_dependencies  # noqa: E402
from vyvu.api.routes import (  # noqa: E402
    decks_router,
    quiz_router,
    sentences_router,
    stats_router,
)
from vyvu.config import (  # noqa: E402
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    get_cors_allow_credentials,
    get_cors_origins,
    is_production,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager for startup/shutdown events.

    Startup:
    - Open the progress store
    - Load and merge both decks

    Shutdown:
    - Close the progress store
    """
    logger.info("Starting Vyvu backend...")

    await init_dependencies()
    logger.info("Dependencies initialized")

    yield

    logger.info("Shutting down Vyvu backend...")
    await cleanup_dependencies()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Vyvu API",
    description="German/Vietnamese vocabulary quiz",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None if is_production() else "/docs",
)

# CORS configuration - loaded from environment with restrictive defaults
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=get_cors_allow_credentials(),
    allow_methods=CORS_ALLOWED_METHODS,
    allow_headers=CORS_ALLOWED_HEADERS,
)

# Register API routers
app.include_router(decks_router)
app.include_router(quiz_router)
app.include_router(sentences_router)
app.include_router(stats_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "vyvu-backend",
        "version": "0.1.0",
    }
