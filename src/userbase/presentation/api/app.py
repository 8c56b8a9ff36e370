"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All API endpoints live under the /api prefix. The health check endpoint
stays outside it at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userbase import __version__
from userbase.infrastructure.persistence.sqlalchemy import Database
from userbase.presentation.api.exception_handlers import setup_exception_handlers
from userbase.presentation.api.routers import auth_router, users_router
from userbase.presentation.api.schemas.common import HealthResponse
from userbase_config.settings import Settings, get_settings
from userbase_identity import JWTService, PasswordHashingService, TokenGuard


@lru_cache(maxsize=None)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the userbase application with:
    - Console output with timestamps and module names
    - Configurable log level for userbase modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("userbase").setLevel(log_level)
    logging.getLogger("userbase_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and the current user.

**Security:**
- Passwords are hashed with bcrypt and never returned
- Bearer tokens (JWT, HS256) with a configurable lifetime (default 7 days)
- Unknown email and wrong password are indistinguishable
""",
    },
    {
        "name": "Users",
        "description": "Listing of registered users (requires a bearer token).",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]

# Methods and headers the browser may use cross-origin
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]
CORS_EXPOSE_HEADERS = ["Authorization"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    database: Database = app.state.database

    logger.info("Starting %s API v%s...", app.state.settings.app_name, API_VERSION)
    await database.create_tables()
    yield

    logger.info("Shutting down %s API...", app.state.settings.app_name)
    await database.dispose()


def create_api_router() -> APIRouter:
    """Create the /api router with all endpoints."""
    api_router = APIRouter()
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Settings and the long-lived collaborators built from them (database
    pool, token signer, password hasher, token guard) are created here once
    and stored on ``app.state``.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration, login and bearer-token authentication.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        token_expire_days=settings.jwt_token_expire_days,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.database_echo)
    app.state.jwt_service = jwt_service
    app.state.password_service = PasswordHashingService(
        rounds=settings.password_hash_rounds,
        min_length=settings.password_min_length,
    )
    app.state.token_guard = TokenGuard(jwt_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
        expose_headers=CORS_EXPOSE_HEADERS,
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
