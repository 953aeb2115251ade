"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from volunteer_api.api import api_router
from volunteer_api.core.config import Settings, get_settings
from volunteer_api.core.errors import register_exception_handlers
from volunteer_api.core.logging import configure_logging
from volunteer_api.services import MatchingStore, NotificationStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("🚀 Starting %s %s...", settings.PROJECT_NAME, settings.VERSION)
    logger.info(
        "Duplicate matches %s, match notifications %s",
        "allowed" if settings.ALLOW_DUPLICATE_MATCHES else "rejected",
        "on" if settings.NOTIFY_ON_MATCH else "off",
    )

    yield

    logger.info(
        "🛑 Shutting down, discarding %d notification(s) and %d match(es)",
        len(app.state.notification_store),
        len(app.state.matching_store),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and the stores it owns."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.notification_store = NotificationStore()
    app.state.matching_store = MatchingStore(allow_duplicates=settings.ALLOW_DUPLICATE_MATCHES)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", tags=["Health"])
    async def root() -> dict[str, str]:
        """Root endpoint - Health check."""
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "status": "running",
            "version": settings.VERSION,
            "description": settings.DESCRIPTION,
        }

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(app, host=_settings.HOST, port=_settings.PORT)
