"""FastAPI application factory and main entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.dependencies import cleanup_dependencies, load_deposit_addresses
from app.api.routes import router
from app.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    settings = get_settings()
    logger.info(f"{settings.app_name} v{settings.app_version} is starting on port {settings.port}")

    addresses = load_deposit_addresses(settings)
    logger.info(f"Monitoring {len(addresses)} addresses")
    if not settings.api_update_url:
        logger.warning("API_UPDATE_URL is not set; every forward will fail")
    if settings.max_concurrent_requests:
        logger.info(f"Outbound concurrency bounded to {settings.max_concurrent_requests}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await cleanup_dependencies()
    logger.info("Cleanup complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Monitors Litecoin addresses for received transactions and forwards "
            "each one to a downstream webhook."
        ),
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(router)

    # Static assets are served verbatim; must come after the API routes
    static_dir = Path(settings.static_dir)
    if not static_dir.is_absolute():
        static_dir = Path(__file__).parent.parent / static_dir
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
