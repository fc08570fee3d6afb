# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from . import __version__
from .api.v1 import auth_router, product_router, setup_exception_handlers
from .core.config import get_settings
from .core.logging import configure_logging
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.db.single_table import ensure_table_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the single-table indexes on startup and closes the store
    client on shutdown.
    """
    container = get_container()

    try:
        await ensure_table_indexes(container.get("table_collection"))
    except Exception as e:
        # The API can still serve requests against an already indexed table
        logger.error(f"Failed to ensure table indexes: {e}", exc_info=True)

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="TON API",
        version=__version__,
        description="Authentication and product catalog over a single-table store",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "X-Requested-With", "Origin"],
    )

    setup_exception_handlers(application)

    application.include_router(auth_router, prefix="/auth")
    application.include_router(product_router, prefix="/products")

    logger.info(f"TON API created (env={settings.app_env})")
    return application


# Create application instance
app = create_application()
