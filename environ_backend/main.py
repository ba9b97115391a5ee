# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging
import asyncio

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError

# Local application imports
from .api.v1 import (
    auth_router,
    classification_router,
    community_router,
    dashboard_router,
    eco_tips_router,
    label_detection_router,
    leaderboard_router,
    notifications_router,
    profile_router,
)
from .core.config import get_settings
from .di.container import get_container
from .domain.repositories.challenge_repository import ChallengeRepository
from .infrastructure.db import close_database, ensure_indexes, seed_challenges
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


async def prepare_database() -> None:
    """
    Create indexes and seed the default challenges.

    Runs in the background so the API starts even while MongoDB is still
    coming up; failures are logged and retried on the next start.
    """
    container = get_container()
    try:
        await ensure_indexes(container.get("database"))
        await seed_challenges(container.get(ChallengeRepository))
    except (PyMongoError, RuntimeError) as e:
        logger.error(f"Database preparation failed: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    Builds the DI container, prepares the database in the background and
    releases shared clients on shutdown.
    """
    get_container()
    startup_task: Optional[asyncio.Task] = asyncio.create_task(prepare_database())
    logger.info("Application startup complete")

    yield

    if startup_task and not startup_task.done():
        startup_task.cancel()
        try:
            await startup_task
        except asyncio.CancelledError:
            pass

    await close_shared_http_client()
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging level
    - CORS middleware configuration
    - API route registration
    - Static serving of uploaded images

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="EnviRon Backend API",
        version="1.0.0",
        description="Waste classification, eco points and community challenges",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(classification_router, prefix="/api/v1/classifications")
    application.include_router(dashboard_router, prefix="/api/v1/dashboard")
    application.include_router(leaderboard_router, prefix="/api/v1/leaderboard")
    application.include_router(profile_router, prefix="/api/v1/profile")
    application.include_router(community_router, prefix="/api/v1/community")
    application.include_router(eco_tips_router, prefix="/api/v1/eco-tips")
    application.include_router(notifications_router, prefix="/api/v1/notifications")
    application.include_router(label_detection_router)

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    media_root = Path(settings.media_root)
    media_root.mkdir(parents=True, exist_ok=True)
    application.mount(settings.media_url, StaticFiles(directory=str(media_root)), name="media")

    return application


# Create application instance
app = create_application()
