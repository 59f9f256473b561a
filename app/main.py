# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import blog_router, user_router, health_router, register_error_handlers
from .core.config import get_settings
from .di.container import get_container
from .domain.exceptions import StorageUnavailableError
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Ensures the unique username index exists. A database that is down at
    startup is logged, not fatal: requests will answer 503 until it is back.
    """
    try:
        user_repository = get_container().get(UserRepository)
        await user_repository.ensure_indexes()
        logger.info("User indexes ensured")
    except StorageUnavailableError as e:
        logger.error(f"Failed to ensure user indexes: {e}")
    
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
    - Error handlers rendering {"error": message}
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    # Create FastAPI app
    application = FastAPI(
        title="Blog List API",
        version="1.0.0",
        description="Blog posts and user accounts over MongoDB",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(blog_router, prefix="/api/blogs")
    application.include_router(user_router, prefix="/api/users")
    application.include_router(health_router)
    
    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn
    port = get_settings().port
    uvicorn.run(app, host="0.0.0.0", port=port)
