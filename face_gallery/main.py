# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
import asyncio

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import comparison_router, model_router, page_router, widget_router
from .application.services.widget_service import WidgetService
from .application.use_cases.models import LoadModelsUseCase
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .domain.constants import IMAGE_URL_PREFIX, MODELS_URL_PREFIX
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


async def load_models_in_background() -> None:
    """
    Load the face models without blocking startup.

    Comparisons requested before this finishes come back as skipped; once the
    models are ready every widget with inputs is refreshed.
    """
    load_models_use_case = get_container().get(LoadModelsUseCase)
    try:
        model_status = await load_models_use_case.execute()
        logger.info(f"Face models {model_status.state}")
    except asyncio.CancelledError:
        logger.info("Face model loading cancelled")
        raise
    except Exception as e:
        logger.error(f"Face model loading task crashed: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the default widget from configuration and starts loading the
    face models in the background.
    """
    settings = get_settings()
    container = get_container()

    widget = container.get(WidgetService).ensure_default_widget(
        settings.main_image, settings.gallery_images
    )
    if widget is not None:
        logger.info(f"Default widget ready with {len(widget.gallery)} gallery image(s)")

    load_task = asyncio.create_task(load_models_in_background())
    logger.info("Face model loading task started")

    yield

    if not load_task.done():
        load_task.cancel()
        try:
            await load_task
        except asyncio.CancelledError:
            pass
        logger.info("Face model loading task stopped")

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing HTTP client: {e}", exc_info=True)

    logger.info("Application shutdown complete")


def mount_static_directories(application: FastAPI) -> None:
    """Serve gallery images and model weights when their directories exist."""
    settings = get_settings()
    mounts = (
        (IMAGE_URL_PREFIX, settings.image_root, "imgs"),
        (MODELS_URL_PREFIX, settings.models_dir, "models"),
    )
    for prefix, directory, name in mounts:
        if Path(directory).is_dir():
            application.mount(prefix, StaticFiles(directory=directory), name=name)
            logger.info(f"Serving {directory} at {prefix}")
        else:
            logger.warning(f"Static directory {directory} not found; {prefix} not served")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - API and page route registration
    - Static image/model directories

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    configure_logging()

    application = FastAPI(
        title="Face Gallery API",
        version="1.0.0",
        description="Highlights gallery photos that contain the face of a main photo",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(model_router, prefix="/api/v1/models")
    application.include_router(comparison_router, prefix="/api/v1/comparisons")
    application.include_router(widget_router, prefix="/api/v1/widgets")
    application.include_router(page_router)

    @application.get("/health")
    async def health():
        return {"status": "ok"}

    mount_static_directories(application)

    return application


# Create application instance
app = create_application()
