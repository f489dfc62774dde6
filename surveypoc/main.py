"""FastAPI application entrypoint for the survey service."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from surveypoc.core.config import get_settings
from surveypoc.core.errors import register_error_handlers
from surveypoc.core.i18n import build_message_source
from surveypoc.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Configure logging when the server starts, not when the module is imported."""
    configure_logging(get_settings().log_level)
    yield


def create_app() -> FastAPI:
    """Create the application with the exception translator wired in."""
    settings = get_settings()

    application = FastAPI(title="surveypoc", lifespan=lifespan)
    register_error_handlers(application, build_message_source(settings))

    @application.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint for service readiness."""
        return {"status": "ok"}

    logger.info("Application created with locales=%s", ",".join(settings.supported_locales))
    return application


app = create_app()
