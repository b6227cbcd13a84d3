import logging

from fastapi import FastAPI

from hookreceiver.api.routes import build_router
from hookreceiver.core.config import Settings, get_settings
from hookreceiver.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Dynamic Hook Receiver",
        description="Receives payment request webhooks and summarizes them",
        version="1.0.0",
    )
    app.include_router(build_router())

    logger.info(f"Hello Terminal 👋 user={settings.user}")
    return app


app = create_app()
