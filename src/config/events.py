import logging
import typing

import fastapi

from src.config.manager import settings
from src.services.chat import close_chat_client
from src.services.roadmap_registry import check_catalog_consistency

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOGGING_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("src").setLevel(settings.LOGGING_LEVEL)
    for logger_name in settings.LOGGERS:
        logging.getLogger(logger_name).setLevel(settings.LOGGING_LEVEL)


def execute_backend_server_event_handler(backend_app: fastapi.FastAPI) -> typing.Any:
    async def launch_backend_server_events() -> None:
        configure_logging()
        registry = backend_app.state.roadmap_registry
        catalog = backend_app.state.roadmap_catalog
        for problem in check_catalog_consistency(catalog=catalog, registry=registry):
            logger.warning(problem)
        logger.info(
            "%s started (%s): %d catalog entries, %d roadmaps with content",
            settings.TITLE,
            settings.ENVIRONMENT,
            len(catalog),
            len(registry),
        )
        if not settings.CHAT_API_KEY:
            logger.warning("CHAT_API_KEY is not configured; the topic assistant will answer 503")

    return launch_backend_server_events


def terminate_backend_server_event_handler(backend_app: fastapi.FastAPI) -> typing.Any:
    async def stop_backend_server_events() -> None:
        await close_chat_client()
        logger.info("%s stopped", settings.TITLE)

    return stop_backend_server_events
