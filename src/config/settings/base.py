import logging
import pathlib

import decouple
import pydantic
from pydantic_settings import BaseSettings

ROOT_DIR: pathlib.Path = pathlib.Path(__file__).parent.parent.parent.parent.resolve()


def _first_configured(*names: str) -> str:
    """Return the first non-empty value among several environment keys."""
    for name in names:
        value = decouple.config(name, cast=str, default="")
        if value:
            return value
    return ""


class BackendBaseSettings(BaseSettings):
    TITLE: str = "Learning Roadmaps"
    VERSION: str = "0.1.0"
    TIMEZONE: str = "UTC"
    DESCRIPTION: str | None = None
    DEBUG: bool = False
    ENVIRONMENT: str = "DEV"  # Default environment, overridden by subclasses

    SERVER_HOST: str = decouple.config("BACKEND_SERVER_HOST", cast=str, default="127.0.0.1")  # type: ignore
    SERVER_PORT: int = decouple.config("BACKEND_SERVER_PORT", cast=int, default=8000)  # type: ignore
    SERVER_WORKERS: int = decouple.config("BACKEND_SERVER_WORKERS", cast=int, default=1)  # type: ignore
    API_PREFIX: str = "/api"
    DOCS_URL: str = "/docs"
    OPENAPI_URL: str = "/openapi.json"
    REDOC_URL: str = "/redoc"

    IS_ALLOWED_CREDENTIALS: bool = decouple.config("IS_ALLOWED_CREDENTIALS", cast=bool, default=False)  # type: ignore
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
    ALLOWED_METHODS: list[str] = ["GET", "POST"]
    ALLOWED_HEADERS: list[str] = ["*"]

    LOGGING_LEVEL: int = logging.INFO
    LOGGERS: tuple[str, str] = ("uvicorn.asgi", "uvicorn.access")

    # ------------------------------
    # Content
    # ------------------------------
    # Directory holding `<slug>/<fragment>.json` files; bundled content when unset
    CONTENT_DIR: str | None = decouple.config("CONTENT_DIR", default=None)  # type: ignore

    # ------------------------------
    # Topic assistant (OpenAI-compatible endpoint, OpenRouter by default)
    # ------------------------------
    CHAT_API_KEY: str = _first_configured("CHAT_API_KEY", "OPENROUTER_API_KEY", "GEMINI_API_KEY")
    CHAT_MODEL: str = _first_configured("CHAT_MODEL", "GEMINI_MODEL") or "google/gemini-2.0-flash-001"
    CHAT_BASE_URL: str = decouple.config("CHAT_BASE_URL", cast=str, default="https://openrouter.ai/api/v1")  # type: ignore
    CHAT_TIMEOUT_SECONDS: float = decouple.config("CHAT_TIMEOUT_SECONDS", cast=float, default=60.0)  # type: ignore

    model_config = pydantic.ConfigDict(
        case_sensitive=True,
        env_file=f"{str(ROOT_DIR)}/.env",
        validate_assignment=True,
        extra='allow'
    )

    @property
    def set_backend_app_attributes(self) -> dict[str, str | bool | None]:
        """
        Set all `FastAPI` class' attributes with the custom values defined in `BackendBaseSettings`.
        """
        return {
            "title": self.TITLE,
            "version": self.VERSION,
            "debug": self.DEBUG,
            "description": self.DESCRIPTION,
            "docs_url": self.DOCS_URL,
            "openapi_url": self.OPENAPI_URL,
            "redoc_url": self.REDOC_URL,
        }
