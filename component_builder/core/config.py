from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
import logging
import sys
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Hugging Face router credential, checked per request by the chat proxy
    HUGGINGFACE_API_KEY: str | None = None
    COMPLETION_TIMEOUT: float = 120.0

    # Terminal UI side
    PROXY_BASE_URL: str = "http://localhost:3001"
    DOWNLOAD_DIR: Path = Path(".")
    UI_LOG_FILE: Path = Path("component-builder-ui.log")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# .env lookup order: working directory, then the project root
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv()
load_dotenv(_PROJECT_ROOT / ".env")

settings = Settings()


def get_settings() -> Settings:
    return settings


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure root logging once for the whole process."""
    log_level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )

    uvicorn_logger = logging.getLogger("uvicorn")
    uvicorn_logger.setLevel(log_level)

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app_logger = logging.getLogger("component_builder")
    app_logger.setLevel(log_level)

    return app_logger


def setup_file_logging(path: Path, level: str | None = None) -> logging.Logger:
    """Send logs to a file; used by the terminal UI, which owns stdout."""
    log_level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(path, encoding="utf-8"),
        ]
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app_logger = logging.getLogger("component_builder")
    app_logger.setLevel(log_level)

    return app_logger


def setup_middleware(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
