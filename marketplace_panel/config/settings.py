# marketplace_panel/config/settings.py
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field
from typing import Optional
import logging

class Settings(BaseSettings):
    # App Info
    app_name: str = "Marketplace Panel Client"
    version: str = "1.0.0"
    debug: bool = False

    # API - base path configurable, local default
    api_url: str = Field("http://localhost:3000/api", validation_alias=AliasChoices("MARKETPLACE_API_URL", "api_url"))

    # Request pipeline
    request_timeout: float = 10.0
    max_retries: int = 3
    retry_delay: float = 1.0  # segundos, multiplicado por el número de intento

    # Session / routing
    login_path: str = "/login"
    session_file: Optional[str] = None

    # Pagination
    page_size: int = 10

    # Logging
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        """URL base sin slash final"""
        return self.api_url.rstrip("/")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()


def configure_logging(level: Optional[str] = None):
    """Formato básico de logging para scripts y consolas"""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s"
    )
