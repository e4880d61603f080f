"""Application configuration loaded from environment variables."""
import os
import logging
from functools import lru_cache
from pydantic_settings import BaseSettings

log = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Storage
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

    @property
    def storage_file(self) -> str:
        return os.path.join(self.data_path, "plant_companion.json")

    plant_name: str = "Little Sprout"

    # Text generation
    reply_backend: str = "local"
    local_llm_url: str = "http://localhost:1234/v1/chat/completions"
    local_llm_model: str = "gpt-oss-20b"
    gemini_api_key: str = os.getenv("GEMINI_API_KEY", "")
    gemini_model: str = "gemini-1.5-flash"
    llm_timeout: float = 30.0
    daily_boost_from_backend: bool = False

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173"]

    class Config:
        env_prefix = "PLANT_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def validate_settings(settings: Settings) -> list[str]:
    """
    Check settings that degrade the app without stopping it.

    Returns:
        List of human-readable problems (empty when everything is set)
    """
    problems = []
    if settings.reply_backend not in ("local", "gemini"):
        problems.append(f"Unknown PLANT_REPLY_BACKEND '{settings.reply_backend}' - chat will use fallback replies")
    if settings.reply_backend == "gemini" and not settings.gemini_api_key:
        problems.append("Missing GEMINI_API_KEY - running in demo mode, chat will use fallback replies")

    for problem in problems:
        log.warning(f"[CONFIG] {problem}")
    return problems
