from pydantic_settings import BaseSettings
import os

DEFAULT_API_URL = "https://draw.ar-lottery01.com/WinGo/WinGo_30S/GetHistoryIssuePage.json"


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class Settings(BaseSettings):
    db_dsn: str = os.getenv("DB_DSN", "sqlite:///./data/wingo.db")
    api_url: str = os.getenv("API_URL", DEFAULT_API_URL)
    fetch_timeout: float = float(os.getenv("FETCH_TIMEOUT", 10))
    bot_token: str | None = os.getenv("BOT_TOKEN")
    chat_id: str | None = os.getenv("CHAT_ID")
    interval_seconds: int = int(os.getenv("INTERVAL_SECONDS", 1))
    window: int = int(os.getenv("WINDOW", 4))
    min_occurrences: int = int(os.getenv("MIN_OCCURRENCES", 3))
    confidence_floor: int = int(os.getenv("CONFIDENCE_FLOOR", 60))
    live_limit: int = int(os.getenv("LIVE_LIMIT", 20))
    scheduler_enabled: bool = _flag("SCHEDULER_ENABLED", "true")
    api_key: str | None = os.getenv("API_KEY")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
