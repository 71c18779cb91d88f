import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str
    log_path: str
    draw_max_attempts: int
    auto_draw_interval: int


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


def load_settings() -> Settings:
    database_url = os.getenv("DATABASE_URL")
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/giftdraw.log")

    if not database_url:
        raise ValueError("DATABASE_URL is required. Set it in the environment or .env file.")

    return Settings(
        database_url=database_url,
        log_level=log_level,
        log_path=log_path,
        draw_max_attempts=_positive_int("DRAW_MAX_ATTEMPTS", 500),
        auto_draw_interval=_positive_int("AUTO_DRAW_INTERVAL", 3600),
    )
