import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _clean_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None = None
    gemini_api_key: str | None = None
    cors_origins: list[str] = field(default_factory=list)
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_dotenv()
    origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "").split(",")
        if origin.strip()
    ]
    return Settings(
        openai_api_key=_clean_env("OPENAI_API_KEY"),
        gemini_api_key=_clean_env("GEMINI_API_KEY"),
        cors_origins=origins,
        log_level=(_clean_env("LOG_LEVEL") or "INFO").upper(),
    )
