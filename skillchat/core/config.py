from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    groq_api_key: str | None
    groq_base_url: str
    skills_ai_model: str
    skills_ai_timeout_s: float
    tavily_api_key: str | None
    tavily_timeout_s: float
    youtube_api_key: str | None
    youtube_timeout_s: float
    chat_store_backend: str
    chat_db_path: str
    chat_history_limit: int
    skills_rate_limit: str


settings = Settings(
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    groq_api_key=_get_env("GROQ_API_KEY"),
    groq_base_url=_get_env("GROQ_BASE_URL", "https://api.groq.com/openai/v1") or "https://api.groq.com/openai/v1",
    skills_ai_model=_get_env("SKILLS_AI_MODEL", "llama-3.1-8b-instant") or "llama-3.1-8b-instant",
    skills_ai_timeout_s=_get_env_float("SKILLS_AI_TIMEOUT_S", 30.0),
    tavily_api_key=_get_env("TAVILY_API_KEY"),
    tavily_timeout_s=_get_env_float("TAVILY_TIMEOUT_S", 15.0),
    youtube_api_key=_get_env("YOUTUBE_API_KEY"),
    youtube_timeout_s=_get_env_float("YOUTUBE_TIMEOUT_S", 10.0),
    chat_store_backend=(_get_env("CHAT_STORE_BACKEND", "sqlite") or "sqlite").strip().lower(),
    chat_db_path=_get_env("CHAT_DB_PATH", "data/chats.db") or "data/chats.db",
    chat_history_limit=_get_env_int("CHAT_HISTORY_LIMIT", 20),
    skills_rate_limit=_get_env("SKILLS_RATE_LIMIT", "20/minute") or "20/minute",
)

if settings.chat_store_backend not in {"sqlite", "memory"}:
    raise RuntimeError("CHAT_STORE_BACKEND must be either 'sqlite' or 'memory'.")
