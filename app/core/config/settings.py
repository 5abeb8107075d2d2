from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, "").strip()
    return value or default


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from exc


def _get_env_csv(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    values = tuple(item.strip() for item in (_get_env(name) or "").split(",") if item.strip())
    return values or default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    ats_taxonomy_path: str | None
    ats_max_job_description_chars: int
    host: str
    port: int


def load_settings() -> Settings:
    return Settings(
        log_level=(_get_env("LOG_LEVEL") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_allowed_origins=_get_env_csv("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS),
        cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
        ats_taxonomy_path=_get_env("ATS_TAXONOMY_PATH"),
        ats_max_job_description_chars=_get_env_int("ATS_MAX_JOB_DESCRIPTION_CHARS", 50000),
        host=_get_env("HOST") or "127.0.0.1",
        port=_get_env_int("PORT", 8000),
    )


settings = load_settings()

if settings.ats_max_job_description_chars <= 0:
    raise RuntimeError("ATS_MAX_JOB_DESCRIPTION_CHARS must be a positive integer.")
