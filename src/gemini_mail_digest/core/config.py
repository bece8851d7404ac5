from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from gemini_mail_digest.core.errors import ConfigurationError

REPO_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = REPO_ROOT / ".env"

# ==========================================
# Defaults (override through the environment or .env)
# ==========================================

DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-05-20"
DEFAULT_GEMINI_TIMEOUT_SEC = 60
DEFAULT_RECIPIENT_NAME = "Ei-chan"
DEFAULT_TIMEZONE = "Asia/Tokyo"
DEFAULT_DATE_FORMAT = "%Y年%m月%d日"
DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 465


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    # blank values count as unset
    raw = (env.get(name) or "").strip()
    return raw or default


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    # unparsable integers fall back to the default
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at entry and passed down explicitly."""

    gemini_api_base: str = DEFAULT_GEMINI_API_BASE
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_timeout_sec: int = DEFAULT_GEMINI_TIMEOUT_SEC
    recipient_name: str = DEFAULT_RECIPIENT_NAME
    timezone: str = DEFAULT_TIMEZONE
    date_format: str = DEFAULT_DATE_FORMAT
    smtp_host: str = DEFAULT_SMTP_HOST
    smtp_port: int = DEFAULT_SMTP_PORT
    smtp_user: str = ""
    smtp_password: str = ""
    mail_from: str = ""
    log_level: str = "INFO"

    @property
    def sender_address(self) -> str:
        return self.mail_from or self.smtp_user


def load_env_file(dotenv_path: Path | str | None = None) -> bool:
    """Populate os.environ from a .env file without overriding set values."""
    return load_dotenv(dotenv_path=dotenv_path or DEFAULT_ENV_FILE)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read and validate settings. Raises ConfigurationError on bad values."""
    env = os.environ if environ is None else environ
    return Settings(
        gemini_api_base=_env_str(env, "GEMINI_API_BASE", DEFAULT_GEMINI_API_BASE).rstrip("/"),
        gemini_model=_env_str(env, "GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        gemini_timeout_sec=_env_int(env, "GEMINI_TIMEOUT_SEC", DEFAULT_GEMINI_TIMEOUT_SEC),
        recipient_name=_env_str(env, "RECIPIENT_NAME", DEFAULT_RECIPIENT_NAME),
        timezone=validate_timezone(_env_str(env, "DIGEST_TIMEZONE", DEFAULT_TIMEZONE)),
        date_format=_env_str(env, "DIGEST_DATE_FORMAT", DEFAULT_DATE_FORMAT),
        smtp_host=_env_str(env, "SMTP_HOST", DEFAULT_SMTP_HOST),
        smtp_port=_env_int(env, "SMTP_PORT", DEFAULT_SMTP_PORT),
        smtp_user=_env_str(env, "SMTP_USER", ""),
        smtp_password=_env_str(env, "SMTP_PASS", ""),
        mail_from=_env_str(env, "MAIL_FROM", ""),
        log_level=validate_log_level(_env_str(env, "LOG_LEVEL", "INFO")),
    )


def validate_timezone(name: str, *, env_name: str = "DIGEST_TIMEZONE") -> str:
    # resolve the zone now so a typo fails at startup, not mid-run
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"{env_name}={name!r} is not a known IANA timezone") from e
    return name


def validate_log_level(name: str, *, env_name: str = "LOG_LEVEL") -> str:
    level = (name or "").strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ConfigurationError(f"{env_name}={name!r} is not a logging level")
    return level
