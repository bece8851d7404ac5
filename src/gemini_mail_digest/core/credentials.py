from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Protocol

from dotenv import set_key

from gemini_mail_digest.core.config import DEFAULT_ENV_FILE
from gemini_mail_digest.core.errors import ConfigurationError
from gemini_mail_digest.models import Credentials

logger = logging.getLogger(__name__)

API_KEY_ENV = "GEMINI_API_KEY"
RECIPIENT_EMAIL_ENV = "USER_EMAIL_ADDRESS"


class CredentialProvider(Protocol):
    def get_credentials(self) -> Credentials:
        ...


class EnvCredentialProvider:
    """Reads the API key and recipient address from the environment.

    Nothing is cached: every call reads the mapping again, so one
    invocation sees exactly what its process environment holds.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get_credentials(self) -> Credentials:
        env = os.environ if self._environ is None else self._environ
        api_key = (env.get(API_KEY_ENV) or "").strip()
        recipient_email = (env.get(RECIPIENT_EMAIL_ENV) or "").strip()

        missing = [
            name
            for name, value in ((API_KEY_ENV, api_key), (RECIPIENT_EMAIL_ENV, recipient_email))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"missing credentials: {', '.join(missing)} "
                "(run gemini-mail-digest-setup or set them in .env)"
            )
        return Credentials(api_key=api_key, recipient_email=recipient_email)


class StaticCredentialProvider:
    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def get_credentials(self) -> Credentials:
        return self._credentials


def save_credentials(
    api_key: str,
    recipient_email: str,
    dotenv_path: Path | str | None = None,
) -> Path:
    """Store both credentials in a .env file, creating it if needed."""
    api_key = (api_key or "").strip()
    recipient_email = (recipient_email or "").strip()
    if not api_key or not recipient_email:
        raise ConfigurationError("both an API key and a recipient email are required")

    path = Path(dotenv_path or DEFAULT_ENV_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)
    set_key(str(path), API_KEY_ENV, api_key)
    set_key(str(path), RECIPIENT_EMAIL_ENV, recipient_email)
    logger.info("Saved credentials for %s to %s", recipient_email, path)
    return path
