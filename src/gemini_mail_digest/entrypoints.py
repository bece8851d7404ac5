"""Scheduler-facing entry points.

Each `send_*` routine takes no arguments so a cron line or timer unit can
call it directly; `main` does the same for a kind given on the command line.
"""

from __future__ import annotations

import argparse
import datetime
import logging
import sys
from typing import Sequence

from gemini_mail_digest.core.config import Settings, load_env_file, load_settings, validate_log_level
from gemini_mail_digest.core.credentials import save_credentials
from gemini_mail_digest.core.errors import ConfigurationError
from gemini_mail_digest.models import DigestKind, RunOutcome
from gemini_mail_digest.processing.pipeline import build_default_pipeline

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

# loggers that write request URLs, and with them the ?key= query parameter
_URL_LOGGING_LIBRARIES = ("urllib3",)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT, datefmt="%H:%M:%S")
    for name in _URL_LOGGING_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)


def run_digest(
    kind: DigestKind,
    *,
    reference_date: datetime.date | None = None,
    dry_run: bool = False,
    settings: Settings | None = None,
) -> RunOutcome:
    if settings is None:
        load_env_file()
        settings = load_settings()
    pipeline = build_default_pipeline(settings, dry_run=dry_run)
    return pipeline.run(kind, reference_date)


def _startup(log_level: str | None = None) -> Settings | None:
    # validate settings before anything else; None means exit with EXIT_CONFIG_ERROR
    load_env_file()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging(log_level or "INFO")
        logger.error("Configuration error: %s", e)
        return None
    configure_logging(log_level or settings.log_level)
    return settings


def _run_scheduled(kind: DigestKind) -> int:
    settings = _startup()
    if settings is None:
        return EXIT_CONFIG_ERROR
    return _run_and_report(kind, settings)


def _run_and_report(
    kind: DigestKind,
    settings: Settings,
    reference_date: datetime.date | None = None,
    dry_run: bool = False,
) -> int:
    try:
        outcome = run_digest(kind, reference_date=reference_date, dry_run=dry_run, settings=settings)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG_ERROR
    except Exception:
        logger.exception("%s digest failed", kind.value)
        return EXIT_FAILURE
    logger.info("%s digest finished: %s", kind.value, outcome.value)
    return EXIT_OK


def send_daily_business_news() -> int:
    return _run_scheduled(DigestKind.DAILY_NEWS)


def send_weekly_tech_news() -> int:
    return _run_scheduled(DigestKind.WEEKLY_TECH)


def send_daily_business_english_words() -> int:
    return _run_scheduled(DigestKind.DAILY_VOCAB)


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def _parse_log_level(value: str) -> str:
    try:
        return validate_log_level(value, env_name="--log-level")
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gemini-mail-digest",
        description="Generate a digest with Gemini and email it.",
    )
    parser.add_argument("kind", choices=[k.value for k in DigestKind])
    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="reference date (YYYY-MM-DD); defaults to today in DIGEST_TIMEZONE",
    )
    parser.add_argument("--dry-run", action="store_true", help="log the email instead of sending it")
    parser.add_argument("--log-level", type=_parse_log_level, default=None, help="overrides LOG_LEVEL")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _startup(args.log_level)
    if settings is None:
        return EXIT_CONFIG_ERROR
    return _run_and_report(DigestKind(args.kind), settings, reference_date=args.date, dry_run=args.dry_run)


def setup_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gemini-mail-digest-setup",
        description="Store the Gemini API key and recipient address in a .env file.",
    )
    parser.add_argument("--api-key", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--env-file", default=None, help="defaults to .env at the repository root")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        path = save_credentials(args.api_key, args.email, args.env_file)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG_ERROR
    print(f"Credentials saved to {path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
