from __future__ import annotations

import datetime
import logging
from typing import Callable, Protocol

from gemini_mail_digest.core.config import Settings, load_settings
from gemini_mail_digest.core.credentials import CredentialProvider, EnvCredentialProvider
from gemini_mail_digest.delivery import DryRunNotifier, Notifier, SmtpNotifier
from gemini_mail_digest.models import DigestKind, DigestRequest, GenerationResult, RunOutcome
from gemini_mail_digest.processing.composer import compose
from gemini_mail_digest.processing.llm_client import GeminiClient
from gemini_mail_digest.processing.prompt_builder import build_prompt, is_weekly_run_day
from gemini_mail_digest.utils import today_in_timezone

logger = logging.getLogger(__name__)

TodayFunc = Callable[[], datetime.date]


class TextGenerator(Protocol):
    def generate(self, prompt: str, api_key: str) -> GenerationResult:
        ...


class DigestPipeline:
    """One run: fetch credentials, generate, then send or skip."""

    def __init__(
        self,
        *,
        credential_provider: CredentialProvider,
        generator: TextGenerator,
        notifier: Notifier,
        recipient_name: str,
        today: TodayFunc,
        date_format: str,
    ) -> None:
        self._credential_provider = credential_provider
        self._generator = generator
        self._notifier = notifier
        self._recipient_name = recipient_name
        self._today = today
        self._date_format = date_format

    def run(self, kind: DigestKind, reference_date: datetime.date | None = None) -> RunOutcome:
        request = DigestRequest(kind=kind, reference_date=reference_date or self._today())

        # raises ConfigurationError before any network call
        credentials = self._credential_provider.get_credentials()

        if kind is DigestKind.WEEKLY_TECH and not is_weekly_run_day(request.reference_date):
            logger.warning(
                "Weekly tech digest running on %s (%s), expected a Saturday; window still ends yesterday",
                request.reference_date.isoformat(),
                request.reference_date.strftime("%A"),
            )

        prompt = build_prompt(kind, request.reference_date, date_format=self._date_format)
        result = self._generator.generate(prompt, credentials.api_key)
        if not result.ok:
            error = result.error
            logger.warning(
                "Skipping %s digest for %s: %s: %s",
                kind.value,
                request.reference_date.isoformat(),
                error.kind,
                error,
            )
            return RunOutcome.SKIPPED

        message = compose(kind, result.text, self._recipient_name, credentials.recipient_email)
        self._notifier.send(message)
        logger.info("%s digest sent to %s", kind.value, credentials.recipient_email)
        return RunOutcome.SENT


def build_default_pipeline(
    settings: Settings | None = None,
    *,
    dry_run: bool = False,
    credential_provider: CredentialProvider | None = None,
) -> DigestPipeline:
    settings = settings or load_settings()
    notifier: Notifier = DryRunNotifier() if dry_run else SmtpNotifier.from_settings(settings)
    return DigestPipeline(
        credential_provider=credential_provider or EnvCredentialProvider(),
        generator=GeminiClient.from_settings(settings),
        notifier=notifier,
        recipient_name=settings.recipient_name,
        today=lambda: today_in_timezone(settings.timezone),
        date_format=settings.date_format,
    )
