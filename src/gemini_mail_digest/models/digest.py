from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum

from gemini_mail_digest.core.errors import GenerationError


class DigestKind(str, Enum):
    DAILY_NEWS = "daily-news"
    WEEKLY_TECH = "weekly-tech"
    DAILY_VOCAB = "daily-vocab"


class RunOutcome(str, Enum):
    SENT = "sent"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class Credentials:
    api_key: str
    recipient_email: str

    def __repr__(self) -> str:
        return f"Credentials(api_key='***', recipient_email={self.recipient_email!r})"


@dataclass(frozen=True)
class DigestRequest:
    kind: DigestKind
    reference_date: datetime.date


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one LLM call: either digest text or the reason there is none."""

    text: str | None = None
    error: GenerationError | None = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.error is None):
            raise ValueError("GenerationResult needs exactly one of text or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "GenerationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: GenerationError) -> "GenerationResult":
        return cls(error=error)


@dataclass(frozen=True)
class EmailMessage:
    recipient: str
    subject: str
    body: str
