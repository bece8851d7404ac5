from __future__ import annotations

from typing import Any


class DigestError(Exception):
    """Base class for every error raised or returned by this package."""


class ConfigurationError(DigestError):
    """Required settings or credentials are missing. Fatal for the run."""


class GenerationError(DigestError):
    """The LLM call did not yield digest text. Returned, never raised."""

    kind = "generation_error"


class TransportError(GenerationError):
    kind = "transport_error"

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code


class MalformedResponse(GenerationError):
    kind = "malformed_response"

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload
