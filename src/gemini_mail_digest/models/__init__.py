"""Typed models for digest requests, generation results and outgoing mail."""

from .digest import (
    Credentials,
    DigestKind,
    DigestRequest,
    EmailMessage,
    GenerationResult,
    RunOutcome,
)

__all__ = [
    "Credentials",
    "DigestKind",
    "DigestRequest",
    "EmailMessage",
    "GenerationResult",
    "RunOutcome",
]
