from __future__ import annotations

import logging
import re
from typing import Any

import requests

from gemini_mail_digest.core.config import (
    DEFAULT_GEMINI_API_BASE,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_GEMINI_TIMEOUT_SEC,
    Settings,
)
from gemini_mail_digest.core.errors import MalformedResponse, TransportError
from gemini_mail_digest.models import GenerationResult

logger = logging.getLogger(__name__)

_ERROR_SNIPPET_CHARS = 200


def _snippet(text: str) -> str:
    # collapse whitespace and truncate a response body for error messages
    return re.sub(r"\s+", " ", text or "").strip()[:_ERROR_SNIPPET_CHARS]


def build_request_payload(prompt: str) -> dict[str, Any]:
    # single user turn, single text part
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_candidate_text(payload: Any) -> str:
    """Return candidates[0].content.parts[0].text or raise MalformedResponse."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        reason = "response has no candidates[0].content.parts[0].text"
        block_reason = _block_reason(payload)
        if block_reason:
            reason = f"{reason} (blockReason={block_reason})"
        raise MalformedResponse(reason, payload=payload) from None
    if not isinstance(text, str):
        raise MalformedResponse(
            f"candidate text is {type(text).__name__}, not str", payload=payload
        )
    if not text.strip():
        raise MalformedResponse("candidate text is empty", payload=payload)
    return text


def _block_reason(payload: Any) -> str:
    # promptFeedback.blockReason, set when Gemini refuses the prompt
    if not isinstance(payload, dict):
        return ""
    feedback = payload.get("promptFeedback")
    if isinstance(feedback, dict):
        return str(feedback.get("blockReason") or "")
    return ""


class GeminiClient:
    """Synchronous client for the Gemini generateContent REST endpoint.

    One request per call, no retries, no streaming. Failures come back as
    a GenerationResult carrying TransportError or MalformedResponse.
    """

    def __init__(
        self,
        *,
        api_base: str = DEFAULT_GEMINI_API_BASE,
        model: str = DEFAULT_GEMINI_MODEL,
        timeout_sec: float = DEFAULT_GEMINI_TIMEOUT_SEC,
        session: requests.Session | None = None,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._model = model
        self._timeout_sec = timeout_sec
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, session: requests.Session | None = None) -> "GeminiClient":
        return cls(
            api_base=settings.gemini_api_base,
            model=settings.gemini_model,
            timeout_sec=settings.gemini_timeout_sec,
            session=session,
        )

    @property
    def endpoint(self) -> str:
        return f"{self._api_base}/models/{self._model}:generateContent"

    def generate(self, prompt: str, api_key: str) -> GenerationResult:
        try:
            resp = self._session.post(
                self.endpoint,
                params={"key": api_key},
                headers={"Content-Type": "application/json"},
                json=build_request_payload(prompt),
                timeout=self._timeout_sec,
            )
        except requests.RequestException as e:
            # the exception text can contain the full URL, key included
            return GenerationResult.failure(
                TransportError(f"Gemini request failed: {type(e).__name__}", cause=e)
            )

        if not resp.ok:
            return GenerationResult.failure(
                TransportError(
                    f"Gemini returned HTTP {resp.status_code}: {_snippet(resp.text)}",
                    status_code=resp.status_code,
                )
            )

        try:
            data = resp.json()
        except ValueError as e:
            return GenerationResult.failure(
                TransportError(
                    f"Gemini response is not JSON: {_snippet(resp.text)}",
                    cause=e,
                    status_code=resp.status_code,
                )
            )

        try:
            text = extract_candidate_text(data)
        except MalformedResponse as e:
            logger.debug("Unexpected Gemini payload: %r", data)
            return GenerationResult.failure(e)

        logger.info("Gemini (%s) returned %d characters", self._model, len(text))
        return GenerationResult.success(text)
