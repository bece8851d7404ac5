from __future__ import annotations

import json
from typing import Any

import requests

SAMPLE_PAYLOAD = {"candidates": [{"content": {"parts": [{"text": "Sample digest"}]}}]}

ENV_NAMES = (
    "GEMINI_API_KEY",
    "USER_EMAIL_ADDRESS",
    "GEMINI_API_BASE",
    "GEMINI_MODEL",
    "GEMINI_TIMEOUT_SEC",
    "RECIPIENT_NAME",
    "DIGEST_TIMEZONE",
    "DIGEST_DATE_FORMAT",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_USER",
    "SMTP_PASS",
    "MAIL_FROM",
    "LOG_LEVEL",
)


def make_response(status_code: int = 200, body: Any = None, *, raw: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.encoding = "utf-8"
    if raw is not None:
        resp._content = raw
    else:
        resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
    return resp


class FakeSession:
    def __init__(self, response: requests.Response | None = None, exc: Exception | None = None) -> None:
        self.response = response
        self.exc = exc
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        assert self.response is not None
        return self.response
