"""Core configuration, credentials and error types.

Import what you need from `gemini_mail_digest.core.config` and
`gemini_mail_digest.core.credentials` to avoid side effects at import time.
"""

__all__ = ["config", "credentials", "errors"]
