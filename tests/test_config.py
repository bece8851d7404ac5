from __future__ import annotations

import pytest
from dotenv import dotenv_values

from gemini_mail_digest.core.config import DEFAULT_GEMINI_MODEL, load_settings
from gemini_mail_digest.core.credentials import EnvCredentialProvider, save_credentials
from gemini_mail_digest.core.errors import ConfigurationError


def test_load_settings_defaults() -> None:
    settings = load_settings({})
    assert settings.gemini_model == DEFAULT_GEMINI_MODEL
    assert settings.gemini_timeout_sec == 60
    assert settings.recipient_name == "Ei-chan"
    assert settings.timezone == "Asia/Tokyo"
    assert settings.smtp_port == 465


def test_load_settings_reads_overrides_and_ignores_bad_ints() -> None:
    settings = load_settings(
        {
            "GEMINI_API_BASE": "https://proxy.example/v1beta/",
            "GEMINI_TIMEOUT_SEC": "abc",
            "SMTP_PORT": "587",
            "SMTP_USER": "bot@example.com",
            "LOG_LEVEL": "debug",
        }
    )
    assert settings.gemini_api_base == "https://proxy.example/v1beta"
    assert settings.gemini_timeout_sec == 60
    assert settings.smtp_port == 587
    assert settings.sender_address == "bot@example.com"
    assert settings.log_level == "DEBUG"


def test_env_credentials_provider_returns_both_values() -> None:
    provider = EnvCredentialProvider({"GEMINI_API_KEY": " sk-secret ", "USER_EMAIL_ADDRESS": "me@example.com"})
    creds = provider.get_credentials()
    assert creds.api_key == "sk-secret"
    assert creds.recipient_email == "me@example.com"
    assert "sk-secret" not in repr(creds)


@pytest.mark.parametrize(
    "env, missing",
    [
        ({"USER_EMAIL_ADDRESS": "me@example.com"}, "GEMINI_API_KEY"),
        ({"GEMINI_API_KEY": "k", "USER_EMAIL_ADDRESS": "  "}, "USER_EMAIL_ADDRESS"),
    ],
)
def test_env_credentials_provider_names_missing_key(env: dict[str, str], missing: str) -> None:
    with pytest.raises(ConfigurationError, match=missing):
        EnvCredentialProvider(env).get_credentials()


def test_env_credentials_provider_reads_process_env(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    monkeypatch.setenv("USER_EMAIL_ADDRESS", "env@example.com")
    assert EnvCredentialProvider().get_credentials().api_key == "from-env"


def test_save_credentials_writes_dotenv(tmp_path) -> None:
    env_file = tmp_path / "conf" / ".env"
    path = save_credentials("abc123", "me@example.com", env_file)

    values = dotenv_values(path)
    assert values["GEMINI_API_KEY"] == "abc123"
    assert values["USER_EMAIL_ADDRESS"] == "me@example.com"


def test_save_credentials_rejects_blank_values(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        save_credentials("", "me@example.com", tmp_path / ".env")


def test_load_settings_rejects_unknown_timezone() -> None:
    with pytest.raises(ConfigurationError, match="DIGEST_TIMEZONE"):
        load_settings({"DIGEST_TIMEZONE": "Mars/Olympus"})


def test_load_settings_accepts_other_iana_timezone() -> None:
    assert load_settings({"DIGEST_TIMEZONE": "Europe/London"}).timezone == "Europe/London"


def test_load_settings_rejects_unknown_log_level() -> None:
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        load_settings({"LOG_LEVEL": "verbose"})
