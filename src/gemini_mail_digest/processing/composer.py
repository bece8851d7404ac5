"""Fixed email templates wrapped around the generated digest text."""

from __future__ import annotations

from dataclasses import dataclass

from gemini_mail_digest.models import DigestKind, EmailMessage


@dataclass(frozen=True)
class MailTemplate:
    subject: str
    intro: str
    closing: str


SIGN_OFF = "よろしくお願いいたします。"

MAIL_TEMPLATES: dict[DigestKind, MailTemplate] = {
    DigestKind.DAILY_NEWS: MailTemplate(
        subject="【毎朝お届け】昨日の主要ビジネスニュース速報",
        intro="昨日の主要なビジネスニュースをGeminiがまとめてお届けします。",
        closing="この情報が皆様のビジネスにお役立ていただければ幸いです。",
    ),
    DigestKind.WEEKLY_TECH: MailTemplate(
        subject="【毎週お届け】今週の主要テックニュース",
        intro="今週の主要なTechニュースをGeminiがまとめてお届けします。",
        closing="この情報が皆様のビジネスにお役立ていただければ幸いです。",
    ),
    DigestKind.DAILY_VOCAB: MailTemplate(
        subject="【毎朝お届け】ビジネス英単語・熟語10選",
        intro=(
            "いつもお世話になっております。\n"
            "本日は、昨日のビジネスニュースからピックアップした、"
            "ビジネスで役立つC1レベルの英単語・熟語10選をお届けします。\n"
            "毎日新しい語彙を学ぶことで、あなたのビジネス英語スキルを向上させましょう。"
        ),
        closing="この情報が皆様の英語学習にお役立ていただければ幸いです。",
    ),
}

_BODY_TEMPLATE = """
{recipient_name}

{intro}

---

{body_text}

---

{closing}

{sign_off}
"""


def compose(
    kind: DigestKind,
    body_text: str,
    recipient_name: str,
    recipient_email: str,
) -> EmailMessage:
    """Fill the kind's template. body_text is embedded verbatim, even if empty."""
    template = MAIL_TEMPLATES[kind]
    return EmailMessage(
        recipient=recipient_email,
        subject=template.subject,
        body=_BODY_TEMPLATE.format(
            recipient_name=recipient_name,
            intro=template.intro,
            body_text=body_text,
            closing=template.closing,
            sign_off=SIGN_OFF,
        ),
    )
