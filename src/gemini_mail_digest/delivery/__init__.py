"""Mail delivery for composed digests."""

from .mailer import DryRunNotifier, Notifier, SmtpNotifier

__all__ = ["DryRunNotifier", "Notifier", "SmtpNotifier"]
