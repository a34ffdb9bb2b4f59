"""Email notification adapter."""

from .client import EmailNotifier, MockEmailNotifier, SMTPEmailNotifier

__all__ = ["EmailNotifier", "MockEmailNotifier", "SMTPEmailNotifier"]
