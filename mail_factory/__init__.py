"""
Mail Factory Package

A small demonstration of the Factory Method pattern: every mailer overrides one
factory method to produce its own kind of mail template, while the sending logic
and the client code stay unchanged when new mailers are added.

Architecture:
- Factory Method Pattern for mailers (creators) and templates (products)
- Factory Pattern for picking a mailer by mail type
"""

__version__ = "1.0.0"

from .templates import MailTemplate, WelcomeMailTemplate, NewsLetterMailTemplate
from .mailers import Mailer, SEND_PREFIX, compose_mail, WelcomeMailGenerator, NewsLetterMailGenerator
from .repositories import MailerFactory, MailType
from .services import DIVIDER, client_code, send_mails, run_default_sequence

__all__ = [
    # Templates
    "MailTemplate",
    "WelcomeMailTemplate",
    "NewsLetterMailTemplate",
    # Mailers
    "Mailer",
    "SEND_PREFIX",
    "compose_mail",
    "WelcomeMailGenerator",
    "NewsLetterMailGenerator",
    # Factory
    "MailerFactory",
    "MailType",
    # Services
    "DIVIDER",
    "client_code",
    "send_mails",
    "run_default_sequence",
]
