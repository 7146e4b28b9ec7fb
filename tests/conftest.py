# tests/conftest.py
import io

import pytest

from mail_factory.config import LogConfig
from mail_factory.mailers import WelcomeMailGenerator, NewsLetterMailGenerator

WELCOME_LINE = "Sending the following mail : Welcome aboard! Thanks for signing up!"
NEWSLETTER_LINE = "Sending the following mail : Please enjoy our newsletter!"


@pytest.fixture(autouse=True)
def isolated_log_config(monkeypatch):
    """Keep environment and LogConfig changes from leaking between tests."""
    for name in ("LOG_LEVEL", "LOG_FILE", "LOG_FILE_MAX_BYTES", "LOG_FILE_BACKUP_COUNT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(LogConfig, "LOG_LEVEL", "WARNING")
    monkeypatch.setattr(LogConfig, "LOG_FILE", None)
    monkeypatch.setattr(LogConfig, "LOG_FILE_MAX_BYTES", 10485760)
    monkeypatch.setattr(LogConfig, "LOG_FILE_BACKUP_COUNT", 5)


@pytest.fixture
def welcome_mailer():
    return WelcomeMailGenerator()


@pytest.fixture
def newsletter_mailer():
    return NewsLetterMailGenerator()


@pytest.fixture
def buffer():
    """In-memory output stream for client code."""
    return io.StringIO()
