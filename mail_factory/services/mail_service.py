"""
Mail Service - client code for the Factory Method demonstration.

client_code() only knows the Mailer base class, so any mailer (including ones
added later) can be passed in without changing this module.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from ..mailers import Mailer, WelcomeMailGenerator, NewsLetterMailGenerator

logger = logging.getLogger(__name__)

DIVIDER = "---"


def client_code(mailer: Mailer, out: Optional[TextIO] = None) -> None:
    """
    Send a mail through any mailer and print the confirmation.

    Exceptions raised by the mailer propagate to the caller.

    Args:
        mailer: Any Mailer subclass instance
        out: Stream to write to (default: stdout)
    """
    stream = out if out is not None else sys.stdout
    logger.debug(f"Sending mail with {mailer.__class__.__name__}")
    print(mailer.send_mail(), file=stream)


def send_mails(mailers: Iterable[Mailer], out: Optional[TextIO] = None) -> None:
    """Send several mails in order, separated by divider lines"""
    stream = out if out is not None else sys.stdout
    for index, mailer in enumerate(mailers):
        if index:
            print(DIVIDER, file=stream)
        client_code(mailer, out=stream)


def run_default_sequence(out: Optional[TextIO] = None) -> None:
    """
    Fixed demo sequence: welcome mail, divider, newsletter.

    Args:
        out: Stream to write to (default: stdout)
    """
    send_mails([WelcomeMailGenerator(), NewsLetterMailGenerator()], out=out)
