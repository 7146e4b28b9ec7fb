"""
Mailer implementations - Factory Method pattern creators.
Each mailer is bound to exactly one mail template.
"""

from .base_mailer import Mailer, SEND_PREFIX, compose_mail
from .welcome_mailer import WelcomeMailGenerator
from .newsletter_mailer import NewsLetterMailGenerator

__all__ = [
    'Mailer',
    'SEND_PREFIX',
    'compose_mail',
    'WelcomeMailGenerator',
    'NewsLetterMailGenerator',
]
