"""
Mail templates - the products of the Factory Method pattern.
Each template produces one fixed piece of mail text.
"""

from .base_template import MailTemplate
from .welcome_template import WelcomeMailTemplate
from .newsletter_template import NewsLetterMailTemplate

__all__ = [
    'MailTemplate',
    'WelcomeMailTemplate',
    'NewsLetterMailTemplate',
]
