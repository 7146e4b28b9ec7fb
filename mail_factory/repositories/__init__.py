"""
Repositories and factories - picks a mailer by mail type.
"""

from .mailer_factory import MailerFactory, MailType

__all__ = ['MailerFactory', 'MailType']
