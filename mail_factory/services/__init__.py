"""
Services - client code that works with any mailer through its base class.
"""

from .mail_service import DIVIDER, client_code, send_mails, run_default_sequence

__all__ = ['DIVIDER', 'client_code', 'send_mails', 'run_default_sequence']
