from .base_mailer import Mailer
from ..templates import MailTemplate, WelcomeMailTemplate


class WelcomeMailGenerator(Mailer):
    """Sends the welcome mail"""

    def generate_mail_template(self) -> MailTemplate:
        return WelcomeMailTemplate()
