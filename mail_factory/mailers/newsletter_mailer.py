from .base_mailer import Mailer
from ..templates import MailTemplate, NewsLetterMailTemplate


class NewsLetterMailGenerator(Mailer):
    """Sends the newsletter"""

    def generate_mail_template(self) -> MailTemplate:
        return NewsLetterMailTemplate()
