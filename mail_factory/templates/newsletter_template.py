from .base_template import MailTemplate


class NewsLetterMailTemplate(MailTemplate):
    """Periodic newsletter mail"""

    def generate(self) -> str:
        return "Please enjoy our newsletter!"
