from .base_template import MailTemplate


class WelcomeMailTemplate(MailTemplate):
    """Mail sent to users right after they sign up"""

    def generate(self) -> str:
        return "Welcome aboard! Thanks for signing up!"
