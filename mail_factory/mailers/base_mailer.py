"""
Base mailer - Abstract base class using the Factory Method pattern.
Defines the factory method every mailer overrides, plus the shared send logic.
"""

import logging
from abc import ABC, abstractmethod

from ..templates import MailTemplate

logger = logging.getLogger(__name__)

SEND_PREFIX = "Sending the following mail : "


def compose_mail(template: MailTemplate) -> str:
    """
    Build the send confirmation for a template.

    Args:
        template: Any mail template

    Returns:
        SEND_PREFIX followed by the template's text
    """
    return f"{SEND_PREFIX}{template.generate()}"


class Mailer(ABC):
    """
    Abstract base class for mailers.

    Design Pattern: Factory Method (Creator)
    Subclasses only decide which template gets created. The sending logic in
    send_mail() is shared by every mailer and is not overridden.
    """

    @abstractmethod
    def generate_mail_template(self) -> MailTemplate:
        """
        Factory method: create the template this mailer sends.

        Returns:
            A new instance of one fixed MailTemplate subclass
        """
        pass

    def send_mail(self) -> str:
        """
        Compose the mail produced by the factory method.

        Returns:
            Confirmation string for the sent mail
        """
        template = self.generate_mail_template()
        logger.debug(f"{self.__class__.__name__} produced {template.__class__.__name__}")
        return compose_mail(template)
