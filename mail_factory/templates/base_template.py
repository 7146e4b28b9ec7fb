"""
Base mail template - Abstract base class for all mail products.
Defines the interface that every concrete template must implement.
"""

from abc import ABC, abstractmethod


class MailTemplate(ABC):
    """
    Abstract base class for mail templates.

    Design Pattern: Factory Method (Product)
    Templates carry no state. Adding a new kind of mail only requires a new
    subclass; no existing template, mailer or client needs to change.
    """

    @abstractmethod
    def generate(self) -> str:
        """
        Produce the body of the mail.

        Returns:
            The same fixed text on every call
        """
        pass
