"""
Mailer Factory - selects a concrete mailer by mail type.
Lets the application pick a mailer from configuration or the command line.
"""

import logging
from enum import Enum
from typing import Dict, List, Type

from ..mailers import Mailer, WelcomeMailGenerator, NewsLetterMailGenerator

logger = logging.getLogger(__name__)


class MailType(Enum):
    """Mail type enumeration"""
    WELCOME = "welcome"
    NEWSLETTER = "newsletter"


class MailerFactory:
    """
    Factory for creating mailer instances.

    Design Pattern: Factory Pattern + Registry Pattern
    The registry is fixed; new mailers are added here, not registered at runtime.
    """

    _MAILERS: Dict[MailType, Type[Mailer]] = {
        MailType.WELCOME: WelcomeMailGenerator,
        MailType.NEWSLETTER: NewsLetterMailGenerator,
    }

    @classmethod
    def create_mailer(cls, mail_type: MailType) -> Mailer:
        """
        Create a mailer instance.

        Args:
            mail_type: Type of mail to send

        Returns:
            New mailer bound to that mail type

        Raises:
            ValueError: If mail type is not supported
        """
        mailer_class = cls._MAILERS.get(mail_type)

        if not mailer_class:
            raise ValueError(f"Unknown mail type: {mail_type}")

        logger.debug(f"Creating mailer for mail type: {mail_type.value}")
        return mailer_class()

    @classmethod
    def create_from_name(cls, name: str) -> Mailer:
        """
        Create a mailer from a mail type name such as 'welcome' (case-insensitive).

        Raises:
            ValueError: If the name does not match a supported mail type
        """
        try:
            mail_type = MailType(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown mail type: {name}") from None
        return cls.create_mailer(mail_type)

    @classmethod
    def get_supported_types(cls) -> List[MailType]:
        """Get list of supported mail types"""
        return list(cls._MAILERS.keys())
