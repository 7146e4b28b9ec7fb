"""
Mail Factory command line

Sends demo mails through the Factory Method mailers.

Usage:
    send-mail                                 # Welcome mail, divider, newsletter
    send-mail --type newsletter               # Send one specific mail
    send-mail --type welcome --type welcome   # Send several, in order
    send-mail --list                          # Show supported mail types
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, load_environment, setup_logging, validate_config
from .repositories import MailerFactory
from .services import run_default_sequence, send_mails

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    mail_types = [mail_type.value for mail_type in MailerFactory.get_supported_types()]

    parser = argparse.ArgumentParser(
        prog="send-mail",
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the demo sequence (welcome, then newsletter)
  send-mail

  # Send only the newsletter
  send-mail --type newsletter

  # Verbose logging (written to stderr)
  send-mail --verbose
        """
    )

    parser.add_argument(
        "--type", "-t",
        dest="mail_types",
        action="append",
        choices=mail_types,
        help="Mail type to send (can be repeated). Default: the demo sequence"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List supported mail types and exit"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with settings"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {AppConfig.APP_VERSION}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        load_environment(args.env_file)
        validate_config()
        setup_logging(verbose=args.verbose)
    except (ValueError, OSError) as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.list:
        for mail_type in MailerFactory.get_supported_types():
            print(mail_type.value)
        return 0

    try:
        if args.mail_types:
            mailers = [MailerFactory.create_from_name(name) for name in args.mail_types]
            send_mails(mailers)
        else:
            run_default_sequence()
    except Exception as e:
        logger.error(f"Sending failed: {e}", exc_info=True)
        print(f"❌ Sending failed: {e}", file=sys.stderr)
        return 1

    return 0


def run():
    """Console script entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
