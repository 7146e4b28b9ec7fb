"""
Centralized Configuration Module

Application constants, logging configuration, and settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union
from dotenv import load_dotenv

from . import __version__

load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> Union[int, str]:
    """Read an integer setting; unparseable values are kept as-is for validate_config()"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return raw


class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "Mail Factory"
    APP_VERSION = __version__
    APP_DESCRIPTION = "Factory Method demonstration: mailers that each produce one kind of mail template"


class LogConfig:
    """Logging configuration"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    LOG_FILE = os.getenv("LOG_FILE")
    LOG_FILE_MAX_BYTES = _env_int("LOG_FILE_MAX_BYTES", 10485760)
    LOG_FILE_BACKUP_COUNT = _env_int("LOG_FILE_BACKUP_COUNT", 5)

    @classmethod
    def refresh(cls):
        """Re-read the environment-backed settings (after loading another .env)"""
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
        cls.LOG_FILE = os.getenv("LOG_FILE")
        cls.LOG_FILE_MAX_BYTES = _env_int("LOG_FILE_MAX_BYTES", 10485760)
        cls.LOG_FILE_BACKUP_COUNT = _env_int("LOG_FILE_BACKUP_COUNT", 5)


def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded environment from: {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv(override=True)

    LogConfig.refresh()


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Log records go to stderr (and optionally a rotating file), never stdout.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path

    Raises:
        OSError: If the log file cannot be opened
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )
    logging.getLogger().setLevel(log_level)

    file_path = log_file or LogConfig.LOG_FILE
    if file_path:
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


def validate_config():
    """
    Validate configuration on startup.
    Raises ValueError listing every unusable setting.
    """
    errors = []

    if not isinstance(logging.getLevelName(LogConfig.LOG_LEVEL), int):
        errors.append(f"Unknown LOG_LEVEL: {LogConfig.LOG_LEVEL}")

    max_bytes = LogConfig.LOG_FILE_MAX_BYTES
    if not isinstance(max_bytes, int):
        errors.append(f"LOG_FILE_MAX_BYTES must be an integer, got '{max_bytes}'")
    elif max_bytes <= 0:
        errors.append(f"LOG_FILE_MAX_BYTES must be positive, got {max_bytes}")

    backup_count = LogConfig.LOG_FILE_BACKUP_COUNT
    if not isinstance(backup_count, int):
        errors.append(f"LOG_FILE_BACKUP_COUNT must be an integer, got '{backup_count}'")
    elif backup_count < 0:
        errors.append(f"LOG_FILE_BACKUP_COUNT cannot be negative, got {backup_count}")

    if LogConfig.LOG_FILE and not Path(LogConfig.LOG_FILE).parent.is_dir():
        errors.append(f"LOG_FILE directory does not exist: {Path(LogConfig.LOG_FILE).parent}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.debug("Configuration validated")


__all__ = [
    'AppConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
    'validate_config',
]
