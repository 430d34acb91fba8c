"""
Centralized Configuration Module

All application constants, logging configuration, and settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
from dotenv import load_dotenv

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

# ============================================================================
# Environment Loading
# ============================================================================

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
            logging.getLogger(__name__).info(f"Loaded environment from: {env_file}")
        else:
            logging.getLogger(__name__).warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv(override=True)


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    # Application Info
    APP_NAME = "todocat"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Fans out to a to-do service and a cat fact service and composes the answers"

    # Server
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))

    # Upstream services
    TODO_URL = os.getenv("TODO_URL", "https://jsonplaceholder.typicode.com")
    CATS_URL = os.getenv("CATS_URL", "https://cat-fact.herokuapp.com")

    # No timeout unless one is set explicitly
    UPSTREAM_TIMEOUT = _optional_float(os.getenv("UPSTREAM_TIMEOUT"))

    USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

    @classmethod
    def reload(cls):
        """Re-read env-driven attributes (after load_environment)"""
        cls.HOST = os.getenv("HOST", "127.0.0.1")
        cls.PORT = int(os.getenv("PORT", "3000"))
        cls.TODO_URL = os.getenv("TODO_URL", "https://jsonplaceholder.typicode.com")
        cls.CATS_URL = os.getenv("CATS_URL", "https://cat-fact.herokuapp.com")
        cls.UPSTREAM_TIMEOUT = _optional_float(os.getenv("UPSTREAM_TIMEOUT"))
        FeatureFlags.CONCURRENT_DOUBLE = os.getenv("CONCURRENT_DOUBLE", "false").lower() == "true"
        LogConfig.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        LogConfig.LOG_FILE = os.getenv("LOG_FILE")


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.INFO)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )

    if log_file or LogConfig.LOG_FILE:
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.LOG_FILE
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    # Suppress noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Feature Flags
# ============================================================================

class FeatureFlags:
    """Feature flags for optional functionality"""

    # Fetch the to-do item and the cat fact at the same time in /double
    CONCURRENT_DOUBLE = os.getenv("CONCURRENT_DOUBLE", "false").lower() == "true"


# ============================================================================
# Validation
# ============================================================================

def _check_base_url(name: str, url: str, errors: list):
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        errors.append(f"{name} must use http or https (got '{url}')")
    elif not parsed.hostname:
        errors.append(f"{name} has no host (got '{url}')")
    else:
        try:
            port = parsed.port
        except ValueError:
            port = -1
        if port is not None and not 1 <= port <= 65535:
            errors.append(f"{name} has an invalid port (got '{url}')")


def validate_config(server_config) -> None:
    """
    Validate configuration on startup.
    Raises ValueError if critical configuration is invalid.

    Args:
        server_config: ServerConfig about to be served
    """
    errors = []

    _check_base_url("TODO_URL", server_config.todo_url, errors)
    _check_base_url("CATS_URL", server_config.cats_url, errors)

    if not 1 <= server_config.port <= 65535:
        errors.append(f"PORT must be between 1 and 65535 (got {server_config.port})")

    if server_config.upstream_timeout is not None and server_config.upstream_timeout <= 0:
        errors.append(f"UPSTREAM_TIMEOUT must be positive (got {server_config.upstream_timeout})")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    if server_config.upstream_timeout is None:
        logger.warning("No upstream timeout configured - a hung upstream blocks its request indefinitely")

    logger.info(f"Configuration validated: todo={server_config.todo_url}, cats={server_config.cats_url}")


__all__ = [
    'AppConfig',
    'LogConfig',
    'FeatureFlags',
    'load_environment',
    'setup_logging',
    'validate_config',
]
