import logging
import os
import sys

LOG_LEVEL_ENV = "RSA_KEYCONV_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

_loggers = {}


def is_valid_level(level) -> bool:
    return isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int)


def get_logger(name: str = "rsa-keyconv") -> logging.Logger:
    """Returns a standardized logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        env_level = os.getenv(LOG_LEVEL_ENV)
        if env_level and not is_valid_level(env_level):
            # Runs at import time: a typo in the env var must not break imports
            logger.setLevel(DEFAULT_LEVEL)
            logger.warning(f"Ignoring unknown {LOG_LEVEL_ENV}={env_level!r}, using {DEFAULT_LEVEL}")
        else:
            logger.setLevel((env_level or DEFAULT_LEVEL).upper())
    _loggers[name] = logger
    return logger


def set_level(level: str) -> None:
    """Apply a level (e.g. "DEBUG") to every logger handed out by get_logger."""
    if not is_valid_level(level):
        raise ValueError(f"Unknown log level: {level!r}")
    for logger in _loggers.values():
        logger.setLevel(level.upper())
