"""Logging configuration for Prediction Diary"""
import logging
import sys

from prediction_diary.infrastructure.config.settings import (Settings,
                                                             get_settings)


def setup_logging(settings: Settings | None = None):
    """Configure application-wide logging from the given (or global) settings"""
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module"""
    return logging.getLogger(name)
