"""Logging setup for the whole process."""

import logging.config

from smartbill.infrastructure.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """
    Send log records to a console handler on the root logger.

    smartbill loggers and the audit logger propagate to root, so anything
    else attached there (test capture, log shippers) sees them too.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": settings.log_format},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "smartbill": {"level": settings.log_level},
                settings.audit_logger_name: {"level": settings.log_level},
            },
            "root": {
                "handlers": ["console"],
                "level": settings.log_level,
            },
        }
    )
