"""JSON logging to stdout for the bot process.

Every record, including discord.py gateway events, is written as one JSON
object with `severity`, `logger` and a static `service` field.
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "reika",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        # discord.py logs every gateway heartbeat at DEBUG
        "discord": {"level": "INFO"},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (the FastAPI lifespan does this).
    The bot is started with ``Client.start()``, which installs no handler of
    its own, so discord.py records propagate here.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)
