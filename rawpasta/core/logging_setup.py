import logging
import logging.config
from datetime import datetime

from pytz import timezone


class CustomFormatter(logging.Formatter):
    """Форматтер с временем в заданной часовой зоне"""

    def __init__(self, tz_name, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.tz = timezone(tz_name)

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, self.tz)
        return dt.strftime(datefmt) if datefmt else dt.isoformat()


def setup_logging(level: str = "info", tz_name: str = "UTC") -> logging.Logger:
    """Настройка логирования приложения"""
    loglevel = logging.DEBUG if level.lower() == "debug" else getattr(logging, level.upper(), logging.INFO)

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "()": CustomFormatter,
                "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "tz_name": tz_name,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": loglevel,
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": loglevel,
        },
    }

    logging.config.dictConfig(logging_config)

    # SQL-логи только в режиме отладки
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if loglevel == logging.DEBUG else logging.WARNING)

    return logging.getLogger("rawpasta")
