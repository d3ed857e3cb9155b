"""
Логирование для ios_interface.

Библиотека сама ничего не настраивает: модули пишут в
logging.getLogger(__name__) на уровне DEBUG. Настройка handlers —
дело приложения (CLI вызывает setup_logging).

Пример использования:
    from ios_interface.core.logging import setup_logging, get_logger

    setup_logging(json_format=True)

    logger = get_logger(__name__)
    logger.info("Нормализация", operation="normalize", count=12)

Формат вывода (JSON):
    {"timestamp": "2026-10-17T10:30:15.123456", "level": "INFO",
     "message": "Нормализация", "logger": "ios_interface.cli",
     "operation": "normalize", "count": 12}
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict


class JSONFormatter(logging.Formatter):
    """
    JSON форматтер для logging.

    Стандартные поля: timestamp, level, message, logger.
    Extra поля из logger.info(..., extra={...}) добавляются как есть.
    """

    # Поля logging.LogRecord которые не нужно включать в JSON
    RESERVED_ATTRS = {
        "args", "asctime", "created", "exc_info", "exc_text",
        "filename", "funcName", "levelname", "levelno", "lineno",
        "module", "msecs", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread",
        "threadName", "taskName", "message",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    """
    Human-readable форматтер.

    Формат: TIMESTAMP - LEVEL - MESSAGE (operation=X, text=Y)
    """

    EXTRA_FIELDS = ("operation", "text", "style", "count")

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        message = record.getMessage()

        extras = []
        for attr in self.EXTRA_FIELDS:
            value = getattr(record, attr, None)
            if value is not None and value != "":
                extras.append(f"{attr}={value}")

        extra_str = f" ({', '.join(extras)})" if extras else ""
        result = f"{timestamp} - {level} - {message}{extra_str}"

        if record.exc_info:
            result += "\n" + self.formatException(record.exc_info)

        return result


class StructuredLogger:
    """
    Логгер CLI с именованными полями для форматтеров.

        logger.info("Нормализация завершена", operation="normalize", count=3)

    Поля попадают в record как extra: HumanFormatter выводит их
    в скобках, JSONFormatter отдельными ключами.
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def info(self, message: str, **fields: Any) -> None:
        self._logger.info(message, extra=fields)

    def error(self, message: str, **fields: Any) -> None:
        self._logger.error(message, extra=fields)


# Кэш логгеров
_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """
    Получает или создаёт StructuredLogger.

    Args:
        name: Имя логгера (обычно __name__)
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def setup_logging(
    json_format: bool = False,
    level: int = logging.INFO,
    stream: Any = None,
) -> None:
    """
    Настраивает корневой логгер.

    Args:
        json_format: True для JSON, False для human-readable
        level: Уровень логирования
        stream: Поток вывода (по умолчанию sys.stderr)

    Example:
        # CLI с флагом --json-logs
        setup_logging(json_format=args.json_logs)
    """
    if stream is None:
        stream = sys.stderr

    root_logger = logging.getLogger()

    # Удаляем существующие handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())

    root_logger.addHandler(handler)
    root_logger.setLevel(level)
