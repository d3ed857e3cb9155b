"""
Типизированные исключения для ios_interface.

Иерархия:
    IosInterfaceError (базовый)
    ├── ParseError (текст не является именем интерфейса)
    │   └── UnknownInterfaceTypeError (тип интерфейса не из каталога)
    ├── InvalidFormatError (неизвестный стиль форматирования)
    ├── CatalogError (дубли в каталоге типов)
    └── ConfigError (конфигурация)

Пример использования:
    from ios_interface.core.exceptions import ParseError

    try:
        intf = IosInterface.parse(name)
    except ParseError as e:
        logger.warning(f"Пропущен интерфейс: {e.text}")
"""

from typing import Any, Optional


class IosInterfaceError(Exception):
    """
    Базовое исключение для всех ошибок ios_interface.

    Attributes:
        message: Описание ошибки
        details: Дополнительные детали (dict)
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """Сериализация для логов/отчётов."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ParseError(IosInterfaceError, ValueError):
    """
    Текст не разбирается как имя интерфейса.

    Attributes:
        text: Исходный текст

    Пример:
        raise ParseError("Could not parse interface", text="not-an-interface")
    """

    def __init__(
        self,
        message: str,
        text: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        self.text = text
        details = details or {}
        if text is not None:
            details["text"] = str(text)[:100]  # Ограничиваем размер
        super().__init__(message, details)


class UnknownInterfaceTypeError(ParseError):
    """
    Токен типа интерфейса отсутствует в каталоге.

    Attributes:
        token: Токен (GigabitEthernet, Gi, ...)
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        text: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        self.token = token
        details = details or {}
        if token is not None:
            details["token"] = token
        super().__init__(message, text, details)


class InvalidFormatError(IosInterfaceError, ValueError):
    """
    Запрошен стиль форматирования вне {long, short}.

    Ошибка программиста, а не входных данных.
    """

    def __init__(
        self,
        message: str,
        style: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        self.style = style
        details = details or {}
        if style is not None:
            details["style"] = str(style)
        super().__init__(message, details)


class CatalogError(IosInterfaceError):
    """
    Каталог типов интерфейсов некорректен.

    Один токен принадлежит двум типам или тип описан дважды.
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.token = token
        details = details or {}
        if token is not None:
            details["token"] = token
        super().__init__(message, details)


class ConfigError(IosInterfaceError):
    """
    Ошибка конфигурации.

    Attributes:
        config_file: Путь к файлу конфигурации
        key: Ключ конфигурации с ошибкой

    Пример:
        raise ConfigError("Invalid style", config_file="ios_interface.yaml", key="output.style")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.config_file = config_file
        self.key = key
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if key:
            details["key"] = key
        super().__init__(message, details)


def format_error_for_log(error: Exception) -> str:
    """
    Форматирует ошибку для вывода в лог.

    Args:
        error: Исключение

    Returns:
        str: Отформатированная строка ошибки
    """
    if isinstance(error, IosInterfaceError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
