"""
Pydantic схемы для валидации ios_interface.yaml.

Валидация происходит при загрузке конфигурации.
Ошибки валидации выбрасывают ConfigError.

Пример использования:
    from ios_interface.core.config_schema import validate_config

    config_dict = yaml.safe_load(open("ios_interface.yaml"))
    validated = validate_config(config_dict)  # raises ConfigError on failure
"""

from typing import Optional

from pydantic import BaseModel, Field

from .exceptions import ConfigError


class OutputConfig(BaseModel):
    """Настройки вывода имён."""
    style: str = Field(default="long", pattern="^(long|short)$")
    sort: bool = False
    strict: bool = False


class LoggingConfig(BaseModel):
    """Настройки логирования."""
    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False


class AppConfig(BaseModel):
    """Полная конфигурация приложения."""
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config_dict: dict, config_file: Optional[str] = None) -> AppConfig:
    """
    Валидирует словарь конфигурации.

    Args:
        config_dict: Словарь из YAML
        config_file: Путь к файлу (для сообщения об ошибке)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: При ошибке валидации
    """
    try:
        return AppConfig(**config_dict)
    except Exception as e:
        # Форматируем ошибку Pydantic в читаемый вид
        error_msg = str(e)
        key = None
        if hasattr(e, "errors"):
            errors = e.errors()
            if errors:
                first_error = errors[0]
                key = ".".join(str(x) for x in first_error.get("loc", []))
                msg = first_error.get("msg", "Unknown error")
                error_msg = f"{key}: {msg}"

        raise ConfigError(
            message=f"Ошибка валидации конфигурации: {error_msg}",
            config_file=config_file,
            key=key,
        ) from e


def get_default_config() -> AppConfig:
    """Возвращает конфигурацию по умолчанию."""
    return AppConfig()
