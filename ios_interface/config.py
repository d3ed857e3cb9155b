"""
Загрузчик конфигурации из ios_interface.yaml.

Порядок (каждый следующий перекрывает предыдущий):
1. Значения по умолчанию (AppConfig)
2. YAML файл: явный путь или ios_interface.yaml / .ios_interface.yaml
3. Переменные окружения IOS_INTERFACE_STYLE, IOS_INTERFACE_LOG_LEVEL

Пример ios_interface.yaml:
    output:
      style: short
      sort: true
    logging:
      level: DEBUG
"""

import logging
import os
from typing import Any, Dict, Optional

import yaml

from .core.config_schema import AppConfig, validate_config
from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Файлы, которые ищутся в текущей директории
CONFIG_SEARCH_PATHS = (
    "ios_interface.yaml",
    "ios_interface.yml",
    ".ios_interface.yaml",
)

# Переменная окружения → (секция, ключ)
ENV_OVERRIDES = {
    "IOS_INTERFACE_STYLE": ("output", "style"),
    "IOS_INTERFACE_LOG_LEVEL": ("logging", "level"),
}


def find_config_file() -> Optional[str]:
    """Ищет файл конфигурации в текущей директории."""
    for path in CONFIG_SEARCH_PATHS:
        if os.path.exists(path):
            return path
    return None


def _read_yaml(config_file: str) -> Dict[str, Any]:
    """Читает YAML файл конфигурации."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Не удалось прочитать конфигурацию: {e}", config_file=config_file) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Некорректный YAML: {e}", config_file=config_file) from e

    if not isinstance(data, dict):
        raise ConfigError("Конфигурация должна быть словарём", config_file=config_file)
    return data


def _apply_env(data: Dict[str, Any]) -> None:
    """Применяет переопределения из переменных окружения."""
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        section_data = data.setdefault(section, {})
        if not isinstance(section_data, dict):
            raise ConfigError(f"Секция {section} должна быть словарём", key=section)
        section_data[key] = value.upper() if section == "logging" else value.lower()
        logger.debug(f"{env_name} переопределяет {section}.{key}")


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """
    Загружает конфигурацию.

    Args:
        config_file: Путь к YAML файлу (опционально)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: Файл не найден, не читается или не проходит валидацию
    """
    if config_file and not os.path.exists(config_file):
        raise ConfigError("Файл конфигурации не найден", config_file=config_file)

    config_file = config_file or find_config_file()
    data: Dict[str, Any] = {}
    if config_file:
        data = _read_yaml(config_file)
        logger.debug(f"Конфигурация загружена из {config_file}")

    _apply_env(data)
    return validate_config(data, config_file=config_file)
