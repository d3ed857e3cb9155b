"""
Тесты конфигурации: pydantic схема и загрузка из YAML.
"""

import pytest

from ios_interface.config import load_config
from ios_interface.core.config_schema import (
    AppConfig,
    get_default_config,
    validate_config,
)
from ios_interface.core.exceptions import ConfigError


class TestDefaultConfig:
    """Тесты конфигурации по умолчанию."""

    def test_get_default_config(self):
        config = get_default_config()
        assert isinstance(config, AppConfig)

    def test_default_output(self):
        config = get_default_config()
        assert config.output.style == "long"
        assert config.output.sort is False
        assert config.output.strict is False

    def test_default_logging(self):
        config = get_default_config()
        assert config.logging.level == "WARNING"
        assert config.logging.json_format is False


class TestValidateConfig:
    """Тесты валидации словаря конфигурации."""

    def test_empty_dict_uses_defaults(self):
        assert validate_config({}).output.style == "long"

    def test_partial_config(self):
        config = validate_config({"output": {"style": "short"}})
        assert config.output.style == "short"
        assert config.logging.level == "WARNING"

    def test_invalid_style(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config({"output": {"style": "medium"}})
        assert exc_info.value.key == "output.style"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError):
            validate_config({"logging": {"level": "verbose"}})


class TestLoadConfig:
    """Тесты load_config."""

    def test_no_file(self, isolated_config):
        assert load_config() == get_default_config()

    def test_explicit_file(self, isolated_config):
        path = isolated_config / "custom.yaml"
        path.write_text("output:\n  style: short\n  sort: true\n", encoding="utf-8")

        config = load_config(str(path))
        assert config.output.style == "short"
        assert config.output.sort is True

    def test_file_found_in_cwd(self, isolated_config):
        (isolated_config / "ios_interface.yaml").write_text(
            "logging:\n  level: DEBUG\n", encoding="utf-8",
        )
        assert load_config().logging.level == "DEBUG"

    def test_empty_file(self, isolated_config):
        (isolated_config / "ios_interface.yaml").write_text("", encoding="utf-8")
        assert load_config() == get_default_config()

    def test_missing_explicit_file(self, isolated_config):
        with pytest.raises(ConfigError):
            load_config(str(isolated_config / "missing.yaml"))

    def test_not_a_mapping(self, isolated_config):
        path = isolated_config / "list.yaml"
        path.write_text("- long\n- short\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_broken_yaml(self, isolated_config):
        path = isolated_config / "broken.yaml"
        path.write_text("output: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_env_overrides_file(self, isolated_config, monkeypatch):
        (isolated_config / "ios_interface.yaml").write_text(
            "output:\n  style: long\n", encoding="utf-8",
        )
        monkeypatch.setenv("IOS_INTERFACE_STYLE", "SHORT")
        monkeypatch.setenv("IOS_INTERFACE_LOG_LEVEL", "info")

        config = load_config()
        assert config.output.style == "short"
        assert config.logging.level == "INFO"
