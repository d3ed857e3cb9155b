"""
Тесты для типизированных исключений.

Проверяет:
- Создание исключений
- Иерархию (ParseError — это и ValueError)
- Сериализацию to_dict()
- Форматирование для логов
"""

import pytest

from ios_interface.core.exceptions import (
    IosInterfaceError,
    ParseError,
    UnknownInterfaceTypeError,
    InvalidFormatError,
    CatalogError,
    ConfigError,
    format_error_for_log,
)


class TestIosInterfaceError:
    """Тесты базового исключения."""

    def test_basic_creation(self):
        error = IosInterfaceError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_with_details(self):
        error = IosInterfaceError("Error", details={"key": "value"})

        assert error.details == {"key": "value"}
        assert "key='value'" in str(error)

    def test_to_dict(self):
        error = IosInterfaceError("Error", details={"foo": "bar"})
        data = error.to_dict()

        assert data["error_type"] == "IosInterfaceError"
        assert data["message"] == "Error"
        assert data["details"]["foo"] == "bar"


class TestParseErrors:
    """Тесты ошибок разбора."""

    def test_parse_error(self):
        error = ParseError("Could not parse interface", text="foo")

        assert error.text == "foo"
        assert error.details["text"] == "foo"
        assert isinstance(error, IosInterfaceError)
        assert isinstance(error, ValueError)

    def test_long_text_truncated(self):
        error = ParseError("Could not parse interface", text="x" * 500)
        assert len(error.details["text"]) == 100

    def test_unknown_type_is_parse_error(self):
        error = UnknownInterfaceTypeError("Unknown", token="Gig")

        assert isinstance(error, ParseError)
        assert error.token == "Gig"
        assert error.details["token"] == "Gig"

    def test_catch_as_value_error(self):
        with pytest.raises(ValueError):
            raise UnknownInterfaceTypeError("Unknown", token="Gig")


class TestOtherErrors:
    """InvalidFormatError, CatalogError, ConfigError."""

    def test_invalid_format(self):
        error = InvalidFormatError("Bad style", style=42)
        assert error.style == 42
        assert error.details["style"] == "42"
        assert isinstance(error, ValueError)

    def test_catalog_error(self):
        error = CatalogError("Duplicate", token="Tw")
        assert error.token == "Tw"
        assert not isinstance(error, ValueError)

    def test_config_error(self):
        error = ConfigError("Invalid", config_file="ios_interface.yaml", key="output.style")
        assert error.details == {"config_file": "ios_interface.yaml", "key": "output.style"}


class TestFormatErrorForLog:
    """Тесты format_error_for_log."""

    def test_own_error(self):
        error = ParseError("Could not parse interface", text="foo")
        assert format_error_for_log(error) == "Could not parse interface (text='foo')"

    def test_standard_error(self):
        assert format_error_for_log(KeyError("x")) == "KeyError: 'x'"
