"""
Тесты строковых функций нормализации.

Тестируем:
- normalize_interface_long / normalize_interface_short
- normalize_interface_name со strict
- get_interface_aliases
- sort_interface_names
"""

import pytest

from ios_interface.core.exceptions import InvalidFormatError, ParseError
from ios_interface.core.normalize import (
    get_interface_aliases,
    is_physical_interface,
    normalize_interface_long,
    normalize_interface_name,
    normalize_interface_short,
    sort_interface_names,
)


class TestNormalizeInterfaceLong:
    """Тесты normalize_interface_long — расширение имён."""

    @pytest.mark.parametrize("name,expected", [
        ("Gi1/0/1", "GigabitEthernet1/0/1"),
        ("Gi 1/0/1", "GigabitEthernet1/0/1"),
        ("  Te1/2  ", "TenGigabitEthernet1/2"),
        ("interface Po1", "Port-channel1"),
        ("Twe1/0/17", "TwentyFiveGigE1/0/17"),
        ("Hu0/55", "HundredGigE0/55"),
        ("GigabitEthernet1/0/1", "GigabitEthernet1/0/1"),
    ])
    def test_expand(self, name, expected):
        assert normalize_interface_long(name) == expected

    @pytest.mark.parametrize("name", ["CPU", "Null0", "Gig1/0/1", "gi1/0/1"])
    def test_unknown_unchanged(self, name):
        assert normalize_interface_long(name) == name

    def test_empty(self):
        assert normalize_interface_long("") == ""


class TestNormalizeInterfaceShort:
    """Тесты normalize_interface_short — сокращение имён."""

    @pytest.mark.parametrize("name,expected", [
        ("GigabitEthernet0/1", "Gi0/1"),
        ("TenGigabitEthernet1/1/4", "Te1/1/4"),
        ("Port-channel10", "Po10"),
        ("Vlan100", "Vl100"),
        ("mgmt0", "mgmt0"),
        ("Serial0/1:22", "Se0/1:22"),
    ])
    def test_shorten(self, name, expected):
        assert normalize_interface_short(name) == expected


class TestNormalizeInterfaceName:
    """Тесты normalize_interface_name с параметрами."""

    def test_strict_raises(self):
        with pytest.raises(ParseError):
            normalize_interface_name("CPU", strict=True)

    def test_strict_empty_raises(self):
        with pytest.raises(ParseError):
            normalize_interface_name("", strict=True)

    def test_style_as_string(self):
        assert normalize_interface_name("Gi1/0/1", style="short") == "Gi1/0/1"

    def test_invalid_style(self):
        with pytest.raises(InvalidFormatError):
            normalize_interface_name("Gi1/0/1", style="tiny")

    def test_too_many_digits_unchanged(self):
        name = "Gi" + "1" * 5000
        assert normalize_interface_name(name) == name
        assert normalize_interface_name(name, style="short") == name
        with pytest.raises(ParseError):
            normalize_interface_name(name, strict=True)

    @pytest.mark.parametrize("value", [123, ["Gi1"], ("Gi1",)])
    def test_non_string_unchanged(self, value):
        """Не-строка возвращается как есть, без AttributeError."""
        assert normalize_interface_name(value) is value
        assert normalize_interface_long(value) is value

    def test_non_string_strict_raises(self):
        with pytest.raises(ParseError):
            normalize_interface_name(123, strict=True)


class TestGetInterfaceAliases:
    """Тесты get_interface_aliases."""

    def test_short_name(self):
        assert get_interface_aliases("Gi0/1") == ["GigabitEthernet0/1", "Gi0/1"]

    def test_long_name(self):
        assert get_interface_aliases("GigabitEthernet0/1") == ["GigabitEthernet0/1", "Gi0/1"]

    def test_original_spelling_kept(self):
        aliases = get_interface_aliases("Te 1/2")
        assert aliases == ["TenGigabitEthernet1/2", "Te1/2", "Te 1/2"]

    def test_unknown(self):
        assert get_interface_aliases("CPU") == ["CPU"]

    def test_empty(self):
        assert get_interface_aliases("") == []

    def test_non_string(self):
        assert get_interface_aliases(123) == [123]


class TestIsPhysicalInterface:
    """Тесты is_physical_interface."""

    @pytest.mark.parametrize("name,expected", [
        ("Gi1/0/1", True),
        ("mgmt0", True),
        ("Vlan10", False),
        ("Lo0", False),
        ("Tu1", False),
        ("CPU", None),
        ("", None),
        (123, None),
        ("Gi" + "1" * 5000, None),
    ])
    def test_physical(self, name, expected):
        assert is_physical_interface(name) is expected


class TestSortInterfaceNames:
    """Тесты sort_interface_names."""

    def test_sorted(self):
        names = [
            "GigabitEthernet1/0/2", "Vlan200", "FastEthernet1/0/2", "GigabitEthernet1/0/1",
            "GigabitEthernet1/1/1", "GigabitEthernet3/0/1", "Vlan100", "FastEthernet1/0/1",
            "Vlan99", "GigabitEthernet1/0/12",
        ]
        assert sort_interface_names(names) == [
            "FastEthernet1/0/1", "FastEthernet1/0/2", "GigabitEthernet1/0/1",
            "GigabitEthernet1/1/1", "GigabitEthernet1/0/2", "GigabitEthernet1/0/12",
            "GigabitEthernet3/0/1", "Vlan99", "Vlan100", "Vlan200",
        ]

    def test_unparsed_last_in_original_order(self):
        names = ["Switch", "Vlan100", "CPU", "Gi1/0/2", "Vlan99"]
        assert sort_interface_names(names) == ["Gi1/0/2", "Vlan99", "Vlan100", "Switch", "CPU"]

    def test_original_spelling_kept_and_stable(self):
        names = ["GigabitEthernet1/0/1", "Gi1/0/1", "Fa0/1"]
        assert sort_interface_names(names) == ["Fa0/1", "GigabitEthernet1/0/1", "Gi1/0/1"]

    def test_empty(self):
        assert sort_interface_names([]) == []

    def test_too_many_digits_last(self):
        long_vlan = "Vlan" + "9" * 5000
        assert sort_interface_names([long_vlan, "Gi1"]) == ["Gi1", long_vlan]

    def test_non_string_last(self):
        assert sort_interface_names([123, "Vlan2", "Gi1"]) == ["Gi1", "Vlan2", 123]
