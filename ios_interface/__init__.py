"""
ios_interface — разбор и нормализация имён интерфейсов.

    from ios_interface import IosInterface

    intf = IosInterface.parse("Gi1/0/1.2000")
    str(intf)              # GigabitEthernet1/0/1.2000
    intf.format("short")   # Gi1/0/1.2000
    sorted([...])          # type, chassis, module, port, slot, sub, channel
"""

from typing import Optional

from .core import (
    InterfaceType,
    InterfaceDefinition,
    INTERFACE_DEFINITIONS,
    IosInterface,
    FormatType,
    ParsedInterfaceName,
    IosInterfaceError,
    ParseError,
    UnknownInterfaceTypeError,
    InvalidFormatError,
    CatalogError,
    ConfigError,
    compare_interfaces,
    format_interface,
    get_interface_type,
    get_interface_name,
    get_interface_short_name,
    is_physical_type,
    match_interface_name,
    sort_key,
    normalize_interface_name,
    normalize_interface_long,
    normalize_interface_short,
    get_interface_aliases,
    is_physical_interface,
    sort_interface_names,
)

__version__ = "1.0.0"


def parse(text: str) -> IosInterface:
    """Разбирает имя интерфейса (ParseError при неудаче)."""
    return IosInterface.parse(text)


def try_parse(text: str) -> Optional[IosInterface]:
    """Разбирает имя интерфейса, None при неудаче."""
    return IosInterface.try_parse(text)


__all__ = [
    "InterfaceType",
    "InterfaceDefinition",
    "INTERFACE_DEFINITIONS",
    "IosInterface",
    "FormatType",
    "ParsedInterfaceName",
    "IosInterfaceError",
    "ParseError",
    "UnknownInterfaceTypeError",
    "InvalidFormatError",
    "CatalogError",
    "ConfigError",
    "compare_interfaces",
    "format_interface",
    "get_interface_type",
    "get_interface_name",
    "get_interface_short_name",
    "is_physical_type",
    "match_interface_name",
    "sort_key",
    "normalize_interface_name",
    "normalize_interface_long",
    "normalize_interface_short",
    "get_interface_aliases",
    "is_physical_interface",
    "sort_interface_names",
    "parse",
    "try_parse",
]
