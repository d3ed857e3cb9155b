"""
Константы и каталоги ios_interface.

Модули:
- interfaces.py: каталог типов интерфейсов и лукапы по нему
"""

from .interfaces import (
    InterfaceType,
    InterfaceDefinition,
    INTERFACE_DEFINITIONS,
    INTERFACE_DEFINITION_MAP,
    INTERFACE_TYPE_LOOKUP,
    INTERFACE_NAME_MAP,
    INTERFACE_SHORT_MAP,
    INTERFACE_PHYSICAL_MAP,
    build_type_lookup,
    get_interface_type,
    get_interface_name,
    get_interface_short_name,
    get_interface_tokens,
    is_physical_type,
)

__all__ = [
    "InterfaceType",
    "InterfaceDefinition",
    "INTERFACE_DEFINITIONS",
    "INTERFACE_DEFINITION_MAP",
    "INTERFACE_TYPE_LOOKUP",
    "INTERFACE_NAME_MAP",
    "INTERFACE_SHORT_MAP",
    "INTERFACE_PHYSICAL_MAP",
    "build_type_lookup",
    "get_interface_type",
    "get_interface_name",
    "get_interface_short_name",
    "get_interface_tokens",
    "is_physical_type",
]
