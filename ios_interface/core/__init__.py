"""
Core модули ios_interface.

Содержит:
- constants: каталог типов интерфейсов
- parser: разбор текстового имени
- formatter: вывод в полном/коротком виде
- ordering: порядок сортировки
- models: IosInterface
- normalize: строковые обёртки
- exceptions: типизированные исключения
- logging: форматтеры и настройка логов
"""

from .constants import (
    InterfaceType,
    InterfaceDefinition,
    INTERFACE_DEFINITIONS,
    get_interface_type,
    get_interface_name,
    get_interface_short_name,
    is_physical_type,
)
from .exceptions import (
    IosInterfaceError,
    ParseError,
    UnknownInterfaceTypeError,
    InvalidFormatError,
    CatalogError,
    ConfigError,
    format_error_for_log,
)
from .formatter import FormatType, format_interface
from .models import IosInterface
from .ordering import compare_interfaces, sort_key
from .parser import ParsedInterfaceName, match_interface_name
from .normalize import (
    normalize_interface_name,
    normalize_interface_long,
    normalize_interface_short,
    get_interface_aliases,
    is_physical_interface,
    sort_interface_names,
)
