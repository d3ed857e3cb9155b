"""
Нормализация имён интерфейсов на уровне строк.

Обёртки над IosInterface для кода, который работает со строками:
выгрузки, сравнение имён из разных команд, сортировка списков.

    normalize_interface_long("Gi 1/0/1")   → GigabitEthernet1/0/1
    normalize_interface_short("TenGigabitEthernet1/2") → Te1/2
"""

import logging
from typing import Iterable, List, Optional, Union

from .exceptions import ParseError
from .formatter import FormatType, resolve_format_type
from .models import IosInterface
from .ordering import sort_key

logger = logging.getLogger(__name__)


def _try_parse_name(name: str) -> Optional[IosInterface]:
    """Разбор с обрезкой пробелов; не-строки и пустые имена — None."""
    if not name or not isinstance(name, str):
        return None
    return IosInterface.try_parse(name.strip())


def normalize_interface_name(
    name: str,
    style: Union[FormatType, str, None] = FormatType.LONG,
    strict: bool = False,
) -> str:
    """
    Приводит имя интерфейса к каноническому виду.

    Args:
        name: Имя в любом поддерживаемом формате
        style: long или short
        strict: Бросать ParseError вместо возврата исходного имени

    Returns:
        str: Каноническое имя или исходное (без изменений), если не разобрано

    Raises:
        ParseError: strict=True и имя не разобрано
        InvalidFormatError: Неизвестный стиль
    """
    format_type = resolve_format_type(style)
    if not name:
        if strict:
            raise ParseError("Пустое имя интерфейса", text=name)
        return ""

    interface = _try_parse_name(name)
    if interface is None:
        if strict:
            raise ParseError(f"Could not parse interface: {name}", text=name)
        return name

    return interface.format(format_type)


def normalize_interface_long(name: str) -> str:
    """Gi1/0/1 → GigabitEthernet1/0/1"""
    return normalize_interface_name(name, FormatType.LONG)


def normalize_interface_short(name: str) -> str:
    """GigabitEthernet1/0/1 → Gi1/0/1"""
    return normalize_interface_name(name, FormatType.SHORT)


def get_interface_aliases(name: str) -> List[str]:
    """
    Возвращает все варианты написания интерфейса.

    Examples:
        >>> get_interface_aliases("Gi0/1")
        ['GigabitEthernet0/1', 'Gi0/1']
        >>> get_interface_aliases("interface Te1/2")
        ['TenGigabitEthernet1/2', 'Te1/2', 'interface Te1/2']
    """
    if not name:
        return []

    interface = _try_parse_name(name)
    if interface is None:
        return [name]

    aliases = []
    for candidate in (interface.format(FormatType.LONG), interface.format(FormatType.SHORT), name):
        if candidate not in aliases:
            aliases.append(candidate)
    return aliases


def is_physical_interface(name: str) -> Optional[bool]:
    """
    Проверяет, физический ли интерфейс.

    Returns:
        bool или None если имя не разобрано
    """
    interface = _try_parse_name(name)
    if interface is None:
        return None
    return interface.is_physical


def sort_interface_names(names: Iterable[str]) -> List[str]:
    """
    Сортирует имена интерфейсов в порядке IosInterface.

    Нераспознанные имена идут в конце в исходном порядке.
    Исходное написание имён сохраняется.

    Example:
        >>> sort_interface_names(["Vlan100", "Gi1/0/2", "Vlan99", "foo"])
        ['Gi1/0/2', 'Vlan99', 'Vlan100', 'foo']
    """
    parsed = []
    unparsed = []
    for name in names:
        interface = _try_parse_name(name)
        if interface is None:
            unparsed.append(name)
        else:
            parsed.append((interface, name))

    if unparsed:
        logger.debug(f"sort_interface_names: не разобрано {len(unparsed)}: {unparsed[:5]}")

    parsed.sort(key=lambda item: sort_key(item[0]))
    return [name for _, name in parsed] + unparsed
