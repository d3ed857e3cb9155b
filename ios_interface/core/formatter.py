"""
Форматирование интерфейса обратно в текст.

    GIGABIT_ETHERNET, module=1, slot=0, port=1, sub=2000
        LONG  → GigabitEthernet1/0/1.2000
        SHORT → Gi1/0/1.2000
"""

from enum import Enum
from typing import TYPE_CHECKING, Union

from .constants.interfaces import get_interface_name, get_interface_short_name
from .exceptions import InvalidFormatError

if TYPE_CHECKING:
    from .models import IosInterface


class FormatType(str, Enum):
    """Стиль вывода имени интерфейса."""
    DEFAULT = "default"  # = LONG
    LONG = "long"
    SHORT = "short"


def resolve_format_type(style: Union[FormatType, str, None]) -> FormatType:
    """
    Приводит стиль к FormatType.

    Принимает FormatType, его строковое значение в любом регистре
    или None (= DEFAULT).

    Raises:
        InvalidFormatError: Стиль не из {default, long, short}
    """
    if style is None:
        return FormatType.DEFAULT
    if isinstance(style, FormatType):
        return style
    if isinstance(style, str):
        try:
            return FormatType(style.strip().lower())
        except ValueError:
            pass
    raise InvalidFormatError("Неизвестный стиль форматирования", style=style)


def format_positions(interface: "IosInterface") -> str:
    """
    Числовая часть имени без типа: 1/0/1.2000:5

    Отсутствующие поля пропускаются без заполнителей.
    """
    positions = [
        str(value)
        for value in (interface.chassis, interface.module, interface.slot, interface.port)
        if value is not None
    ]
    result = "/".join(positions)

    if interface.sub_interface is not None:
        result += f".{interface.sub_interface}"
    if interface.channel is not None:
        result += f":{interface.channel}"

    return result


def format_interface(
    interface: "IosInterface",
    style: Union[FormatType, str, None] = FormatType.LONG,
) -> str:
    """
    Форматирует интерфейс в каноническое имя.

    Args:
        interface: Интерфейс
        style: LONG (GigabitEthernet1/0/1) или SHORT (Gi1/0/1)

    Returns:
        str: Имя интерфейса

    Raises:
        InvalidFormatError: Неизвестный стиль
    """
    format_type = resolve_format_type(style)

    if format_type in (FormatType.DEFAULT, FormatType.LONG):
        prefix = get_interface_name(interface.type)
    elif format_type == FormatType.SHORT:
        prefix = get_interface_short_name(interface.type)
    else:
        raise InvalidFormatError("Неизвестный стиль форматирования", style=style)

    return prefix + format_positions(interface)
