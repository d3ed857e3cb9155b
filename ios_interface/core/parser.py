"""
Разбор текстового имени интерфейса.

Поддерживаемые формы:
    xx1             port
    xx1/0           slot/port
    xx1/0/1         module/slot/port
    xx1/0/1/2       chassis/module/slot/port
    xx1/0/1.nnn     + subinterface
    xx1/10:22       + channel
    interface xx1   префикс из running-config

Числовые группы выравниваются по правому краю: последняя группа
всегда port, недостающие отбрасываются слева (chassis, module, slot).
"""

import logging
import re
from typing import NamedTuple, Optional

from .constants.interfaces import (
    InterfaceType,
    INTERFACE_TYPE_LOOKUP,
    get_interface_tokens,
)

logger = logging.getLogger(__name__)


class ParsedInterfaceName(NamedTuple):
    """Поля, извлечённые из имени интерфейса."""
    type: InterfaceType
    chassis: Optional[int] = None
    module: Optional[int] = None
    slot: Optional[int] = None
    port: Optional[int] = None
    sub_interface: Optional[int] = None
    channel: Optional[int] = None


_NUMERIC_FIELDS = ("chassis", "module", "slot", "port", "sub_interface", "channel")


def _build_pattern() -> "re.Pattern[str]":
    """Собирает регулярку из токенов каталога."""
    tokens = "|".join(re.escape(token) for token in get_interface_tokens())
    return re.compile(
        rf"""
        (?:interface\ )?
        (?P<type>{tokens})\ ?
        (?:
            (?:
                (?:(?P<chassis>[0-9]+)/)?
                (?P<module>[0-9]+)/
            )?
            (?P<slot>[0-9]+)/
        )?
        (?P<port>[0-9]+)
        (?:\.(?P<sub_interface>[0-9]+))?
        (?::(?P<channel>[0-9]+))?
        """,
        re.VERBOSE,
    )


INTERFACE_PATTERN = _build_pattern()


def match_interface_name(text: str) -> Optional[ParsedInterfaceName]:
    """
    Разбирает имя интерфейса на поля.

    Совпадение должно покрывать всю строку: лишние символы
    в начале или конце означают неудачу, а не частичный разбор.

    Args:
        text: Имя интерфейса (Gi1/0/1, interface Serial0/1:22)

    Returns:
        ParsedInterfaceName или None если текст не разобран

    Examples:
        >>> match_interface_name("Fa0/0/1.123")
        ParsedInterfaceName(type=<InterfaceType.FAST_ETHERNET: 4>, chassis=None, module=0, slot=0, port=1, sub_interface=123, channel=None)
        >>> match_interface_name("not-an-interface") is None
        True
    """
    if not isinstance(text, str):
        return None

    match = INTERFACE_PATTERN.fullmatch(text)
    if match is None:
        logger.debug(f"Не удалось разобрать интерфейс: {text!r}")
        return None

    interface_type = INTERFACE_TYPE_LOOKUP.get(match.group("type"))
    if interface_type is None:
        logger.debug(f"Неизвестный тип интерфейса: {match.group('type')!r}")
        return None

    values = {}
    for field_name in _NUMERIC_FIELDS:
        value = match.group(field_name)
        if value is None:
            values[field_name] = None
            continue
        try:
            values[field_name] = int(value)
        except ValueError as e:
            # лимит длины int/str (sys.set_int_max_str_digits)
            logger.debug(f"Не удалось разобрать {field_name} ({len(value)} цифр): {e}")
            return None

    return ParsedInterfaceName(type=interface_type, **values)
