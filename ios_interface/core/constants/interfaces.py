"""
Каталог типов интерфейсов.

Фиксированная таблица типов: полное имя, сокращения, физический/логический.
Из таблицы один раз при импорте строятся read-only словари:
- INTERFACE_TYPE_LOOKUP: токен (полное имя или сокращение) → InterfaceType
- INTERFACE_NAME_MAP: InterfaceType → полное имя
- INTERFACE_SHORT_MAP: InterfaceType → каноническое сокращение
- INTERFACE_PHYSICAL_MAP: InterfaceType → физический ли интерфейс

Токены регистрозависимые: "Gi" есть, "gi" нет.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..exceptions import CatalogError, UnknownInterfaceTypeError

logger = logging.getLogger(__name__)


class InterfaceType(IntEnum):
    """
    Семейство интерфейса.

    Порядок объявления = порядок сортировки интерфейсов.
    """
    APP_GIGABIT_ETHERNET = 1
    BLUETOOTH = 2
    ETHERNET = 3
    FAST_ETHERNET = 4
    FORTY_GIGABIT_ETHERNET = 5
    GIGABIT_ETHERNET = 6
    HUNDRED_GIGABIT_ETHERNET = 7
    LOOPBACK = 8
    MANAGEMENT = 9
    PORT_CHANNEL = 10
    SERIAL = 11
    TEN_GIGABIT_ETHERNET = 12
    TUNNEL = 13
    TWENTY_FIVE_GIGABIT_ETHERNET = 14
    TWO_GIGABIT_ETHERNET = 15
    VLAN = 16


@dataclass(frozen=True)
class InterfaceDefinition:
    """
    Описание одного типа интерфейса.

    Attributes:
        type: Тип интерфейса
        name: Полное каноническое имя (GigabitEthernet)
        abbreviations: Сокращения, первое — каноническое (Gi)
        is_physical: Физический порт (True) или логический (False)
    """
    type: InterfaceType
    name: str
    abbreviations: Tuple[str, ...]
    is_physical: bool

    @property
    def short_name(self) -> str:
        """Каноническое сокращение."""
        return self.abbreviations[0]

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Все токены типа: полное имя и сокращения."""
        return (self.name,) + self.abbreviations


# =============================================================================
# КАТАЛОГ
# =============================================================================

INTERFACE_DEFINITIONS: Tuple[InterfaceDefinition, ...] = (
    InterfaceDefinition(InterfaceType.APP_GIGABIT_ETHERNET, "AppGigabitEthernet", ("Ap",), True),
    InterfaceDefinition(InterfaceType.BLUETOOTH, "Bluetooth", ("Bl",), True),
    InterfaceDefinition(InterfaceType.ETHERNET, "Ethernet", ("Et",), True),
    InterfaceDefinition(InterfaceType.FAST_ETHERNET, "FastEthernet", ("Fa",), True),
    InterfaceDefinition(InterfaceType.FORTY_GIGABIT_ETHERNET, "FortyGigabitEthernet", ("Fo",), True),
    InterfaceDefinition(InterfaceType.GIGABIT_ETHERNET, "GigabitEthernet", ("Gi",), True),
    InterfaceDefinition(InterfaceType.HUNDRED_GIGABIT_ETHERNET, "HundredGigE", ("Hu",), True),
    InterfaceDefinition(InterfaceType.LOOPBACK, "Loopback", ("Lo",), False),
    # NX-OS: полное имя и сокращение совпадают
    InterfaceDefinition(InterfaceType.MANAGEMENT, "mgmt", ("mgmt",), True),
    InterfaceDefinition(InterfaceType.PORT_CHANNEL, "Port-channel", ("Po",), False),
    InterfaceDefinition(InterfaceType.SERIAL, "Serial", ("Se",), True),
    InterfaceDefinition(InterfaceType.TEN_GIGABIT_ETHERNET, "TenGigabitEthernet", ("Te",), True),
    InterfaceDefinition(InterfaceType.TUNNEL, "Tunnel", ("Tu",), False),
    InterfaceDefinition(InterfaceType.TWENTY_FIVE_GIGABIT_ETHERNET, "TwentyFiveGigE", ("Twe",), True),
    InterfaceDefinition(InterfaceType.TWO_GIGABIT_ETHERNET, "TwoGigabitEthernet", ("Tw",), True),
    InterfaceDefinition(InterfaceType.VLAN, "Vlan", ("Vl",), False),
)


def build_type_lookup(
    definitions: Iterable[InterfaceDefinition],
) -> Dict[str, InterfaceType]:
    """
    Строит маппинг токен → тип интерфейса.

    Повтор токена внутри одного типа допустим (mgmt/mgmt),
    один токен у двух разных типов — нет.

    Args:
        definitions: Описания типов

    Returns:
        Dict[str, InterfaceType]: Токен → тип

    Raises:
        CatalogError: Тип описан дважды или токен неоднозначен
    """
    lookup: Dict[str, InterfaceType] = {}
    seen_types = set()

    for definition in definitions:
        if definition.type in seen_types:
            raise CatalogError(
                f"Тип интерфейса описан дважды: {definition.type.name}",
            )
        seen_types.add(definition.type)

        if not definition.abbreviations:
            raise CatalogError(
                f"У типа {definition.type.name} нет сокращений",
            )

        for token in definition.tokens:
            existing = lookup.get(token)
            if existing is not None and existing is not definition.type:
                raise CatalogError(
                    f"Токен '{token}' принадлежит {existing.name} и {definition.type.name}",
                    token=token,
                )
            lookup[token] = definition.type

    return lookup


def _build_definition_map(
    definitions: Iterable[InterfaceDefinition],
) -> Dict[InterfaceType, InterfaceDefinition]:
    """Тип → описание, с проверкой что каталог покрывает весь enum."""
    result = {definition.type: definition for definition in definitions}
    missing = [item.name for item in InterfaceType if item not in result]
    if missing:
        raise CatalogError(f"Нет описания для типов: {', '.join(missing)}")
    return result


INTERFACE_TYPE_LOOKUP: Mapping[str, InterfaceType] = MappingProxyType(
    build_type_lookup(INTERFACE_DEFINITIONS)
)

_DEFINITIONS_BY_TYPE = _build_definition_map(INTERFACE_DEFINITIONS)

INTERFACE_DEFINITION_MAP: Mapping[InterfaceType, InterfaceDefinition] = MappingProxyType(
    _DEFINITIONS_BY_TYPE
)

INTERFACE_NAME_MAP: Mapping[InterfaceType, str] = MappingProxyType(
    {item_type: item.name for item_type, item in _DEFINITIONS_BY_TYPE.items()}
)

INTERFACE_SHORT_MAP: Mapping[InterfaceType, str] = MappingProxyType(
    {item_type: item.short_name for item_type, item in _DEFINITIONS_BY_TYPE.items()}
)

INTERFACE_PHYSICAL_MAP: Mapping[InterfaceType, bool] = MappingProxyType(
    {item_type: item.is_physical for item_type, item in _DEFINITIONS_BY_TYPE.items()}
)

logger.debug(f"Каталог интерфейсов: {len(INTERFACE_DEFINITIONS)} типов, "
             f"{len(INTERFACE_TYPE_LOOKUP)} токенов")


# =============================================================================
# ЛУКАПЫ
# =============================================================================


def get_interface_type(token: str) -> InterfaceType:
    """
    Возвращает тип интерфейса по токену.

    Args:
        token: Полное имя или сокращение (GigabitEthernet, Gi)

    Returns:
        InterfaceType: Тип интерфейса

    Raises:
        UnknownInterfaceTypeError: Токена нет в каталоге
    """
    try:
        return INTERFACE_TYPE_LOOKUP[token]
    except (KeyError, TypeError):
        raise UnknownInterfaceTypeError(
            "Неизвестный тип интерфейса", token=str(token),
        ) from None


def get_interface_name(interface_type: InterfaceType) -> str:
    """Полное каноническое имя типа: GIGABIT_ETHERNET → GigabitEthernet."""
    return INTERFACE_NAME_MAP[interface_type]


def get_interface_short_name(interface_type: InterfaceType) -> str:
    """Каноническое сокращение типа: GIGABIT_ETHERNET → Gi."""
    return INTERFACE_SHORT_MAP[interface_type]


def is_physical_type(interface_type: InterfaceType) -> bool:
    return INTERFACE_PHYSICAL_MAP[interface_type]


def get_interface_tokens() -> List[str]:
    """
    Все известные токены, от длинных к коротким.

    Порядок важен для регулярки: "Twe" раньше "Tw".
    """
    return sorted(INTERFACE_TYPE_LOOKUP, key=lambda token: (-len(token), token))
