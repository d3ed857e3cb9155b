"""
Data Model интерфейса.

IosInterface — неизменяемое значение: тип + числовые поля.
Создаётся явно или разбором текста, сравнивается и сортируется,
форматируется обратно в полное или короткое имя.

Использование:
    from ios_interface import IosInterface, InterfaceType

    intf = IosInterface.parse("Fa0/0/1.123")
    intf.module, intf.slot, intf.port      # 0, 0, 1
    str(intf)                              # FastEthernet0/0/1.123
    intf.format("short")                   # Fa0/0/1.123

    IosInterface.from_positions(InterfaceType.VLAN, 10)   # Vlan10
"""

import dataclasses
import logging
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Dict, Optional, Union

from .constants.interfaces import (
    InterfaceType,
    get_interface_name,
    get_interface_short_name,
    is_physical_type,
)
from .exceptions import ParseError
from .formatter import FormatType, format_interface
from .ordering import sort_key
from .parser import match_interface_name

logger = logging.getLogger(__name__)

# Поля позиций слева направо, как в имени
POSITION_FIELDS = ("chassis", "module", "slot", "port")

NUMERIC_FIELDS = POSITION_FIELDS + ("sub_interface", "channel")


@total_ordering
@dataclass(frozen=True)
class IosInterface:
    """
    Интерфейс сетевого устройства.

    Attributes:
        type: Тип интерфейса
        chassis: Номер шасси (4 группы: 1/0/1/2)
        module: Номер модуля (3+ группы)
        slot: Номер слота (2+ группы)
        port: Номер порта (последняя группа)
        sub_interface: Номер сабинтерфейса (.100)
        channel: Номер канала (:22)
    """
    type: InterfaceType
    chassis: Optional[int] = None
    module: Optional[int] = None
    slot: Optional[int] = None
    port: Optional[int] = None
    sub_interface: Optional[int] = None
    channel: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, InterfaceType):
            if isinstance(self.type, bool):
                raise ValueError(f"Неизвестный тип интерфейса: {self.type!r}")
            try:
                object.__setattr__(self, "type", InterfaceType(self.type))
            except ValueError:
                raise ValueError(f"Неизвестный тип интерфейса: {self.type!r}") from None

        for field_name in NUMERIC_FIELDS:
            value = getattr(self, field_name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field_name} должен быть int, получено {value!r}")
            if value < 0:
                raise ValueError(f"{field_name} не может быть отрицательным: {value}")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_positions(
        cls,
        interface_type: InterfaceType,
        *positions: Optional[int],
        sub_interface: Optional[int] = None,
        channel: Optional[int] = None,
    ) -> "IosInterface":
        """
        Создаёт интерфейс из позиций, выровненных по правому краю.

        Как в имени интерфейса:
            (port,)                         Vlan10
            (slot, port)                    Gi1/2
            (module, slot, port)            Gi1/0/1
            (chassis, module, slot, port)   Gi1/1/0/1

        Raises:
            ValueError: Позиций нет или больше четырёх
        """
        if not 1 <= len(positions) <= len(POSITION_FIELDS):
            raise ValueError(
                f"Ожидается от 1 до {len(POSITION_FIELDS)} позиций, получено {len(positions)}"
            )
        fields = dict(zip(POSITION_FIELDS[-len(positions):], positions))
        return cls(interface_type, sub_interface=sub_interface, channel=channel, **fields)

    @classmethod
    def try_parse(cls, text: str) -> Optional["IosInterface"]:
        """
        Разбирает имя интерфейса, не бросая исключений.

        Returns:
            IosInterface или None если текст не является именем интерфейса
        """
        parsed = match_interface_name(text)
        if parsed is None:
            return None
        return cls(*parsed)

    @classmethod
    def parse(cls, text: str) -> "IosInterface":
        """
        Разбирает имя интерфейса.

        Raises:
            ParseError: Текст не соответствует формату или тип неизвестен
        """
        result = cls.try_parse(text)
        if result is None:
            raise ParseError(f"Could not parse interface: {text}", text=text)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IosInterface":
        """
        Создаёт интерфейс из словаря.

        Принимает вывод to_dict() (type + поля) или только
        {"interface": "Gi1/0/1"} — тогда имя разбирается.
        """
        if "type" not in data and "interface" in data:
            return cls.parse(data["interface"])

        interface_type = data["type"]
        if isinstance(interface_type, str):
            try:
                interface_type = InterfaceType[interface_type]
            except KeyError:
                raise ValueError(f"Неизвестный тип интерфейса: {interface_type!r}") from None

        return cls(
            interface_type,
            **{key: data.get(key) for key in NUMERIC_FIELDS},
        )

    # -------------------------------------------------------------------------
    # Производные свойства
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Полное имя типа (GigabitEthernet)."""
        return get_interface_name(self.type)

    @property
    def short_name(self) -> str:
        """Сокращение типа (Gi)."""
        return get_interface_short_name(self.type)

    @property
    def is_physical(self) -> bool:
        return is_physical_type(self.type)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def format(self, style: Union[FormatType, str, None] = FormatType.LONG) -> str:
        """
        Имя интерфейса в нужном стиле.

        Args:
            style: long/short (FormatType или строка)
        """
        return format_interface(self, style)

    def __str__(self) -> str:
        return format_interface(self, FormatType.LONG)

    def __format__(self, format_spec: str) -> str:
        # f"{intf:short}"
        if not format_spec:
            return str(self)
        return format_interface(self, format_spec)

    # -------------------------------------------------------------------------
    # Сравнение и изменение
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IosInterface):
            return NotImplemented
        return sort_key(self) < sort_key(other)

    def replace(self, **changes: Any) -> "IosInterface":
        """
        Новый интерфейс с изменёнными полями.

        Example:
            intf.replace(sub_interface=100)
        """
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в dict (для JSON)."""
        result: Dict[str, Any] = {
            "interface": str(self),
            "type": self.type.name,
            "name": self.name,
            "is_physical": self.is_physical,
        }
        for field_name in NUMERIC_FIELDS:
            result[field_name] = getattr(self, field_name)
        return result
