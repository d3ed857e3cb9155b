"""
Порядок сортировки интерфейсов.

Сравнение идёт по кортежу (type, chassis, module, port, slot,
sub_interface, channel). Port сравнивается раньше slot — так
исторически сортируются выгрузки, порядок сохраняем.

Отсутствующее поле меньше любого заданного:
    Gi1/0/1 < Gi1/0/1.0 < Gi1/0/1.100
"""

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .models import IosInterface

# Порядок полей при сравнении (не совпадает с порядком в имени)
COMPARE_FIELDS: Tuple[str, ...] = (
    "chassis",
    "module",
    "port",
    "slot",
    "sub_interface",
    "channel",
)

NullableKey = Tuple[int, int]


def _nullable(value: Optional[int]) -> NullableKey:
    """None → (0, 0), число → (1, число): None всегда меньше."""
    if value is None:
        return (0, 0)
    return (1, value)


def sort_key(interface: "IosInterface") -> Tuple:
    """
    Ключ сортировки интерфейса.

    Example:
        sorted(interfaces, key=sort_key)
    """
    return (int(interface.type),) + tuple(
        _nullable(getattr(interface, field_name)) for field_name in COMPARE_FIELDS
    )


def compare_interfaces(a: "IosInterface", b: "IosInterface") -> int:
    """
    Сравнивает два интерфейса.

    Returns:
        int: -1 если a < b, 0 если равны, 1 если a > b
    """
    key_a = sort_key(a)
    key_b = sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0
