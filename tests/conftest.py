"""
Pytest configuration и общие fixtures для тестов.

Предоставляет переиспользуемые fixtures:
- isolated_config: пустая рабочая директория без ios_interface.yaml и env
- unsorted_interfaces / sorted_interfaces: набор для проверки сортировки
"""

import pytest

from ios_interface import IosInterface, InterfaceType


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """
    Рабочая директория без конфигурации.

    Убирает IOS_INTERFACE_* переменные, чтобы тесты не зависели от окружения.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("IOS_INTERFACE_STYLE", raising=False)
    monkeypatch.delenv("IOS_INTERFACE_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def sorted_interfaces():
    """Интерфейсы в ожидаемом порядке сортировки."""
    fe = InterfaceType.FAST_ETHERNET
    ge = InterfaceType.GIGABIT_ETHERNET
    vlan = InterfaceType.VLAN
    return [
        IosInterface.from_positions(fe, 1, 0, 1),
        IosInterface.from_positions(fe, 1, 0, 2),
        IosInterface.from_positions(ge, 1, 0, 1),
        IosInterface.from_positions(ge, 1, 1, 1),
        IosInterface.from_positions(ge, 1, 0, 2),
        IosInterface.from_positions(ge, 1, 0, 12),
        IosInterface.from_positions(ge, 3, 0, 1),
        IosInterface.from_positions(vlan, 99),
        IosInterface.from_positions(vlan, 100),
        IosInterface.from_positions(vlan, 200),
    ]


@pytest.fixture
def unsorted_interfaces(sorted_interfaces):
    """Те же интерфейсы в перемешанном порядке."""
    order = [4, 9, 1, 2, 3, 6, 8, 0, 7, 5]
    return [sorted_interfaces[i] for i in order]
