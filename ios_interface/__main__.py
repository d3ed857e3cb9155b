"""
Точка входа для запуска модуля.

Позволяет запускать утилиту как:
    python -m ios_interface [команда] [опции]

Примеры:
    python -m ios_interface normalize Gi1/0/1 --format long
    python -m ios_interface sort Vlan200 Vlan99
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
