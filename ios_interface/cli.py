"""
CLI модуль ios_interface.

Команды:
- normalize: приводит имена к полному или короткому виду
- parse: показывает поля каждого интерфейса
- sort: сортирует имена в порядке интерфейсов

Примеры использования:
    python -m ios_interface normalize Gi1/0/1 "Te 1/2" --format short
    python -m ios_interface parse "interface Serial0/1:22" --json
    show_run_ifaces | python -m ios_interface sort
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from .config import load_config
from .core.config_schema import AppConfig
from .core.exceptions import ConfigError, ParseError, format_error_for_log
from .core.formatter import FormatType
from .core.logging import get_logger, setup_logging
from .core.models import IosInterface
from .core.normalize import normalize_interface_name, sort_interface_names

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="ios_interface",
        description="Разбор и нормализация имён интерфейсов сетевых устройств",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s normalize Gi1/0/1 Fa0/0/1.123 --format short
  %(prog)s parse "interface TenGigabitEthernet1/2" --json
  %(prog)s sort Vlan200 Gi1/0/2 Vlan99
        """,
    )

    # Общие аргументы
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Логи в JSON формате",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Путь к ios_interface.yaml",
    )

    subparsers = parser.add_subparsers(dest="command", help="Команды")

    # normalize
    normalize_parser = subparsers.add_parser("normalize", help="Нормализовать имена")
    normalize_parser.add_argument("names", nargs="*", help="Имена (по умолчанию stdin)")
    normalize_parser.add_argument(
        "-f",
        "--format",
        choices=["long", "short"],
        help="Стиль вывода (по умолчанию из конфигурации)",
    )
    normalize_parser.add_argument(
        "--sort",
        action="store_true",
        default=None,
        help="Отсортировать результат",
    )
    normalize_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Ошибка на нераспознанных именах",
    )

    # parse
    parse_parser = subparsers.add_parser("parse", help="Показать поля интерфейсов")
    parse_parser.add_argument("names", nargs="*", help="Имена (по умолчанию stdin)")
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Вывод в JSON",
    )

    # sort
    sort_parser = subparsers.add_parser("sort", help="Отсортировать имена")
    sort_parser.add_argument("names", nargs="*", help="Имена (по умолчанию stdin)")
    sort_parser.add_argument(
        "-f",
        "--format",
        choices=["long", "short"],
        help="Нормализовать имена перед выводом",
    )

    return parser


def read_names(names: Sequence[str]) -> List[str]:
    """Имена из аргументов, а если их нет — из stdin (по одному в строке)."""
    if names:
        return list(names)
    return [line.strip() for line in sys.stdin if line.strip()]


def cmd_normalize(args: argparse.Namespace, config: AppConfig) -> int:
    """Команда normalize."""
    style = args.format or config.output.style
    sort = config.output.sort if args.sort is None else args.sort
    strict = config.output.strict if args.strict is None else args.strict

    names = read_names(args.names)
    if sort:
        names = sort_interface_names(names)

    exit_code = EXIT_OK
    for name in names:
        try:
            print(normalize_interface_name(name, style=style, strict=strict))
        except ParseError as e:
            logger.error(format_error_for_log(e), operation="normalize")
            exit_code = EXIT_PARSE_ERROR

    logger.info("Нормализация завершена", operation="normalize", count=len(names))
    return exit_code


def cmd_parse(args: argparse.Namespace, config: AppConfig) -> int:
    """Команда parse."""
    exit_code = EXIT_OK
    results = []

    for name in read_names(args.names):
        interface = IosInterface.try_parse(name)
        if interface is None:
            logger.error("Не удалось разобрать интерфейс", operation="parse", text=name)
            exit_code = EXIT_PARSE_ERROR
            continue
        results.append(interface)

    if args.json:
        print(json.dumps([item.to_dict() for item in results], indent=2, ensure_ascii=False))
        return exit_code

    for interface in results:
        fields = ", ".join(
            f"{key}={value}"
            for key, value in interface.to_dict().items()
            if key != "interface" and value is not None
        )
        print(f"{interface}: {fields}")
    return exit_code


def cmd_sort(args: argparse.Namespace, config: AppConfig) -> int:
    """Команда sort."""
    for name in sort_interface_names(read_names(args.names)):
        if args.format:
            name = normalize_interface_name(name, style=FormatType(args.format))
        print(name)
    return EXIT_OK


COMMANDS = {
    "normalize": cmd_normalize,
    "parse": cmd_parse,
    "sort": cmd_sort,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Главная функция CLI.

    Returns:
        int: Код выхода (0 — успех, 1 — нераспознанные имена, 2 — конфигурация)
    """
    parser = setup_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Ошибка конфигурации: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # Приоритет: -v флаг > конфигурация
    if args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, config.logging.level, logging.WARNING)
    setup_logging(json_format=args.json_logs or config.logging.json_format, level=log_level)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    return COMMANDS[args.command](args, config)
