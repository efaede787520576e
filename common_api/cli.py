import argparse
import asyncio
import logging
import sys
from enum import Enum
from typing import Iterable, List, Optional

from common_api.client import ApiClient
from common_api.config import CONFIG_FILENAME, ClientConfig
from common_api.lib.exc import SendRequestError
from common_api.lib.models import CriteriaDefinition, ExportFormat
from common_api.models import SortOrder, SortRequest


def parse_criteria(items: Optional[List[str]]) -> dict:
    """Разбор критериев вида key=value"""
    criteria = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid criteria '{item}', expected key=value")
        criteria[key.strip()] = value.strip()
    return criteria


TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def _coerce_value(key: str, value: str, types):
    if not isinstance(types, tuple):
        types = (types,)
    if str in types:
        return value
    if bool in types:
        if value.lower() in TRUE_VALUES:
            return True
        if value.lower() in FALSE_VALUES:
            return False
        raise ValueError(f"Invalid boolean value '{value}' for criteria '{key}'")
    if int in types:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Invalid integer value '{value}' for criteria '{key}'") from None
    for enum_type in types:
        if isinstance(enum_type, type) and issubclass(enum_type, Enum):
            return enum_type(value)
    return value


def coerce_criteria(criteria: dict, definitions: Iterable[CriteriaDefinition]) -> dict:
    """Приведение строковых значений критериев к типам из их определений.

    Поля без определения остаются строками, их проверит сам метод API.
    """
    types = {d.name: d.type for d in definitions}
    return {
        key: _coerce_value(key, value, types[key]) if key in types else value
        for key, value in criteria.items()
    }


def resolve_endpoint(client: ApiClient, resource: str, operation: str, fmt: ExportFormat):
    """Поиск метода export_*/import_* у API ресурса"""
    api = getattr(client, resource.replace("-", "_"), None)
    method = getattr(api, f"{operation}_{fmt.value}", None) if api is not None else None
    if method is None:
        raise ValueError(f"The resource '{resource}' does not support {operation} to {fmt.value}")
    return method


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Клиент общих REST API сущностей")
    parser.add_argument("--config", type=str, default=CONFIG_FILENAME, help="Путь к файлу конфигурации")
    parser.add_argument("--url", type=str, help="Базовый URL сервера API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-config", help=f"Создать конфиг файл {CONFIG_FILENAME}")
    init_parser.add_argument("--url", type=str, dest="init_url", required=True, help="Базовый URL сервера API")

    subparsers.add_parser("system-info", help="Информация о сервере")
    subparsers.add_parser("system-time", help="Текущее время сервера")

    export_parser = subparsers.add_parser("export", help="Экспорт сущностей в файл")
    export_parser.add_argument("resource", type=str, help="Ресурс, например person")
    export_parser.add_argument("format", type=str, help="xml, json, excel или csv")
    export_parser.add_argument("--output", type=str, help="Каталог для сохранения файла")
    export_parser.add_argument("--criteria", nargs="*", help="Критерии фильтрации key=value")
    export_parser.add_argument("--sort-field", type=str, help="Поле сортировки")
    export_parser.add_argument(
        "--sort-order", type=str, choices=[o.value for o in SortOrder], help="Порядок сортировки"
    )

    import_parser = subparsers.add_parser("import", help="Импорт сущностей из файла")
    import_parser.add_argument("resource", type=str, help="Ресурс, например person")
    import_parser.add_argument("format", type=str, help="xml, json, excel или csv")
    import_parser.add_argument("file", type=str, help="Путь к импортируемому файлу")
    import_parser.add_argument("--parallel", action="store_true", help="Параллельный импорт")
    import_parser.add_argument("--threads", type=int, help="Количество потоков импорта")

    return parser


async def run_command(args, config: ClientConfig) -> None:
    async with config.apply(ApiClient()) as client:
        if args.command == "system-info":
            info = await client.system.get_info()
            print(f"🖥️ {info.name} {info.version or ''}".rstrip())
        elif args.command == "system-time":
            print(f"🕒 {await client.system.get_time()}")
        elif args.command == "export":
            fmt = ExportFormat.parse(args.format)
            export = resolve_endpoint(client, args.resource, "export", fmt)
            sort_request = None
            if args.sort_field:
                sort_request = SortRequest(sort_field=args.sort_field, sort_order=args.sort_order)
            definitions = getattr(export.__self__, "CRITERIA_DEFINITIONS", ())
            criteria = coerce_criteria(parse_criteria(args.criteria), definitions)
            await export(criteria or None, sort_request)
            print(f"✅ Экспорт завершён, файл сохранён в {client.download_dir}")
        elif args.command == "import":
            fmt = ExportFormat.parse(args.format)
            do_import = resolve_endpoint(client, args.resource, "import", fmt)
            count = await do_import(
                args.file, parallel=args.parallel or None, threads=args.threads
            )
            print(f"✅ Импортировано записей: {count}")


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа консольной команды common-api"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "init-config":
        config = ClientConfig(api_url=args.init_url)
        config.save_to_file(args.config)
        print(f"✅ Создан конфиг файл {args.config}")
        return 0

    config = (ClientConfig.from_file(args.config) or ClientConfig()).merge_with_args(args)
    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not config.api_url:
        print("❌ Ошибка: Укажите --url или создайте конфиг командой init-config")
        return 1

    try:
        asyncio.run(run_command(args, config))
    except SendRequestError as e:
        print(f"❌ Ошибка запроса [{e.status_code}] {e.path}: {e.message}")
        return 1
    except (TypeError, ValueError) as e:
        print(f"❌ Ошибка: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
