"""
Проверка аргументов публичных методов API.

Все функции чистые: они не выполняют запросов и при нарушении
выбрасывают TypeError до начала любого ввода-вывода.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence, Type, Union

from pydantic import BaseModel

from ..models.common import PageRequest, SortOrder, SortRequest
from .models import ID_TYPES, NOTSET, CriteriaDefinition, TypeSpec


def _type_names(types: tuple) -> str:
    return "|".join(getattr(t, "__name__", str(t)) for t in types)


def _is_empty(value: Any) -> bool:
    return value is None or value is NOTSET


def _as_mapping(value: Any) -> Any:
    """Модель pydantic рассматривается как словарь своих заполненных полей"""
    if isinstance(value, BaseModel):
        return {k: v for k, v in value if v is not None}
    return value


def check_argument_type(
    name: str, value: Any, types: TypeSpec, nullable: bool = False
) -> None:
    """Проверка типа значения аргумента"""
    if _is_empty(value):
        if nullable:
            return
        raise TypeError(f"The value of the argument '{name}' cannot be None.")

    if not isinstance(types, tuple):
        types = (types,)

    # bool является подклассом int, но числом не считается
    if isinstance(value, bool) and bool not in types and object not in types:
        raise TypeError(
            f"The argument '{name}' must be of type {_type_names(types)}, "
            f"but it is bool."
        )

    if not isinstance(value, types):
        raise TypeError(
            f"The argument '{name}' must be of type {_type_names(types)}, "
            f"but it is {type(value).__name__}."
        )


def check_id_argument_type(value: Any, name: str = "id") -> None:
    """Проверка идентификатора сущности"""
    if not isinstance(name, str):
        raise TypeError("The name must be a string.")
    check_argument_type(name, value, ID_TYPES)


def check_id_array_argument_type(value: Any, name: str = "ids") -> None:
    """Проверка списка идентификаторов сущностей"""
    if not isinstance(name, str):
        raise TypeError("The name must be a string.")
    check_argument_type(name, value, (list, tuple))
    for i, item in enumerate(value):
        check_argument_type(f"{name}[{i}]", item, ID_TYPES)


def check_page_request_argument(page_request: Any) -> None:
    """Проверка запроса страницы"""
    check_argument_type("page_request", page_request, (PageRequest, Mapping))
    page_request = _as_mapping(page_request)
    for key in ("page_index", "page_size"):
        value = page_request.get(key)
        check_argument_type(f"page_request.{key}", value, int, nullable=True)
        if not _is_empty(value) and value < 0:
            raise TypeError(
                f"The argument 'page_request.{key}' cannot be negative: {value}."
            )


def model_field_names(entity_class: Type[BaseModel]) -> set:
    """Имена полей класса модели (включая алиасы) без создания экземпляра"""
    names = set()
    for field_name, field in entity_class.model_fields.items():
        names.add(field_name)
        if field.alias:
            names.add(field.alias)
    return names


def check_sort_request_argument(
    sort_request: Any, entity_class: Optional[Type[BaseModel]] = None
) -> None:
    """Проверка запроса сортировки.

    Если передан класс сущности, поле сортировки должно быть его полем.
    """
    check_argument_type("sort_request", sort_request, (SortRequest, Mapping))
    sort_request = _as_mapping(sort_request)
    sort_field = sort_request.get("sort_field")
    check_argument_type("sort_request.sort_field", sort_field, str, nullable=True)
    check_argument_type(
        "sort_request.sort_order",
        sort_request.get("sort_order"),
        (SortOrder, str),
        nullable=True,
    )
    if entity_class is not None and sort_field:
        if sort_field not in model_field_names(entity_class):
            raise TypeError(
                f"The sort field '{sort_field}' is not a field of the class "
                f"{entity_class.__name__}."
            )


def check_object_argument(
    name: str,
    obj: Any,
    definitions: Iterable[CriteriaDefinition] = (),
    nullable: bool = False,
) -> None:
    """Проверка объекта по списку допустимых полей и их типов.

    Пустой объект и пустой список определений принимаются без проверки полей.
    Иначе любое поле с непустым значением должно быть объявлено.
    """
    if _is_empty(obj):
        if nullable:
            return
        raise TypeError(f"The value of the argument '{name}' cannot be None.")

    check_argument_type(name, obj, (BaseModel, Mapping))
    obj = _as_mapping(obj)
    if not obj:
        return

    fields = {
        d.name: d.type
        for d in (definitions or ())
        if isinstance(d.name, str) and d.type
    }
    if not fields:
        return

    for key, value in obj.items():
        if _is_empty(value):
            continue
        if key not in fields:
            raise TypeError(f'Unsupported field: "{name}.{key}"')
        check_argument_type(f"{name}.{key}", value, fields[key])


def check_criteria_argument(
    criteria: Any,
    definitions_or_class: Union[
        Sequence[CriteriaDefinition], Type[BaseModel], None
    ] = None,
) -> None:
    """Проверка критериев фильтрации.

    Принимает либо список определений критериев, либо класс модели: во втором
    случае допустимыми считаются только имена полей этого класса.
    """
    if isinstance(definitions_or_class, type) and issubclass(
        definitions_or_class, BaseModel
    ):
        check_argument_type("criteria", criteria, (BaseModel, Mapping))
        allowed = model_field_names(definitions_or_class)
        for key, value in _as_mapping(criteria).items():
            if not _is_empty(value) and key not in allowed:
                raise TypeError(f'Unsupported field: "criteria.{key}"')
        return

    check_object_argument("criteria", criteria, definitions_or_class or ())
