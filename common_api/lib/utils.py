"""
Вспомогательные утилиты для построения запросов
"""

import base64
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, unquote

from .models import is_not_set


def _is_empty(value: Any) -> bool:
    return value is None or is_not_set(value)


def serialize_value(value: Any) -> Any:
    """Рекурсивная сериализация значений для JSON"""
    if isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, bool):
        # Boolean значения остаются boolean для body данных
        return value
    elif isinstance(value, bytes):
        return base64.b64encode(value).decode("utf-8")
    elif isinstance(value, Mapping):
        return {k: serialize_value(v) for k, v in value.items() if not _is_empty(v)}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    elif hasattr(value, "model_dump"):
        return serialize_value(value.model_dump(exclude_none=True, by_alias=True))
    else:
        return value


def serialize_query_value(value: Any) -> Any:
    """Специальная сериализация для query параметров"""
    if isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, bool):
        # Boolean значения для query параметров должны быть строками
        return str(value).lower()
    elif isinstance(value, (list, tuple)):
        return ",".join(str(serialize_query_value(item)) for item in value)
    else:
        return value


def merge_params(*sources: Any) -> Dict[str, Any]:
    """Объединение нескольких источников в плоский набор query параметров.

    Пустые значения отбрасываются. Один и тот же ключ с разными значениями
    в разных источниках считается ошибкой.
    """
    params: Dict[str, Any] = {}
    for source in sources:
        if _is_empty(source):
            continue
        if hasattr(source, "model_dump"):
            source = source.model_dump(exclude_none=True, by_alias=True)
        for key, value in source.items():
            if _is_empty(value):
                continue
            value = serialize_query_value(value)
            if key in params and params[key] != value:
                raise TypeError(
                    f"Conflicting values for the query parameter '{key}': "
                    f"{params[key]!r} and {value!r}."
                )
            params[key] = value
    return params


def stringify_id(value: Any) -> str:
    return str(value)


def substitute(template: str, /, **values: Any) -> str:
    """Подстановка значений в шаблон URL вида /person/{id}"""
    for key, value in values.items():
        placeholder = "{" + key + "}"
        if placeholder not in template:
            raise ValueError(f"The URL template '{template}' has no placeholder {placeholder}.")
        template = template.replace(placeholder, quote(stringify_id(value), safe=""))
    return template


_CONTENT_DISPOSITION_FILENAME = re.compile(
    r"filename\*=(?:UTF-8'')?([^;]+)|filename=\"([^\"]+)\""
)


def extract_content_disposition_filename(header: Optional[str]) -> Optional[str]:
    """Извлечение имени файла из заголовка Content-Disposition"""
    if not header:
        return None
    match = _CONTENT_DISPOSITION_FILENAME.search(header)
    if not match:
        return None
    if match.group(1):
        return unquote(match.group(1).strip())
    return match.group(2)


def create_instance(cls: Any, raw: Any) -> Any:
    """Создание экземпляра класса из сырых данных ответа"""
    if raw is None or cls is None:
        return raw
    if hasattr(cls, "create"):
        return cls.create(raw)
    if isinstance(cls, type) and issubclass(cls, Enum):
        return cls(raw)
    if hasattr(cls, "model_validate"):
        return cls.model_validate(raw)
    return cls(raw)