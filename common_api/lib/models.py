from enum import Enum
from typing import Any, NamedTuple, Optional, Tuple, Type, Union


class _NotSetType:
    def __repr__(self) -> str:
        return 'NOTSET'

    def __bool__(self) -> bool:
        return False


NOTSET = _NotSetType()


def is_not_set(value: Any) -> bool:
    return value is NOTSET


TypeSpec = Union[Type, Tuple[Type, ...]]

# Типы, допустимые для идентификатора сущности
ID_TYPES: Tuple[Type, ...] = (str, int)


class CriteriaDefinition(NamedTuple):
    """Описание допустимого поля критериев фильтрации"""

    name: str
    type: TypeSpec


class ExportFormat(str, Enum):
    XML = "xml"
    JSON = "json"
    EXCEL = "excel"
    CSV = "csv"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @classmethod
    def parse(cls, value: Any) -> "ExportFormat":
        """Формат по значению без учёта регистра, xlsx означает excel"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(
                f"The export format must be a string, but it is {type(value).__name__}."
            )
        name = value.strip().lower()
        if name == "xlsx":
            name = "excel"
        try:
            return cls(name)
        except ValueError:
            raise TypeError(f"Unsupported export format: '{value}'.") from None


_MIME_TYPES = {
    ExportFormat.XML: "application/xml",
    ExportFormat.JSON: "application/json",
    ExportFormat.EXCEL: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.CSV: "text/csv",
}


class DownloadedFile(NamedTuple):
    """Скачанный файл, который не был сохранён автоматически"""

    filename: str
    mime_type: Optional[str]
    content: bytes
