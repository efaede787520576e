"""
Базовые классы моделей сущностей
"""

from typing import Any, Generic, List, TypeVar, Union

from pydantic import BaseModel, ConfigDict

Id = Union[int, str]

T = TypeVar("T")


class Model(BaseModel):
    """Базовая модель сущности.

    Все поля наследников необязательные, поэтому экземпляр по умолчанию
    существует всегда. Неизвестные поля ответа сервера игнорируются.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=False,
        extra="ignore",
    )

    @classmethod
    def create(cls, raw: Any):
        """Создание экземпляра из сырых данных ответа"""
        if raw is None:
            return None
        if isinstance(raw, cls):
            return raw
        return cls.model_validate(raw)

    @classmethod
    def create_array(cls, raw: Any) -> List[Any]:
        """Создание списка экземпляров из сырого массива"""
        if not raw:
            return []
        return [cls.create(item) for item in raw]

    @classmethod
    def create_page(cls, raw: Any) -> "Page":
        """Создание страницы экземпляров из сырого ответа"""
        raw = raw or {}
        return Page[cls](
            total_count=raw.get("total_count", 0),
            total_pages=raw.get("total_pages", 0),
            page_index=raw.get("page_index", 0),
            page_size=raw.get("page_size", 0),
            content=cls.create_array(raw.get("content")),
        )


class Page(BaseModel, Generic[T]):
    """Страница результатов списочного запроса"""

    total_count: int = 0
    total_pages: int = 0
    page_index: int = 0
    page_size: int = 0
    content: List[T] = []
