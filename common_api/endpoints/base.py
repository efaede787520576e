import logging
from typing import Optional, Tuple, Type

from ..common import AiohttpClient
from ..lib.models import ID_TYPES, CriteriaDefinition
from ..loading import Loading
from ..models.base import Model


def reference_criteria(prefix: str) -> Tuple[CriteriaDefinition, ...]:
    """Критерии ссылки на другую сущность: ID, код и часть имени"""
    return (
        CriteriaDefinition(f"{prefix}_id", ID_TYPES),
        CriteriaDefinition(f"{prefix}_code", str),
        CriteriaDefinition(f"{prefix}_name", str),
    )


def time_range_criteria(*names: str) -> Tuple[CriteriaDefinition, ...]:
    """Границы (включительно) диапазонов времени: <name>_time_start/_end"""
    return tuple(
        CriteriaDefinition(f"{name}_time_{edge}", str)
        for name in names
        for edge in ("start", "end")
    )


LIFECYCLE_CRITERIA = time_range_criteria("create", "modify", "delete")


class Endpoint:
    """Базовый класс API одной сущности.

    RESOURCE задаёт корневой путь (например "/app"), от которого миксины
    строят шаблоны URL. Экземпляр не хранит состояния между вызовами.
    """

    RESOURCE: str = ""
    CRITERIA_DEFINITIONS: Tuple[CriteriaDefinition, ...] = ()
    entity_class: Optional[Type[Model]] = None
    entity_info_class: Optional[Type[Model]] = None

    def __init__(self, client: AiohttpClient) -> None:
        self.client = client
        self.logger = logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

    @property
    def loading(self) -> Loading:
        return self.client.loading

    def url(self, suffix: str = "") -> str:
        return f"{self.RESOURCE}{suffix}"
