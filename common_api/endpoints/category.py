from ..lib.models import CriteriaDefinition
from ..models.category import Category
from ..models.common import InfoWithEntity
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria
from .mixins import (
    AddMixin,
    DeleteByCodeMixin,
    DeleteMixin,
    EraseByCodeMixin,
    EraseMixin,
    ExportMixin,
    GetByCodeMixin,
    GetMixin,
    ImportMixin,
    ListMixin,
    PurgeByCodeMixin,
    PurgeMixin,
    RestoreByCodeMixin,
    RestoreMixin,
    UpdateByCodeMixin,
    UpdateMixin,
)


class CategoryApi(
    ListMixin,
    GetMixin,
    GetByCodeMixin,
    AddMixin,
    UpdateMixin,
    UpdateByCodeMixin,
    DeleteMixin,
    DeleteByCodeMixin,
    RestoreMixin,
    RestoreByCodeMixin,
    PurgeMixin,
    PurgeByCodeMixin,
    EraseMixin,
    EraseByCodeMixin,
    ExportMixin,
    ImportMixin,
    Endpoint,
):
    """API управления категориями сущностей"""

    RESOURCE = "/category"
    entity_class = Category
    entity_info_class = InfoWithEntity
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("entity", str),
        CriteriaDefinition("name", str),
        *reference_criteria("parent"),
        CriteriaDefinition("predefined", bool),
        CriteriaDefinition("deleted", bool),
        *LIFECYCLE_CRITERIA,
    )
