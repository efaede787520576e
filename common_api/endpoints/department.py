from ..lib.models import CriteriaDefinition
from ..models.common import State, StatefulInfo
from ..models.organization import Department
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria
from .mixins import (
    AddMixin,
    DeleteByCodeMixin,
    DeleteMixin,
    ExportMixin,
    GetByCodeMixin,
    GetMixin,
    ImportMixin,
    ListMixin,
    PurgeByCodeMixin,
    PurgeMixin,
    RestoreByCodeMixin,
    RestoreMixin,
    StateByCodeMixin,
    StateMixin,
    UpdateByCodeMixin,
    UpdateMixin,
)


class DepartmentApi(
    ListMixin,
    GetMixin,
    GetByCodeMixin,
    AddMixin,
    UpdateMixin,
    UpdateByCodeMixin,
    StateMixin,
    StateByCodeMixin,
    DeleteMixin,
    DeleteByCodeMixin,
    RestoreMixin,
    RestoreByCodeMixin,
    PurgeMixin,
    PurgeByCodeMixin,
    ExportMixin,
    ImportMixin,
    Endpoint,
):
    RESOURCE = "/department"
    entity_class = Department
    entity_info_class = StatefulInfo
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("name", str),
        *reference_criteria("organization"),
        *reference_criteria("parent"),
        *reference_criteria("category"),
        CriteriaDefinition("state", (State, str)),
        CriteriaDefinition("test", bool),
        CriteriaDefinition("predefined", bool),
        CriteriaDefinition("deleted", bool),
        *LIFECYCLE_CRITERIA,
    )
