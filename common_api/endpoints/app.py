from ..lib.models import CriteriaDefinition
from ..models.common import State, StatefulInfo
from ..models.organization import App
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria, time_range_criteria
from .mixins import (
    AddMixin,
    CommentByCodeMixin,
    CommentMixin,
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


class AppApi(
    ListMixin,
    GetMixin,
    GetByCodeMixin,
    AddMixin,
    UpdateMixin,
    UpdateByCodeMixin,
    StateMixin,
    StateByCodeMixin,
    CommentMixin,
    CommentByCodeMixin,
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
    """API управления приложениями"""

    RESOURCE = "/app"
    entity_class = App
    entity_info_class = StatefulInfo
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("name", str),
        *reference_criteria("organization"),
        *reference_criteria("category"),
        CriteriaDefinition("state", (State, str)),
        *time_range_criteria("last_authorize"),
        CriteriaDefinition("predefined", bool),
        CriteriaDefinition("deleted", bool),
        *LIFECYCLE_CRITERIA,
    )
