from ..lib.decorators import log_call
from ..lib.impl import get_property_impl
from ..lib.models import ID_TYPES, CriteriaDefinition
from ..models.task import TaskInfo, TaskStatus
from .base import Endpoint, reference_criteria, time_range_criteria
from .mixins import GetMixin, ListMixin


class TaskApi(ListMixin, GetMixin, Endpoint):
    """API фоновых задач сервера"""

    RESOURCE = "/task"
    entity_class = TaskInfo
    CRITERIA_DEFINITIONS = (
        *reference_criteria("category"),
        CriteriaDefinition("target_entity", str),
        CriteriaDefinition("target_id", ID_TYPES),
        CriteriaDefinition("result_entity", str),
        CriteriaDefinition("result_id", ID_TYPES),
        CriteriaDefinition("status", (TaskStatus, str)),
        *time_range_criteria("submit", "start", "cancel", "finish", "create", "modify"),
    )

    @log_call
    def get_status(self, id, show_loading=True):
        return get_property_impl(
            self, self.url("/{id}/status"), "status", TaskStatus, id, show_loading
        )
