from ..lib.decorators import log_call
from ..lib.impl import delete_impl, get_impl, purge_all_impl, purge_impl, restore_impl
from ..lib.models import CriteriaDefinition
from ..models.common import AttachmentType, Upload
from .base import LIFECYCLE_CRITERIA, Endpoint
from .mixins import ListMixin


class UploadApi(ListMixin, Endpoint):
    """API загруженных на сервер файлов"""

    RESOURCE = "/upload"
    entity_class = Upload
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("type", (AttachmentType, str)),
        CriteriaDefinition("deleted", bool),
        *LIFECYCLE_CRITERIA,
    )

    @log_call
    def get(self, id, show_loading=True):
        return get_impl(self, self.url("/{id}"), id, show_loading)

    @log_call
    def delete(self, id, show_loading=True):
        return delete_impl(self, self.url("/{id}"), id, show_loading)

    @log_call
    def restore(self, id, show_loading=True):
        return restore_impl(self, self.url("/{id}"), id, show_loading)

    @log_call
    def purge(self, id, show_loading=True):
        return purge_impl(self, self.url("/{id}/purge"), id, show_loading)

    @log_call
    def purge_all(self, show_loading=True):
        return purge_all_impl(self, self.url("/purge"), show_loading)
