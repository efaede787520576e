from typing import Union

from ..lib.decorators import log_call
from ..lib.impl import (
    add_impl,
    batch_delete_impl,
    batch_erase_impl,
    batch_purge_impl,
    batch_restore_impl,
    delete_by_key_impl,
    delete_impl,
    erase_by_key_impl,
    erase_impl,
    get_by_key_impl,
    get_impl,
    get_property_by_key_impl,
    get_property_impl,
    list_impl,
    purge_all_impl,
    purge_by_key_impl,
    purge_impl,
    restore_by_key_impl,
    restore_impl,
    update_by_key_impl,
    update_impl,
    update_property_by_key_impl,
    update_property_impl,
)
from ..lib.models import ID_TYPES, CriteriaDefinition
from ..models.common import Attachment, InfoWithEntity, State
from ..models.organization import Employee, EmployeeInfo
from ..models.person import CredentialType, Gender
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria
from .mixins import ExportMixin, GetByCodeMixin, GetMixin, ImportMixin, ListMixin


class EmployeeApi(ListMixin, GetMixin, GetByCodeMixin, ExportMixin, ImportMixin, Endpoint):
    """API управления сотрудниками организаций.

    Как и у PersonApi, флаг with_user распространяет операцию на учётную
    запись пользователя сотрудника.
    """

    RESOURCE = "/employee"
    entity_class = Employee
    entity_info_class = EmployeeInfo
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("username", str),
        CriteriaDefinition("person_id", ID_TYPES),
        CriteriaDefinition("internal_code", str),
        CriteriaDefinition("name", str),
        CriteriaDefinition("gender", (Gender, str)),
        CriteriaDefinition("credential_type", (CredentialType, str)),
        CriteriaDefinition("credential_number", str),
        *reference_criteria("category"),
        *reference_criteria("organization"),
        *reference_criteria("department"),
        CriteriaDefinition("phone", str),
        CriteriaDefinition("mobile", str),
        CriteriaDefinition("email", str),
        CriteriaDefinition("job_title", str),
        CriteriaDefinition("state", (State, str)),
        CriteriaDefinition("test", bool),
        CriteriaDefinition("deleted", bool),
        *LIFECYCLE_CRITERIA,
    )

    @log_call
    def list(
        self,
        page_request=None,
        criteria=None,
        sort_request=None,
        transform_urls=True,
        show_loading=True,
    ):
        return list_impl(
            self,
            self.url(),
            page_request,
            criteria,
            sort_request,
            show_loading,
            {"transform_urls": transform_urls},
        )

    @log_call
    def get(self, id, transform_urls=True, show_loading=True):
        return get_impl(
            self, self.url("/{id}"), id, show_loading, {"transform_urls": transform_urls}
        )

    @log_call
    def get_by_code(self, code, transform_urls=True, show_loading=True):
        return get_by_key_impl(
            self,
            self.url("/code/{code}"),
            "code",
            code,
            show_loading,
            {"transform_urls": transform_urls},
        )

    @log_call
    def get_category(self, id, show_loading=True):
        return get_property_impl(
            self, self.url("/{id}/category"), "category", InfoWithEntity, id, show_loading
        )

    @log_call
    def get_category_by_code(self, code, show_loading=True):
        return get_property_by_key_impl(
            self,
            self.url("/code/{code}/category"),
            "category",
            InfoWithEntity,
            "code",
            code,
            show_loading,
        )

    @log_call
    def get_photo(self, id, transform_urls=True, show_loading=True):
        return get_property_impl(
            self,
            self.url("/{id}/photo"),
            "photo",
            Attachment,
            id,
            show_loading,
            {"transform_urls": transform_urls},
        )

    @log_call
    def add(self, entity, with_user=False, transform_urls=True, show_loading=True):
        return add_impl(
            self,
            self.url(),
            entity,
            show_loading,
            {"with_user": with_user, "transform_urls": transform_urls},
        )

    @log_call
    def update(self, entity, with_user=False, show_loading=True):
        return update_impl(
            self, self.url("/{id}"), entity, show_loading, {"with_user": with_user}
        )

    @log_call
    def update_by_code(self, entity, with_user=False, show_loading=True):
        return update_by_key_impl(
            self,
            self.url("/code/{code}"),
            "code",
            entity,
            show_loading,
            {"with_user": with_user},
        )

    @log_call
    def update_state(self, id, state: Union[State, str], with_user=False, show_loading=True):
        return update_property_impl(
            self,
            self.url("/{id}/state"),
            id,
            "state",
            (State, str),
            state,
            show_loading,
            {"with_user": with_user},
        )

    @log_call
    def update_state_by_code(
        self, code, state: Union[State, str], with_user=False, show_loading=True
    ):
        return update_property_by_key_impl(
            self,
            self.url("/code/{code}/state"),
            "code",
            code,
            "state",
            (State, str),
            state,
            show_loading,
            {"with_user": with_user},
        )

    @log_call
    def update_photo(self, id, photo, transform_urls=True, show_loading=True):
        return update_property_impl(
            self,
            self.url("/{id}/photo"),
            id,
            "photo",
            (Attachment, dict),
            photo,
            show_loading,
            {"transform_urls": transform_urls},
        )

    @log_call
    def delete(self, id, with_user=False, show_loading=True):
        return delete_impl(
            self, self.url("/{id}"), id, show_loading, {"with_user": with_user}
        )

    @log_call
    def delete_by_code(self, code, with_user=False, show_loading=True):
        return delete_by_key_impl(
            self, self.url("/code/{code}"), "code", code, show_loading, {"with_user": with_user}
        )

    @log_call
    def batch_delete(self, ids, with_user=False, show_loading=True):
        return batch_delete_impl(
            self, self.url("/batch"), ids, show_loading, {"with_user": with_user}
        )

    @log_call
    def restore(self, id, with_user=False, show_loading=True):
        return restore_impl(
            self, self.url("/{id}"), id, show_loading, {"with_user": with_user}
        )

    @log_call
    def restore_by_code(self, code, with_user=False, show_loading=True):
        return restore_by_key_impl(
            self, self.url("/code/{code}"), "code", code, show_loading, {"with_user": with_user}
        )

    @log_call
    def batch_restore(self, ids, with_user=False, show_loading=True):
        return batch_restore_impl(
            self, self.url("/batch"), ids, show_loading, {"with_user": with_user}
        )

    @log_call
    def purge(self, id, with_user=False, show_loading=True):
        return purge_impl(
            self, self.url("/{id}/purge"), id, show_loading, {"with_user": with_user}
        )

    @log_call
    def purge_by_code(self, code, with_user=False, show_loading=True):
        return purge_by_key_impl(
            self,
            self.url("/code/{code}/purge"),
            "code",
            code,
            show_loading,
            {"with_user": with_user},
        )

    @log_call
    def purge_all(self, with_user=False, show_loading=True):
        return purge_all_impl(
            self, self.url("/purge"), show_loading, {"with_user": with_user}
        )

    @log_call
    def batch_purge(self, ids, with_user=False, show_loading=True):
        return batch_purge_impl(
            self, self.url("/batch/purge"), ids, show_loading, {"with_user": with_user}
        )

    @log_call
    def erase(self, id, with_user=False, show_loading=True):
        return erase_impl(
            self, self.url("/{id}/erase"), id, show_loading, {"with_user": with_user}
        )

    @log_call
    def erase_by_code(self, code, with_user=False, show_loading=True):
        return erase_by_key_impl(
            self,
            self.url("/code/{code}/erase"),
            "code",
            code,
            show_loading,
            {"with_user": with_user},
        )

    @log_call
    def batch_erase(self, ids, with_user=False, show_loading=True):
        return batch_erase_impl(
            self, self.url("/batch/erase"), ids, show_loading, {"with_user": with_user}
        )
