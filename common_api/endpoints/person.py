from ..lib.decorators import log_call
from ..lib.impl import (
    add_impl,
    batch_delete_impl,
    batch_erase_impl,
    batch_purge_impl,
    batch_restore_impl,
    delete_impl,
    erase_by_key_impl,
    erase_impl,
    get_by_key_impl,
    get_impl,
    get_info_by_key_impl,
    get_info_impl,
    get_property_impl,
    list_impl,
    list_info_impl,
    purge_all_impl,
    purge_impl,
    restore_impl,
    update_impl,
    update_property_impl,
)
from ..lib.models import ID_TYPES, CriteriaDefinition
from ..models.common import Attachment, Contact, InfoWithEntity
from ..models.person import CredentialType, Gender, Person, PersonInfo
from .base import Endpoint, reference_criteria, time_range_criteria
from .mixins import ExportMixin, ImportMixin


class PersonApi(ExportMixin, ImportMixin, Endpoint):
    """API управления персональными данными.

    Флаг with_user просит сервер выполнить ту же операцию над связанной
    учётной записью пользователя, transform_urls просит вернуть абсолютные
    URL вложений.
    """

    RESOURCE = "/person"
    entity_class = Person
    entity_info_class = PersonInfo
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("name", str),
        CriteriaDefinition("username", str),
        CriteriaDefinition("gender", (Gender, str)),
        CriteriaDefinition("birthday_start", str),
        CriteriaDefinition("birthday_end", str),
        CriteriaDefinition("credential_type", (CredentialType, str)),
        CriteriaDefinition("credential_number", str),
        CriteriaDefinition("has_medicare", bool),
        CriteriaDefinition("medicare_type", str),
        *reference_criteria("medicare_city"),
        CriteriaDefinition("has_social_security", bool),
        *reference_criteria("social_security_city"),
        *reference_criteria("source"),
        *reference_criteria("category"),
        CriteriaDefinition("phone", str),
        CriteriaDefinition("mobile", str),
        CriteriaDefinition("email", str),
        CriteriaDefinition("guardian_id", ID_TYPES),
        *reference_criteria("organization"),
        CriteriaDefinition("test", bool),
        CriteriaDefinition("deleted", bool),
        *time_range_criteria("create", "modify", "delete"),
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
    def list_info(
        self, page_request=None, criteria=None, sort_request=None, show_loading=True
    ):
        return list_info_impl(
            self, self.url("/info"), page_request, criteria, sort_request, show_loading
        )

    @log_call
    def get(self, id, transform_urls=True, show_loading=True):
        return get_impl(
            self, self.url("/{id}"), id, show_loading, {"transform_urls": transform_urls}
        )

    @log_call
    def get_by_username(self, username, transform_urls=True, show_loading=True):
        return get_by_key_impl(
            self,
            self.url("/username/{username}"),
            "username",
            username,
            show_loading,
            {"transform_urls": transform_urls},
        )

    @log_call
    def get_info(self, id, show_loading=True):
        return get_info_impl(self, self.url("/{id}/info"), id, show_loading)

    @log_call
    def get_info_by_username(self, username, show_loading=True):
        return get_info_by_key_impl(
            self, self.url("/username/{username}/info"), "username", username, show_loading
        )

    @log_call
    def get_category(self, id, show_loading=True):
        return get_property_impl(
            self, self.url("/{id}/category"), "category", InfoWithEntity, id, show_loading
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
    def update_contact(self, id, contact, with_user=False, show_loading=True):
        return update_property_impl(
            self,
            self.url("/{id}/contact"),
            id,
            "contact",
            (Contact, dict),
            contact,
            show_loading,
            {"with_user": with_user},
        )

    @log_call
    def update_comment(self, id, comment, with_user=False, show_loading=True):
        return update_property_impl(
            self,
            self.url("/{id}/comment"),
            id,
            "comment",
            str,
            comment,
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
    def erase_by_username(self, username, with_user=False, show_loading=True):
        return erase_by_key_impl(
            self,
            self.url("/username/{username}/erase"),
            "username",
            username,
            show_loading,
            {"with_user": with_user},
        )

    @log_call
    def batch_erase(self, ids, with_user=False, show_loading=True):
        return batch_erase_impl(
            self, self.url("/batch/erase"), ids, show_loading, {"with_user": with_user}
        )
