from ..lib.decorators import log_call
from ..lib.impl import get_property_by_key_impl, get_property_impl
from ..lib.models import CriteriaDefinition
from ..models.common import Contact, InfoWithEntity, State, StatefulInfo
from ..models.organization import Organization
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria
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


class OrganizationApi(
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
    """API управления организациями"""

    RESOURCE = "/organization"
    entity_class = Organization
    entity_info_class = StatefulInfo
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("name", str),
        *reference_criteria("category"),
        *reference_criteria("parent"),
        *reference_criteria("country"),
        *reference_criteria("province"),
        *reference_criteria("city"),
        *reference_criteria("district"),
        *reference_criteria("street"),
        CriteriaDefinition("postalcode", str),
        CriteriaDefinition("phone", str),
        CriteriaDefinition("mobile", str),
        CriteriaDefinition("email", str),
        CriteriaDefinition("state", (State, str)),
        CriteriaDefinition("test", bool),
        CriteriaDefinition("predefined", bool),
        CriteriaDefinition("deleted", bool),
        *LIFECYCLE_CRITERIA,
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
    def get_contact(self, id, show_loading=True):
        return get_property_impl(
            self, self.url("/{id}/contact"), "contact", Contact, id, show_loading
        )

    @log_call
    def get_contact_by_code(self, code, show_loading=True):
        return get_property_by_key_impl(
            self,
            self.url("/code/{code}/contact"),
            "contact",
            Contact,
            "code",
            code,
            show_loading,
        )
