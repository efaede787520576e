from ..lib.decorators import log_call
from ..lib.impl import (
    get_by_key_impl,
    get_impl,
    get_info_by_key_impl,
    get_property_impl,
    list_impl,
    update_property_impl,
)
from ..lib.models import CriteriaDefinition
from ..models.common import State, StatefulInfo
from ..models.user import User, UserInfo
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria, time_range_criteria
from .mixins import (
    AddMixin,
    CommentMixin,
    DeleteMixin,
    ExportMixin,
    GetMixin,
    ListMixin,
    PurgeMixin,
    RestoreMixin,
    StateMixin,
    UpdateMixin,
)


class UserApi(
    ListMixin,
    GetMixin,
    AddMixin,
    UpdateMixin,
    StateMixin,
    CommentMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    ExportMixin,
    Endpoint,
):
    """API управления учётными записями пользователей"""

    RESOURCE = "/user"
    entity_class = User
    entity_info_class = UserInfo
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("name", str),
        CriteriaDefinition("nickname", str),
        *reference_criteria("organization"),
        CriteriaDefinition("state", (State, str)),
        *time_range_criteria("last_login", "valid", "expired"),
        CriteriaDefinition("predefined", bool),
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
    def get_info_by_username(self, username, show_loading=True):
        return get_info_by_key_impl(
            self, self.url("/username/{username}/info"), "username", username, show_loading
        )

    @log_call
    def get_organization(self, id, show_loading=True):
        return get_property_impl(
            self,
            self.url("/{id}/organization"),
            "organization",
            StatefulInfo,
            id,
            show_loading,
        )

    def _update_string(self, id, name, value, show_loading):
        return update_property_impl(
            self, self.url(f"/{{id}}/{name}"), id, name, str, value, show_loading
        )

    @log_call
    def update_username(self, id, username, show_loading=True):
        return self._update_string(id, "username", username, show_loading)

    @log_call
    def update_password(self, id, password, show_loading=True):
        return self._update_string(id, "password", password, show_loading)

    @log_call
    def update_email(self, id, email, show_loading=True):
        return self._update_string(id, "email", email, show_loading)

    @log_call
    def update_mobile(self, id, mobile, show_loading=True):
        return self._update_string(id, "mobile", mobile, show_loading)
