from ..lib.checks import check_criteria_argument
from ..lib.decorators import log_call
from ..lib.impl import (
    delete_impl,
    export_impl,
    list_impl,
    list_info_impl,
    purge_all_impl,
    purge_impl,
    restore_impl,
)
from ..models.common import StatefulInfo
from ..models.dictionary import Dict
from .base import Endpoint
from .mixins import (
    AddMixin,
    DeleteByCodeMixin,
    GetByCodeMixin,
    GetMixin,
    PurgeByCodeMixin,
    RestoreByCodeMixin,
    StateByCodeMixin,
    StateMixin,
    UpdateByCodeMixin,
    UpdateMixin,
)


class DictApi(
    GetMixin,
    GetByCodeMixin,
    AddMixin,
    UpdateMixin,
    UpdateByCodeMixin,
    StateMixin,
    StateByCodeMixin,
    DeleteByCodeMixin,
    RestoreByCodeMixin,
    PurgeByCodeMixin,
    Endpoint,
):
    """API управления словарями.

    Допустимые критерии фильтрации совпадают с полями модели Dict.
    Пакетных операций и экспорта в форматы кроме XML сервер не поддерживает.
    """

    RESOURCE = "/dict"
    entity_class = Dict
    entity_info_class = StatefulInfo

    @log_call
    def list(self, page_request=None, criteria=None, sort_request=None, show_loading=True):
        check_criteria_argument({} if criteria is None else criteria, Dict)
        return list_impl(
            self, self.url(), page_request, criteria, sort_request, show_loading
        )

    @log_call
    def list_info(
        self, page_request=None, criteria=None, sort_request=None, show_loading=True
    ):
        check_criteria_argument({} if criteria is None else criteria, Dict)
        return list_info_impl(
            self, self.url("/info"), page_request, criteria, sort_request, show_loading
        )

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

    @log_call
    def export_xml(self, criteria=None, sort_request=None, auto_download=True, show_loading=True):
        check_criteria_argument({} if criteria is None else criteria, Dict)
        return export_impl(
            self,
            self.url("/export/xml"),
            "xml",
            criteria,
            sort_request,
            auto_download,
            show_loading,
        )
