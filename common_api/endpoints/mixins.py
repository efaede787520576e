"""
Наборы стандартных методов API сущностей.

Каждый миксин строит шаблоны URL от атрибута RESOURCE класса и делегирует
работу соответствующему *_impl помощнику. Методы синхронно проверяют
аргументы и возвращают корутину, которую нужно дождаться.
"""

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
    export_impl,
    get_by_key_impl,
    get_impl,
    get_info_by_key_impl,
    get_info_impl,
    import_impl,
    list_impl,
    list_info_impl,
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
from ..models.common import State


class ListMixin:
    @log_call
    def list(self, page_request=None, criteria=None, sort_request=None, show_loading=True):
        return list_impl(
            self, self.url(), page_request, criteria, sort_request, show_loading
        )

    @log_call
    def list_info(
        self, page_request=None, criteria=None, sort_request=None, show_loading=True
    ):
        return list_info_impl(
            self, self.url("/info"), page_request, criteria, sort_request, show_loading
        )


class GetMixin:
    @log_call
    def get(self, id, show_loading=True):
        return get_impl(self, self.url("/{id}"), id, show_loading)

    @log_call
    def get_info(self, id, show_loading=True):
        return get_info_impl(self, self.url("/{id}/info"), id, show_loading)


class GetByCodeMixin:
    @log_call
    def get_by_code(self, code, show_loading=True):
        return get_by_key_impl(self, self.url("/code/{code}"), "code", code, show_loading)

    @log_call
    def get_info_by_code(self, code, show_loading=True):
        return get_info_by_key_impl(
            self, self.url("/code/{code}/info"), "code", code, show_loading
        )


class AddMixin:
    @log_call
    def add(self, entity, show_loading=True):
        return add_impl(self, self.url(), entity, show_loading)


class UpdateMixin:
    @log_call
    def update(self, entity, show_loading=True):
        return update_impl(self, self.url("/{id}"), entity, show_loading)


class UpdateByCodeMixin:
    @log_call
    def update_by_code(self, entity, show_loading=True):
        return update_by_key_impl(self, self.url("/code/{code}"), "code", entity, show_loading)


class StateMixin:
    @log_call
    def update_state(self, id, state: Union[State, str], show_loading=True):
        return update_property_impl(
            self, self.url("/{id}/state"), id, "state", (State, str), state, show_loading
        )


class StateByCodeMixin:
    @log_call
    def update_state_by_code(self, code, state: Union[State, str], show_loading=True):
        return update_property_by_key_impl(
            self,
            self.url("/code/{code}/state"),
            "code",
            code,
            "state",
            (State, str),
            state,
            show_loading,
        )


class CommentMixin:
    @log_call
    def update_comment(self, id, comment: str, show_loading=True):
        return update_property_impl(
            self, self.url("/{id}/comment"), id, "comment", str, comment, show_loading
        )


class CommentByCodeMixin:
    @log_call
    def update_comment_by_code(self, code, comment: str, show_loading=True):
        return update_property_by_key_impl(
            self,
            self.url("/code/{code}/comment"),
            "code",
            code,
            "comment",
            str,
            comment,
            show_loading,
        )


class DeleteMixin:
    @log_call
    def delete(self, id, show_loading=True):
        return delete_impl(self, self.url("/{id}"), id, show_loading)

    @log_call
    def batch_delete(self, ids, show_loading=True):
        return batch_delete_impl(self, self.url("/batch"), ids, show_loading)


class DeleteByCodeMixin:
    @log_call
    def delete_by_code(self, code, show_loading=True):
        return delete_by_key_impl(self, self.url("/code/{code}"), "code", code, show_loading)


class RestoreMixin:
    @log_call
    def restore(self, id, show_loading=True):
        return restore_impl(self, self.url("/{id}"), id, show_loading)

    @log_call
    def batch_restore(self, ids, show_loading=True):
        return batch_restore_impl(self, self.url("/batch"), ids, show_loading)


class RestoreByCodeMixin:
    @log_call
    def restore_by_code(self, code, show_loading=True):
        return restore_by_key_impl(
            self, self.url("/code/{code}"), "code", code, show_loading
        )


class PurgeMixin:
    @log_call
    def purge(self, id, show_loading=True):
        return purge_impl(self, self.url("/{id}/purge"), id, show_loading)

    @log_call
    def purge_all(self, show_loading=True):
        return purge_all_impl(self, self.url("/purge"), show_loading)

    @log_call
    def batch_purge(self, ids, show_loading=True):
        return batch_purge_impl(self, self.url("/batch/purge"), ids, show_loading)


class PurgeByCodeMixin:
    @log_call
    def purge_by_code(self, code, show_loading=True):
        return purge_by_key_impl(
            self, self.url("/code/{code}/purge"), "code", code, show_loading
        )


class EraseMixin:
    @log_call
    def erase(self, id, show_loading=True):
        return erase_impl(self, self.url("/{id}/erase"), id, show_loading)

    @log_call
    def batch_erase(self, ids, show_loading=True):
        return batch_erase_impl(self, self.url("/batch/erase"), ids, show_loading)


class EraseByCodeMixin:
    @log_call
    def erase_by_code(self, code, show_loading=True):
        return erase_by_key_impl(
            self, self.url("/code/{code}/erase"), "code", code, show_loading
        )


class ExportMixin:
    def _export(self, fmt, criteria, sort_request, auto_download, show_loading):
        return export_impl(
            self,
            self.url(f"/export/{fmt}"),
            fmt,
            criteria,
            sort_request,
            auto_download,
            show_loading,
        )

    @log_call
    def export_xml(self, criteria=None, sort_request=None, auto_download=True, show_loading=True):
        return self._export("xml", criteria, sort_request, auto_download, show_loading)

    @log_call
    def export_json(self, criteria=None, sort_request=None, auto_download=True, show_loading=True):
        return self._export("json", criteria, sort_request, auto_download, show_loading)

    @log_call
    def export_excel(self, criteria=None, sort_request=None, auto_download=True, show_loading=True):
        return self._export("excel", criteria, sort_request, auto_download, show_loading)

    @log_call
    def export_csv(self, criteria=None, sort_request=None, auto_download=True, show_loading=True):
        return self._export("csv", criteria, sort_request, auto_download, show_loading)


class ImportMixin:
    def _import(self, fmt, file, parallel, threads, show_loading):
        return import_impl(
            self, self.url(f"/import/{fmt}"), fmt, file, parallel, threads, show_loading
        )

    @log_call
    def import_xml(self, file, parallel=None, threads=None, show_loading=True):
        return self._import("xml", file, parallel, threads, show_loading)

    @log_call
    def import_json(self, file, parallel=None, threads=None, show_loading=True):
        return self._import("json", file, parallel, threads, show_loading)

    @log_call
    def import_excel(self, file, parallel=None, threads=None, show_loading=True):
        return self._import("excel", file, parallel, threads, show_loading)

    @log_call
    def import_csv(self, file, parallel=None, threads=None, show_loading=True):
        return self._import("csv", file, parallel, threads, show_loading)
