from ..lib.decorators import log_call
from ..lib.impl import (
    delete_by_parent_and_key_impl,
    erase_by_parent_and_key_impl,
    get_by_parent_and_key_impl,
    get_info_by_parent_and_key_impl,
    purge_by_parent_and_key_impl,
    restore_by_parent_and_key_impl,
    update_by_parent_and_key_impl,
)
from ..lib.impl.add_impl import normalize_entity
from ..lib.models import CriteriaDefinition
from ..models.dictionary import DictEntry, DictEntryInfo
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria
from .mixins import (
    AddMixin,
    DeleteMixin,
    EraseMixin,
    ExportMixin,
    GetMixin,
    ImportMixin,
    ListMixin,
    PurgeMixin,
    RestoreMixin,
    UpdateMixin,
)

# Элемент по коду адресуется через свой словарь
BY_DICT_CODE = "/dict/code/{dict_code}/entry/code/{code}"
BY_DICT_ID = "/dict/{dict_id}/entry/code/{code}"


class DictEntryApi(
    ListMixin,
    GetMixin,
    AddMixin,
    UpdateMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    EraseMixin,
    ExportMixin,
    ImportMixin,
    Endpoint,
):
    """API управления элементами словарей.

    Код элемента уникален только в пределах словаря, поэтому операции по
    коду принимают ещё и ID или код словаря.
    """

    RESOURCE = "/dict/entry"
    entity_class = DictEntry
    entity_info_class = DictEntryInfo
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("name", str),
        *reference_criteria("dict"),
        *reference_criteria("parent"),
        CriteriaDefinition("deleted", bool),
        *LIFECYCLE_CRITERIA,
    )

    @log_call
    def get_by_code(self, dict_code, code, show_loading=True):
        return get_by_parent_and_key_impl(
            self, BY_DICT_CODE, "dict_code", dict_code, "code", code, show_loading
        )

    @log_call
    def get_info_by_code(self, dict_code, code, show_loading=True):
        return get_info_by_parent_and_key_impl(
            self, BY_DICT_CODE + "/info", "dict_code", dict_code, "code", code, show_loading
        )

    @log_call
    def update_by_code(self, entity, show_loading=True):
        """Обновление по коду, словарь берётся из поля dict сущности"""
        entity = normalize_entity(self, entity)
        dict_id = entity.dict_.id if entity.dict_ is not None else None
        return update_by_parent_and_key_impl(
            self, BY_DICT_ID, "dict_id", dict_id, "code", entity, show_loading
        )

    @log_call
    def delete_by_code(self, dict_id, code, show_loading=True):
        return delete_by_parent_and_key_impl(
            self, BY_DICT_ID, "dict_id", dict_id, "code", code, show_loading
        )

    @log_call
    def restore_by_code(self, dict_id, code, show_loading=True):
        return restore_by_parent_and_key_impl(
            self, BY_DICT_ID, "dict_id", dict_id, "code", code, show_loading
        )

    @log_call
    def purge_by_code(self, dict_id, code, show_loading=True):
        return purge_by_parent_and_key_impl(
            self, BY_DICT_ID + "/purge", "dict_id", dict_id, "code", code, show_loading
        )

    @log_call
    def erase_by_code(self, dict_id, code, show_loading=True):
        return erase_by_parent_and_key_impl(
            self, BY_DICT_ID + "/erase", "dict_id", dict_id, "code", code, show_loading
        )
