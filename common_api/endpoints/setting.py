from ..lib.decorators import log_call
from ..lib.impl import get_by_key_impl, update_property_by_key_impl
from ..lib.models import CriteriaDefinition
from ..models.setting import Setting
from .base import Endpoint
from .mixins import AddMixin, ExportMixin, ImportMixin, ListMixin


class SettingApi(ListMixin, AddMixin, ExportMixin, ImportMixin, Endpoint):
    """API системных настроек. Настройка идентифицируется по имени"""

    RESOURCE = "/setting"
    entity_class = Setting
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("name", str),
        CriteriaDefinition("readonly", bool),
        CriteriaDefinition("nullable", bool),
        CriteriaDefinition("multiple", bool),
        CriteriaDefinition("encrypted", bool),
    )

    @log_call
    def get(self, name, show_loading=True):
        return get_by_key_impl(self, self.url("/{name}"), "name", name, show_loading)

    @log_call
    def update(self, name, value, show_loading=True):
        """Изменение значения настройки. Возвращает время изменения"""
        return update_property_by_key_impl(
            self, self.url("/{name}"), "name", name, "value", str, value, show_loading
        )
