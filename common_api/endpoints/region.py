"""
API административно-территориальных единиц: страна, провинция, город,
район и улица. Все они адресуются по ID или по коду.
"""

from ..lib.models import CriteriaDefinition
from ..models.common import Info
from ..models.region import City, Country, District, Province, Street
from .base import LIFECYCLE_CRITERIA, Endpoint, reference_criteria
from .mixins import (
    AddMixin,
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
    UpdateByCodeMixin,
    UpdateMixin,
)

REGION_CRITERIA = (
    CriteriaDefinition("name", str),
    CriteriaDefinition("phone_area", str),
    CriteriaDefinition("postalcode", str),
    CriteriaDefinition("level", int),
    CriteriaDefinition("predefined", bool),
    CriteriaDefinition("deleted", bool),
    *LIFECYCLE_CRITERIA,
)


class RegionApi(
    ListMixin,
    GetMixin,
    GetByCodeMixin,
    AddMixin,
    UpdateMixin,
    UpdateByCodeMixin,
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
    entity_info_class = Info


class CountryApi(RegionApi):
    RESOURCE = "/country"
    entity_class = Country
    CRITERIA_DEFINITIONS = (
        CriteriaDefinition("iso2", str),
        CriteriaDefinition("iso3", str),
        *REGION_CRITERIA,
    )


class ProvinceApi(RegionApi):
    RESOURCE = "/province"
    entity_class = Province
    CRITERIA_DEFINITIONS = (*reference_criteria("country"), *REGION_CRITERIA)


class CityApi(RegionApi):
    RESOURCE = "/city"
    entity_class = City
    CRITERIA_DEFINITIONS = (*reference_criteria("province"), *REGION_CRITERIA)


class DistrictApi(RegionApi):
    RESOURCE = "/district"
    entity_class = District
    CRITERIA_DEFINITIONS = (*reference_criteria("city"), *REGION_CRITERIA)


class StreetApi(RegionApi):
    RESOURCE = "/street"
    entity_class = Street
    CRITERIA_DEFINITIONS = (*reference_criteria("district"), *REGION_CRITERIA)
