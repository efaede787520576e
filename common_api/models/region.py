from datetime import datetime
from typing import Optional

from .base import Id, Model
from .common import Info


class Region(Model):
    """Общие поля административно-территориальных единиц"""

    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    phone_area: Optional[str] = None
    postalcode: Optional[str] = None
    level: Optional[int] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class Country(Region):
    iso2: Optional[str] = None
    iso3: Optional[str] = None


class Province(Region):
    country: Optional[Info] = None


class City(Region):
    province: Optional[Info] = None


class District(Region):
    city: Optional[Info] = None


class Street(Region):
    district: Optional[Info] = None
