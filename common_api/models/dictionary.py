from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import Id, Model
from .common import Info, State


class Dict(Model):
    """Словарь: именованный набор значений, код уникален"""

    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    standard_doc: Optional[str] = None
    standard_code: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    category: Optional[Info] = None
    state: Optional[State] = None
    predefined: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class DictEntry(Model):
    """Элемент словаря, код уникален в пределах своего словаря"""

    id: Optional[Id] = None
    # имя dict занято методом BaseModel
    dict_: Optional[Info] = Field(default=None, alias="dict")
    code: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[Info] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class DictEntryInfo(Info):
    dict_id: Optional[Id] = None
