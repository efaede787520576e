from datetime import datetime
from typing import Optional

from .base import Id, Model
from .common import Info


class Category(Model):
    """Категория, которой помечаются сущности другого типа (поле entity)"""

    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    entity: Optional[str] = None
    parent: Optional[Info] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None
