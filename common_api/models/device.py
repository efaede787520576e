from datetime import datetime
from typing import Optional

from .base import Id, Model
from .common import Info, State, StatefulInfo


class Device(Model):
    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    category: Optional[Info] = None
    organization: Optional[StatefulInfo] = None
    model: Optional[str] = None
    platform: Optional[str] = None
    version: Optional[str] = None
    state: Optional[State] = None
    bound: Optional[bool] = None
    comment: Optional[str] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
