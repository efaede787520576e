from datetime import datetime
from enum import Enum
from typing import Optional

from .base import Id, Model
from .common import Info


class TaskStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    RUNNING = "RUNNING"
    CANCELLED = "CANCELLED"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class TaskInfo(Model):
    id: Optional[Id] = None
    category: Optional[Info] = None
    target_entity: Optional[str] = None
    target_id: Optional[Id] = None
    result_entity: Optional[str] = None
    result_id: Optional[Id] = None
    status: Optional[TaskStatus] = None
    progress: Optional[float] = None
    message: Optional[str] = None
    submit_time: Optional[datetime] = None
    start_time: Optional[datetime] = None
    cancel_time: Optional[datetime] = None
    finish_time: Optional[datetime] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
