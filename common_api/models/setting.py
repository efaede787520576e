from datetime import datetime
from typing import Optional

from .base import Model


class Setting(Model):
    """Системная настройка, идентифицируется по имени"""

    name: Optional[str] = None
    type: Optional[str] = None
    readonly: Optional[bool] = None
    nullable: Optional[bool] = None
    multiple: Optional[bool] = None
    encrypted: Optional[bool] = None
    value: Optional[str] = None
    description: Optional[str] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
