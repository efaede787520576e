from datetime import datetime
from enum import Enum
from typing import List, Optional

from .base import Id, Model
from .common import Attachment, Contact, Info, StatefulInfo


class FeedbackAction(str, Enum):
    REPLY = "REPLY"
    ASSIGN = "ASSIGN"
    ACCEPT = "ACCEPT"
    REJECT = "REJECT"
    RESOLVE = "RESOLVE"
    CLOSE = "CLOSE"


class FeedbackTrack(Model):
    id: Optional[Id] = None
    feedback_id: Optional[Id] = None
    action: Optional[FeedbackAction] = None
    operator: Optional[Info] = None
    content: Optional[str] = None
    attachments: Optional[List[Attachment]] = None
    create_time: Optional[datetime] = None


class Feedback(Model):
    id: Optional[Id] = None
    app: Optional[StatefulInfo] = None
    category: Optional[Info] = None
    user: Optional[Info] = None
    contact: Optional[Contact] = None
    title: Optional[str] = None
    content: Optional[str] = None
    attachments: Optional[List[Attachment]] = None
    state: Optional[str] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None
