from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .base import Id, Model


class State(str, Enum):
    NORMAL = "NORMAL"
    DISABLED = "DISABLED"
    LOCKED = "LOCKED"
    FROZEN = "FROZEN"
    CANCELLED = "CANCELLED"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class AttachmentType(str, Enum):
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    AUDIO = "AUDIO"
    DOCUMENT = "DOCUMENT"
    ARCHIVE = "ARCHIVE"
    OTHER = "OTHER"


class PageRequest(Model):
    """Запрос страницы: индекс страницы и её размер"""

    page_index: Optional[int] = None
    page_size: Optional[int] = None


class SortRequest(Model):
    """Запрос сортировки по полю сущности"""

    sort_field: Optional[str] = None
    sort_order: Optional[Union[SortOrder, str]] = None


class ErrorInfo(Model):
    type: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None
    params: Optional[List[Any]] = None


class Info(Model):
    """Краткая информация о сущности"""

    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    deleted: Optional[bool] = None


class StatefulInfo(Info):
    state: Optional[State] = None


class InfoWithEntity(Info):
    entity: Optional[str] = None


class Contact(Model):
    phone: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    address: Optional[Dict[str, Any]] = None
    postalcode: Optional[str] = None


class Upload(Model):
    id: Optional[Id] = None
    type: Optional[AttachmentType] = None
    filename: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class Attachment(Model):
    id: Optional[Id] = None
    type: Optional[AttachmentType] = None
    title: Optional[str] = None
    upload: Optional[Upload] = None
    owner_type: Optional[str] = None
    owner_id: Optional[Id] = None
    visible: Optional[bool] = None
    create_time: Optional[datetime] = None


class Software(Model):
    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    create_time: Optional[datetime] = None


class WechatJsConfig(Model):
    """Параметры инициализации WeChat JS-SDK для страницы"""

    app_id: Optional[str] = None
    timestamp: Optional[int] = None
    nonce_str: Optional[str] = None
    signature: Optional[str] = None
    js_api_list: Optional[List[str]] = None
