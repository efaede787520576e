from datetime import date, datetime
from enum import Enum
from typing import Optional

from .base import Id, Model
from .common import Attachment, Contact, Info, StatefulInfo


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class CredentialType(str, Enum):
    IDENTITY_CARD = "IDENTITY_CARD"
    PASSPORT = "PASSPORT"
    DRIVING_LICENCE = "DRIVING_LICENCE"
    OTHER = "OTHER"


class Credential(Model):
    type: Optional[CredentialType] = None
    number: Optional[str] = None


class Person(Model):
    id: Optional[Id] = None
    name: Optional[str] = None
    username: Optional[str] = None
    gender: Optional[Gender] = None
    birthday: Optional[date] = None
    credential: Optional[Credential] = None
    category: Optional[Info] = None
    organization: Optional[StatefulInfo] = None
    photo: Optional[Attachment] = None
    contact: Optional[Contact] = None
    guardian_id: Optional[Id] = None
    has_medicare: Optional[bool] = None
    has_social_security: Optional[bool] = None
    comment: Optional[str] = None
    test: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class PersonInfo(Model):
    id: Optional[Id] = None
    name: Optional[str] = None
    username: Optional[str] = None
    gender: Optional[Gender] = None
    credential: Optional[Credential] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    deleted: Optional[bool] = None
