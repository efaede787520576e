from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import Id, Model
from .common import Attachment, Contact, Info, State, StatefulInfo
from .person import Credential, Gender


class App(Model):
    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    organization: Optional[StatefulInfo] = None
    category: Optional[Info] = None
    state: Optional[State] = None
    security_key: Optional[str] = Field(default=None, repr=False)
    token: Optional[str] = Field(default=None, repr=False)
    last_authorize_time: Optional[datetime] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    comment: Optional[str] = None
    predefined: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class Organization(Model):
    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    category: Optional[Info] = None
    parent: Optional[Info] = None
    contact: Optional[Contact] = None
    state: Optional[State] = None
    description: Optional[str] = None
    comment: Optional[str] = None
    test: Optional[bool] = None
    predefined: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class Department(Model):
    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    category: Optional[Info] = None
    organization: Optional[StatefulInfo] = None
    parent: Optional[Info] = None
    contact: Optional[Contact] = None
    state: Optional[State] = None
    description: Optional[str] = None
    comment: Optional[str] = None
    test: Optional[bool] = None
    predefined: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class Employee(Model):
    id: Optional[Id] = None
    code: Optional[str] = None
    internal_code: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    person_id: Optional[Id] = None
    gender: Optional[Gender] = None
    credential: Optional[Credential] = None
    category: Optional[Info] = None
    photo: Optional[Attachment] = None
    organization: Optional[StatefulInfo] = None
    department: Optional[StatefulInfo] = None
    job_title: Optional[str] = None
    contact: Optional[Contact] = None
    state: Optional[State] = None
    comment: Optional[str] = None
    test: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class EmployeeInfo(Model):
    id: Optional[Id] = None
    code: Optional[str] = None
    internal_code: Optional[str] = None
    name: Optional[str] = None
    organization: Optional[StatefulInfo] = None
    department: Optional[StatefulInfo] = None
