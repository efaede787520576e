from .base import Id, Model, Page
from .common import (
    Attachment,
    AttachmentType,
    Contact,
    ErrorInfo,
    Info,
    InfoWithEntity,
    PageRequest,
    Software,
    SortOrder,
    SortRequest,
    State,
    StatefulInfo,
    Upload,
    WechatJsConfig,
)
from .category import Category
from .device import Device
from .dictionary import Dict, DictEntry, DictEntryInfo
from .feedback import Feedback, FeedbackAction, FeedbackTrack
from .organization import App, Department, Employee, EmployeeInfo, Organization
from .person import Credential, CredentialType, Gender, Person, PersonInfo
from .region import City, Country, District, Province, Region, Street
from .setting import Setting
from .task import TaskInfo, TaskStatus
from .user import (
    LoginResponse,
    RegisterUserParams,
    SocialNetwork,
    Token,
    User,
    UserInfo,
    VerifyScene,
)

__all__ = [
    "App",
    "Attachment",
    "AttachmentType",
    "Category",
    "City",
    "Contact",
    "Country",
    "Credential",
    "CredentialType",
    "Department",
    "Device",
    "Dict",
    "DictEntry",
    "DictEntryInfo",
    "District",
    "Employee",
    "EmployeeInfo",
    "ErrorInfo",
    "Feedback",
    "FeedbackAction",
    "FeedbackTrack",
    "Gender",
    "Id",
    "Info",
    "InfoWithEntity",
    "LoginResponse",
    "Model",
    "Organization",
    "Page",
    "PageRequest",
    "Person",
    "PersonInfo",
    "Province",
    "Region",
    "RegisterUserParams",
    "Setting",
    "SocialNetwork",
    "Software",
    "SortOrder",
    "SortRequest",
    "State",
    "StatefulInfo",
    "Street",
    "TaskInfo",
    "TaskStatus",
    "Token",
    "Upload",
    "User",
    "UserInfo",
    "VerifyScene",
    "WechatJsConfig",
]
