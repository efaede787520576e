from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import Id, Model
from .common import Attachment, State, StatefulInfo


class SocialNetwork(str, Enum):
    WECHAT = "WECHAT"
    WEIBO = "WEIBO"
    QQ = "QQ"
    ALIPAY = "ALIPAY"


class Token(Model):
    value: Optional[str] = Field(default=None, repr=False)
    create_time: Optional[datetime] = None
    max_age: Optional[int] = None


class User(Model):
    id: Optional[Id] = None
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    name: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[Attachment] = None
    organization: Optional[StatefulInfo] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    state: Optional[State] = None
    last_login_time: Optional[datetime] = None
    valid_time: Optional[datetime] = None
    expired_time: Optional[datetime] = None
    comment: Optional[str] = None
    predefined: Optional[bool] = None
    test: Optional[bool] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class UserInfo(Model):
    id: Optional[Id] = None
    username: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[Attachment] = None
    organization: Optional[StatefulInfo] = None
    state: Optional[State] = None
    deleted: Optional[bool] = None


class LoginResponse(Model):
    """Ответ сервера на успешный вход пользователя"""

    app: Optional[StatefulInfo] = None
    user: Optional[UserInfo] = None
    token: Optional[Token] = None
    roles: Optional[List[str]] = None
    privileges: Optional[List[str]] = None


class RegisterUserParams(Model):
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    name: Optional[str] = None
    nickname: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    verify_code: Optional[str] = Field(default=None, repr=False)
    social_network: Optional[SocialNetwork] = None
    app_id: Optional[str] = None
    open_id: Optional[str] = None


class VerifyScene(str, Enum):
    REGISTER = "REGISTER"
    LOGIN = "LOGIN"
    RESET_PASSWORD = "RESET_PASSWORD"
    BIND_PERSON = "BIND_PERSON"
    BIND_EMPLOYEE = "BIND_EMPLOYEE"
    CHANGE_MOBILE = "CHANGE_MOBILE"
    CHANGE_EMAIL = "CHANGE_EMAIL"
