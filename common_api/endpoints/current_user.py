from collections.abc import Mapping
from typing import Any, Optional

from ..lib.checks import check_argument_type
from ..lib.decorators import log_call
from ..lib.impl.exists_impl import head_exists
from ..lib.impl.request import perform
from ..lib.utils import serialize_value
from ..models.common import Info
from ..models.organization import Employee, EmployeeInfo
from ..models.person import Credential, Person, PersonInfo
from ..models.user import User, UserInfo
from .base import Endpoint


class CurrentUserApi(Endpoint):
    """API операций над текущим вошедшим пользователем"""

    RESOURCE = "/me"

    async def _send(
        self, method: str, suffix: str, result_class, show: Optional[str], data: Any = None
    ):
        kwargs = {} if data is None else {"data": serialize_value(data)}
        obj = await perform(self, method, self.url(suffix), show, **kwargs)
        return result_class.create(obj)

    @staticmethod
    def _show(show_loading: bool, name: str) -> Optional[str]:
        check_argument_type("show_loading", show_loading, bool)
        return name if show_loading else None

    @log_call
    async def get_user(self, show_loading=True) -> User:
        show = self._show(show_loading, "show_getting")
        result = await self._send("get", "/user", User, show)
        self.logger.info("Successfully get the current user: %s", result.username)
        return result

    @log_call
    async def get_user_info(self, show_loading=True) -> UserInfo:
        show = self._show(show_loading, "show_getting")
        result = await self._send("get", "/user/info", UserInfo, show)
        self.logger.info("Successfully get the current user info: %s", result.username)
        return result

    @log_call
    async def update_user(self, user, show_loading=True) -> User:
        check_argument_type("user", user, (User, Mapping))
        show = self._show(show_loading, "show_updating")
        result = await self._send("put", "/user", User, show, user)
        self.logger.info("Successfully update the current login user.")
        self.logger.debug("The updated current user is: %s", result)
        return result

    @log_call
    async def exist_person(self, show_loading=True) -> bool:
        """Есть ли у текущего пользователя личные данные (Person)"""
        check_argument_type("show_loading", show_loading, bool)
        return await head_exists(self, self.url("/person"), show_loading)

    @log_call
    async def get_person(self, show_loading=True) -> Person:
        show = self._show(show_loading, "show_getting")
        result = await self._send("get", "/person", Person, show)
        self.logger.info("Successfully get the profile of the current user.")
        return result

    @log_call
    async def get_person_info(self, show_loading=True) -> PersonInfo:
        show = self._show(show_loading, "show_getting")
        result = await self._send("get", "/person/info", PersonInfo, show)
        self.logger.info("Successfully get the basic profile of the current user.")
        return result

    @log_call
    async def add_person(self, person, show_loading=True) -> Person:
        check_argument_type("person", person, (Person, Mapping))
        show = self._show(show_loading, "show_updating")
        result = await self._send("post", "/person", Person, show, person)
        self.logger.info("Successfully add the profile of the current user: %s", result.id)
        return result

    @log_call
    async def update_person(self, person, show_loading=True) -> Person:
        check_argument_type("person", person, (Person, Mapping))
        show = self._show(show_loading, "show_updating")
        result = await self._send("put", "/person", Person, show, person)
        self.logger.info("Successfully update the profile of the current user.")
        return result

    @log_call
    async def bind_person(
        self, name: str, mobile: str, credential, verify_code: str, show_loading=True
    ) -> PersonInfo:
        """Привязка текущего пользователя к существующей персоне"""
        check_argument_type("name", name, str)
        check_argument_type("mobile", mobile, str)
        check_argument_type("credential", credential, (Credential, Mapping))
        check_argument_type("verify_code", verify_code, str)
        show = self._show(show_loading, "show_updating")
        if isinstance(credential, Mapping):
            credential = Credential.model_validate(dict(credential))
        data = {
            "name": name,
            "mobile": mobile,
            "credential": {"type": credential.type, "number": credential.number},
            "verify_code": verify_code,
        }
        result = await self._send("post", "/person/bind", PersonInfo, show, data)
        self.logger.info("Successfully bind the Person to the current user: %s", result.id)
        return result

    @log_call
    async def exist_employee(self, show_loading=True) -> bool:
        check_argument_type("show_loading", show_loading, bool)
        return await head_exists(self, self.url("/employee"), show_loading)

    @log_call
    async def get_employee(self, show_loading=True) -> Employee:
        show = self._show(show_loading, "show_getting")
        result = await self._send("get", "/employee", Employee, show)
        self.logger.info("Successfully get the Employee of the current user.")
        return result

    @log_call
    async def get_employee_info(self, show_loading=True) -> EmployeeInfo:
        show = self._show(show_loading, "show_getting")
        result = await self._send("get", "/employee/info", EmployeeInfo, show)
        self.logger.info("Successfully get the EmployeeInfo of the current user.")
        return result

    @log_call
    async def add_employee(self, employee, show_loading=True) -> Employee:
        """Создание сотрудника и привязка к нему текущего пользователя"""
        check_argument_type("employee", employee, (Employee, Mapping))
        show = self._show(show_loading, "show_updating")
        result = await self._send("post", "/employee", Employee, show, employee)
        self.logger.info("Successfully add an Employee to the current user: %s", result.id)
        return result

    @log_call
    async def update_employee(self, employee, show_loading=True) -> Employee:
        check_argument_type("employee", employee, (Employee, Mapping))
        show = self._show(show_loading, "show_updating")
        result = await self._send("put", "/employee", Employee, show, employee)
        self.logger.info("Successfully update the Employee of the current user.")
        return result

    @log_call
    async def bind_employee(
        self, name: str, mobile: str, organization, verify_code: str, show_loading=True
    ) -> EmployeeInfo:
        check_argument_type("name", name, str)
        check_argument_type("mobile", mobile, str)
        check_argument_type("organization", organization, (Info, Mapping))
        check_argument_type("verify_code", verify_code, str)
        show = self._show(show_loading, "show_updating")
        data = {
            "name": name,
            "mobile": mobile,
            "organization": organization,
            "verify_code": verify_code,
        }
        result = await self._send("post", "/employee/bind", EmployeeInfo, show, data)
        self.logger.info("Successfully bind the Employee to the current user: %s", result.id)
        return result
