from collections.abc import Mapping
from typing import Any, Optional, Union

from ..common import FORM_URLENCODED
from ..lib.checks import check_argument_type, check_id_argument_type
from ..lib.decorators import log_call
from ..lib.utils import serialize_value
from ..models.user import LoginResponse, RegisterUserParams, SocialNetwork, Token
from .base import Endpoint


class UserAuthenticateApi(Endpoint):
    """API аутентификации пользователей.

    После успешного входа или регистрации токен доступа сохраняется в
    клиенте и отправляется в заголовке Authorization последующих запросов.
    """

    RESOURCE = "/authenticate/user"

    async def _post(self, suffix: str, message: Optional[str], **kwargs) -> Any:
        if message:
            self.loading.show(message)
        try:
            return await self.client.request("post", self.url(suffix), **kwargs)
        finally:
            if message:
                self.loading.hide()

    def _remember(self, response: Optional[LoginResponse]) -> Optional[LoginResponse]:
        token = response.token if response else None
        if token and token.value:
            self.client.set_auth_token(token.value)
        return response

    async def _login(self, data: dict, show_loading: bool) -> LoginResponse:
        obj = await self._post(
            "/login", "Logging in..." if show_loading else None, data=serialize_value(data)
        )
        response = self._remember(LoginResponse.create(obj))
        username = response.user.username if response and response.user else None
        self.logger.info("Successfully login as: %s", username)
        return response

    @log_call
    async def register(self, params, show_loading=True) -> LoginResponse:
        check_argument_type("params", params, (RegisterUserParams, Mapping))
        check_argument_type("show_loading", show_loading, bool)
        obj = await self._post(
            "/register",
            "Registering a new user..." if show_loading else None,
            data=serialize_value(params),
        )
        response = self._remember(LoginResponse.create(obj))
        self.logger.info("Successfully register a new user.")
        return response

    @log_call
    async def login_by_username(self, username: str, password: str, show_loading=True) -> LoginResponse:
        check_argument_type("username", username, str)
        check_argument_type("password", password, str)
        check_argument_type("show_loading", show_loading, bool)
        return await self._login({"username": username, "password": password}, show_loading)

    @log_call
    async def login_by_mobile(self, mobile: str, verify_code: str, show_loading=True) -> LoginResponse:
        check_argument_type("mobile", mobile, str)
        check_argument_type("verify_code", verify_code, str)
        check_argument_type("show_loading", show_loading, bool)
        return await self._login({"mobile": mobile, "verify_code": verify_code}, show_loading)

    @log_call
    async def login_by_open_id(
        self,
        social_network: Union[SocialNetwork, str],
        app_id: str,
        open_id: str,
        show_loading=True,
    ) -> LoginResponse:
        """Вход через аккаунт социальной сети"""
        check_argument_type("social_network", social_network, (SocialNetwork, str))
        check_argument_type("app_id", app_id, str)
        check_argument_type("open_id", open_id, str)
        check_argument_type("show_loading", show_loading, bool)
        data = {"social_network": social_network, "app_id": app_id, "open_id": open_id}
        return await self._login(data, show_loading)

    @log_call
    async def logout(self, show_loading=True) -> None:
        check_argument_type("show_loading", show_loading, bool)
        await self._post("/logout", "Logging out..." if show_loading else None)
        self.client.remove_auth()
        self.logger.info("Successfully logout.")

    @log_call
    async def get_login_info(self, show_loading=True) -> LoginResponse:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.loading.show_getting()
        try:
            obj = await self.client.request("get", self.url("/info"))
        finally:
            if show_loading:
                self.loading.hide()
        response = LoginResponse.create(obj)
        username = response.user.username if response and response.user else None
        self.logger.info("Successfully get the login info of: %s", username)
        return response

    @log_call
    async def check_token(self, user_id, token, show_loading=True) -> Token:
        """Проверка действительности токена пользователя"""
        check_id_argument_type(user_id, "user_id")
        check_argument_type("token", token, (Token, Mapping))
        check_argument_type("show_loading", show_loading, bool)
        if isinstance(token, Mapping):
            token = Token.model_validate(dict(token))
        params = {"id": str(user_id), "token": token.value}
        if show_loading:
            self.loading.show("Checking the access token...")
        try:
            obj = await self.client.request("get", self.url("/token/check"), params=params)
        finally:
            if show_loading:
                self.loading.hide()
        result = Token.create(obj)
        self.logger.info("The token of the user is valid: %s", user_id)
        return result

    @log_call
    async def bind_open_id(
        self,
        social_network: Union[SocialNetwork, str],
        app_id: str,
        open_id: str,
        show_loading=True,
    ) -> None:
        check_argument_type("social_network", social_network, (SocialNetwork, str))
        check_argument_type("app_id", app_id, str)
        check_argument_type("open_id", open_id, str)
        check_argument_type("show_loading", show_loading, bool)
        data = {"social_network": social_network, "app_id": app_id, "open_id": open_id}
        await self._post(
            "/social-network/bind",
            "Binding the account..." if show_loading else None,
            data=serialize_value(data),
        )
        self.logger.info(
            "Successfully bind the open ID to the current user: %s %s %s",
            serialize_value(social_network),
            app_id,
            open_id,
        )

    @log_call
    async def reset_password(
        self,
        mobile: Optional[str],
        email: Optional[str],
        password: str,
        verify_code: str,
        show_loading=True,
    ) -> None:
        """Сброс пароля по коду, отправленному на телефон или почту"""
        check_argument_type("mobile", mobile, str, nullable=True)
        check_argument_type("email", email, str, nullable=True)
        check_argument_type("password", password, str)
        check_argument_type("verify_code", verify_code, str)
        check_argument_type("show_loading", show_loading, bool)
        if mobile is None and email is None:
            raise ValueError("The arguments 'mobile' and 'email' cannot both be None.")
        data = {}
        if mobile:
            data["mobile"] = mobile
        if email:
            data["email"] = email
        data["password"] = password
        data["verify_code"] = verify_code
        await self._post(
            "/password/reset",
            "Resetting the password..." if show_loading else None,
            data=data,
            content_type=FORM_URLENCODED,
        )
        self.logger.info("Successfully reset the password.")
