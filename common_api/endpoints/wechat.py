from ..lib.checks import check_argument_type
from ..lib.decorators import log_call
from ..lib.impl.request import perform
from ..lib.utils import substitute
from ..models.common import WechatJsConfig
from .base import Endpoint


class WechatApi(Endpoint):
    """API интеграции с WeChat JS-SDK"""

    RESOURCE = "/wechat/js"

    @log_call
    async def get_js_config(self, url: str) -> WechatJsConfig:
        """Параметры JS-SDK для страницы с указанным URL"""
        check_argument_type("url", url, str)
        obj = await perform(
            self, "get", self.url("/jsconfig"), "show_getting", params={"url": url}
        )
        config = WechatJsConfig.create(obj)
        self.logger.info("Successfully get the WeChat JS config for: %s", url)
        self.logger.debug("The WeChat JS config is: %s", config)
        return config

    @log_call
    async def get_authorization_page_url(self, url: str) -> str:
        """Адрес страницы авторизации WeChat, возвращающей на url"""
        check_argument_type("url", url, str)
        result = await perform(
            self, "get", self.url("/authorization"), "show_getting", params={"url": url}
        )
        self.logger.info("Successfully get the WeChat authorization page URL: %s", result)
        return str(result)

    @log_call
    async def get_open_id(self, code: str) -> str:
        """Open ID пользователя по коду авторизации WeChat"""
        check_argument_type("code", code, str)
        result = await perform(
            self, "get", substitute(self.url("/open-id/{code}"), code=code), "show_getting"
        )
        self.logger.info("Successfully get the WeChat open ID: %s", result)
        return str(result)
