from typing import Union

from ..common import FORM_URLENCODED
from ..lib.checks import check_argument_type
from ..lib.decorators import log_call
from ..lib.utils import serialize_value
from ..models.user import VerifyScene
from .base import Endpoint


class VerifyCodeApi(Endpoint):
    """API отправки проверочных кодов по SMS и электронной почте"""

    RESOURCE = "/verify-code"

    async def _send(self, channel: str, key: str, value: str, scene, message: str) -> None:
        self.logger.info("Sending verification code to the %s: %s", key, value)
        self.loading.show(message)
        try:
            await self.client.request(
                "post",
                self.url(f"/{channel}"),
                data={key: value, "scene": serialize_value(scene)},
                content_type=FORM_URLENCODED,
            )
        finally:
            self.loading.hide()
        self.logger.info("Successfully send the verification code to the %s: %s", key, value)

    @log_call
    async def send_by_sms(self, mobile: str, scene: Union[VerifyScene, str]) -> None:
        check_argument_type("mobile", mobile, str)
        check_argument_type("scene", scene, (VerifyScene, str))
        await self._send("sms", "mobile", mobile, scene, "Sending the SMS verification code...")

    @log_call
    async def send_by_email(self, email: str, scene: Union[VerifyScene, str]) -> None:
        check_argument_type("email", email, str)
        check_argument_type("scene", scene, (VerifyScene, str))
        await self._send("email", "email", email, scene, "Sending the email verification code...")
