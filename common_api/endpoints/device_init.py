from ..lib.checks import check_argument_type
from ..lib.decorators import log_call
from ..lib.impl.request import perform
from ..lib.utils import serialize_value
from ..models.device import Device
from .base import Endpoint


class DeviceInitApi(Endpoint):
    """API первичной регистрации устройств"""

    RESOURCE = "/device"

    @log_call
    async def register(self, device: Device) -> None:
        check_argument_type("device", device, Device)
        self.loading.show("Registering the device...")
        try:
            await self.client.request(
                "post", self.url("/register"), data=serialize_value(device)
            )
        finally:
            self.loading.hide()
        self.logger.info("Device registered successfully: %s", device.code)

    @log_call
    async def unregister(self, code: str) -> None:
        check_argument_type("code", code, str)
        await perform(self, "put", self.url("/unregister"), "show_updating", data=code)
        self.logger.info("Device unregistered successfully: %s", code)

    @log_call
    async def unbound(self, code: str) -> None:
        """Отвязка устройства от владельца"""
        check_argument_type("code", code, str)
        await perform(self, "put", self.url("/unbound"), "show_updating", data=code)
        self.logger.info("Device unbound successfully: %s", code)
