from ..lib.checks import check_argument_type
from ..lib.decorators import log_call
from ..lib.impl.request import perform
from ..models.common import Software
from .base import Endpoint


class SystemApi(Endpoint):
    RESOURCE = "/system"

    @log_call
    async def get_info(self, show_loading=True) -> Software:
        """Информация о серверном программном обеспечении"""
        check_argument_type("show_loading", show_loading, bool)
        obj = await perform(
            self, "get", self.url("/info"), "show_getting" if show_loading else None
        )
        system = Software.create(obj)
        self.logger.info("Successfully get the system information.")
        self.logger.debug("The system information is: %s", system)
        return system

    @log_call
    async def get_time(self) -> str:
        """Текущее время сервера в формате ISO-8601"""
        timestamp = await perform(self, "get", self.url("/time"))
        self.logger.info("Successfully get the system time: %s", timestamp)
        return timestamp
