from typing import Optional

from ..lib.checks import check_argument_type
from ..lib.decorators import log_call
from ..lib.impl.import_impl import read_file_argument_async
from ..lib.impl.request import perform, perform_download
from ..lib.models import DownloadedFile
from ..models.common import Upload
from .base import Endpoint


class FileApi(Endpoint):
    """API загрузки файлов на сервер и скачивания с него.

    Путь к файлу всегда передаётся query параметром path, а не
    склеивается с URL: так он корректно экранируется.
    """

    RESOURCE = "/file"

    @log_call
    async def upload(
        self, filename: str, file, content_type: Optional[str] = None, show_loading=True
    ) -> Upload:
        check_argument_type("filename", filename, str)
        check_argument_type("content_type", content_type, str, nullable=True)
        check_argument_type("show_loading", show_loading, bool)
        name, content = await read_file_argument_async(file, filename)
        data = {"filename": filename}
        if content_type:
            data["content_type"] = content_type
        obj = await perform(
            self,
            "post",
            self.url("/upload"),
            "show_uploading" if show_loading else None,
            data=data,
            files={"file": (name, content, content_type)},
        )
        result = Upload.create(obj)
        self.logger.info("Successfully upload the file: %s", filename)
        self.logger.debug("The upload file is: %s", result)
        return result

    @log_call
    async def download(
        self,
        path: str,
        mime_type: Optional[str] = None,
        auto_download: bool = True,
        filename: Optional[str] = None,
        show_loading=True,
    ) -> Optional[DownloadedFile]:
        """Скачивание файла по его относительному пути на сервере.

        При auto_download=True файл сохраняется в download_dir клиента,
        иначе возвращается DownloadedFile.
        """
        check_argument_type("path", path, str)
        check_argument_type("mime_type", mime_type, str, nullable=True)
        check_argument_type("auto_download", auto_download, bool)
        check_argument_type("filename", filename, str, nullable=True)
        check_argument_type("show_loading", show_loading, bool)
        result = await perform_download(
            self,
            self.url("/download"),
            "show_downloading" if show_loading else None,
            params={"path": path},
            mime_type=mime_type,
            auto_download=auto_download,
            filename=filename,
        )
        self.logger.info("Successfully download the file '%s'", path)
        return result

    async def _get_string(self, suffix: str, path: str, show_loading: bool) -> str:
        check_argument_type("path", path, str)
        check_argument_type("show_loading", show_loading, bool)
        response = await perform(
            self,
            "get",
            self.url(suffix),
            "show_getting" if show_loading else None,
            params={"path": path},
        )
        return str(response)

    @log_call
    async def get_download_url(self, path: str, show_loading=True) -> str:
        """Абсолютный URL для скачивания файла"""
        url = await self._get_string("/download/url", path, show_loading)
        self.logger.info("Successfully get the download URL for file %s: %s", path, url)
        return url

    @log_call
    async def get_base64(self, path: str, show_loading=True) -> str:
        result = await self._get_string("/base64", path, show_loading)
        self.logger.info("Successfully get the BASE-64 encoded string for file %s", path)
        return result

    @log_call
    async def get_base64_data_url(self, path: str, show_loading=True) -> str:
        result = await self._get_string("/base64/url", path, show_loading)
        self.logger.info("Successfully get the BASE-64 encoded data URL for file %s", path)
        return result
