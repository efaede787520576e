import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional, Union

import aiohttp
from aiohttp import (
    ClientConnectorError,
    ClientError,
    ClientSession,
    ClientTimeout,
    TCPConnector,
)

from .lib.exc import SendRequestError
from .lib.models import DownloadedFile
from .lib.utils import extract_content_disposition_filename
from .loading import Loading

logger = logging.getLogger(__name__)

FORM_URLENCODED = "application/x-www-form-urlencoded"

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE", "PATCH"})


class ConnectionPool:
    """Пул соединений для эффективного управления ресурсами"""

    def __init__(self, max_connections: int = 100, max_connections_per_host: int = 10):
        self.max_connections = max_connections
        self.max_connections_per_host = max_connections_per_host
        self._connector: Optional[TCPConnector] = None

    def get_connector(self) -> TCPConnector:
        if self._connector is None or self._connector.closed:
            self._connector = TCPConnector(
                limit=self.max_connections,
                limit_per_host=self.max_connections_per_host,
                ttl_dns_cache=30,
                use_dns_cache=True,
                keepalive_timeout=60,
                enable_cleanup_closed=True,
            )
        return self._connector

    async def close(self):
        if self._connector and not self._connector.closed:
            await self._connector.close()


class AiohttpResponse:
    """Прочитанный ответ, доступный после закрытия соединения"""

    def __init__(self, status_code: int, headers, content: bytes, charset: Optional[str] = None):
        self.status_code = status_code
        self.headers = headers
        self._content = content
        self._charset = charset or "utf-8"

    @property
    def content_type(self) -> str:
        return self.headers.get("Content-Type", "").lower()

    async def read(self) -> bytes:
        return self._content

    async def text(self) -> str:
        return self._content.decode(self._charset, errors="replace")

    async def json(self) -> Any:
        return json.loads(await self.text())


async def parse_response(response: AiohttpResponse) -> Any:
    """Разбор тела ответа в соответствии с его content-type"""
    content = await response.read()
    if response.status_code == 204 or not content:
        return None

    content_type = response.content_type
    if "application/json" in content_type:
        return await response.json()
    elif content_type.startswith("text/"):
        return await response.text()
    elif "application/xml" in content_type:
        return await response.text()
    elif "application/octet-stream" in content_type or "application/zip" in content_type:
        return content

    # Универсальная попытка JSON, fallback на text
    try:
        return await response.json()
    except ValueError:
        return await response.text()


def _save_file(target: str, content: bytes) -> None:
    os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
    with open(target, "wb") as f:
        f.write(content)


def _error_message(status_code: int, data: Any) -> str:
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    if isinstance(data, str) and data:
        return data
    return f"HTTP {status_code}"


class AiohttpClient:
    """HTTP клиент на базе aiohttp с connection pooling"""

    def __init__(self):
        self._session: Optional[ClientSession] = None
        self._api_url: Optional[str] = None
        self._base_headers: Dict[str, str] = {}
        self._base_cookies: Dict[str, str] = {}
        self._temp_headers: Dict[str, str] = {}
        self._timeout: int = 30
        self._retries: int = 3
        self._connection_pool = ConnectionPool()
        self._session_dirty = False
        self._session_lock = asyncio.Lock()
        self.loading: Loading = Loading()
        self.download_dir: str = "."

    @property
    def api_url(self) -> Optional[str]:
        return self._api_url

    @property
    def headers(self) -> Dict[str, str]:
        """Получение текущих заголовков"""
        return {**self._base_headers, **self._temp_headers}

    @headers.setter
    def headers(self, value: Dict[str, str]):
        """Установка заголовков с обновлением сессии"""
        self._base_headers = dict(value) if value else {}
        self._session_dirty = True

    @property
    def cookies(self) -> Dict[str, str]:
        return dict(self._base_cookies)

    @cookies.setter
    def cookies(self, value: Dict[str, str]):
        self._base_cookies = dict(value) if value else {}
        self._session_dirty = True

    def update_headers(self, **headers):
        """Обновление заголовков"""
        self._base_headers.update(headers)
        self._session_dirty = True
        return self

    @asynccontextmanager
    async def with_headers(self, **temp_headers):
        """Контекстный менеджер для временных заголовков"""
        old_temp = self._temp_headers.copy()
        try:
            self._temp_headers.update(temp_headers)
            self._session_dirty = True
            yield self
        finally:
            self._temp_headers = old_temp
            self._session_dirty = True

    async def refresh_session(self):
        """Принудительное обновление сессии"""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None
            self._session_dirty = False

    async def _ensure_session(self) -> ClientSession:
        # Быстрая проверка без блокировки
        if (
            self._session is not None
            and not self._session.closed
            and not self._session_dirty
        ):
            return self._session

        async with self._session_lock:
            # Двойная проверка внутри блокировки
            if (
                self._session is not None
                and not self._session.closed
                and not self._session_dirty
            ):
                return self._session

            if self._session and not self._session.closed:
                await self._session.close()

            timeout = ClientTimeout(
                total=self._timeout, connect=10, sock_read=self._timeout, sock_connect=10
            )
            self._session = ClientSession(
                connector=self._connection_pool.get_connector(),
                connector_owner=False,
                timeout=timeout,
                headers=self.headers,
                cookies=self.cookies,
                trust_env=True,
            )
            self._session_dirty = False

        return self._session

    @staticmethod
    def _build_form_data(files: dict, data: Optional[dict]) -> aiohttp.FormData:
        form_data = aiohttp.FormData()
        if data:
            for key, value in data.items():
                if value is not None:
                    form_data.add_field(key, str(value))
        for field_name, file_data in files.items():
            # Файл передаётся либо как bytes, либо как (имя, содержимое, content-type)
            if isinstance(file_data, tuple):
                filename, content, content_type = file_data
            else:
                filename, content, content_type = f"{field_name}.bin", file_data, None
            form_data.add_field(
                field_name, content, filename=filename, content_type=content_type
            )
        return form_data

    async def _send_request(
        self,
        method: str,
        path: str,
        content_type: str = None,
        params: dict = None,
        files: dict = None,
        data: Union[dict, list, str, int, float, bool] = None,
        headers: Dict[str, str] = None,
    ) -> AiohttpResponse:

        if not self._api_url:
            raise SendRequestError(
                "API URL is empty",
                path=path,
                status_code=400,
            )

        full_url = f"{self._api_url}{path}"
        _retries = self._retries

        while True:
            session = await self._ensure_session()
            try:
                logger.debug(f"Making {method.upper()} request to {full_url}")

                request_kwargs = {
                    "method": method.upper(),
                    "url": full_url,
                    "params": params or None,
                }
                if headers:
                    request_kwargs["headers"] = headers

                if files:
                    request_kwargs["data"] = self._build_form_data(files, data)
                elif data is not None:
                    if content_type == FORM_URLENCODED:
                        request_kwargs["data"] = data
                    else:
                        request_kwargs["json"] = data

                async with session.request(**request_kwargs) as response:
                    logger.debug(f"Response status: {response.status}")
                    content = await response.read()
                    return AiohttpResponse(
                        response.status, response.headers, content, response.charset
                    )

            except (ClientError, asyncio.TimeoutError) as exc:
                # Запрос мог дойти до сервера: повторяем только идемпотентные
                # методы, POST повторяется лишь при отказе в соединении
                if method.upper() not in IDEMPOTENT_METHODS and not isinstance(
                    exc, ClientConnectorError
                ):
                    logger.warning(f"{method.upper()} {path} failed, not retrying: {exc}")
                    raise SendRequestError(str(exc), path=path, status_code=503) from exc
                _retries -= 1
                logger.warning(f"Request failed (retries left: {_retries}): {exc}")
                if _retries <= 0:
                    raise SendRequestError(str(exc), path=path, status_code=503) from exc
                await asyncio.sleep(0.5)

            except RuntimeError as exc:
                # Сессия была закрыта параллельно: пересоздаём её
                if "Session is closed" not in str(exc):
                    raise
                _retries -= 1
                if _retries <= 0:
                    raise SendRequestError(str(exc), path=path, status_code=500) from exc
                logger.warning(f"Session closed, recreating (retries left: {_retries})")
                await self.refresh_session()

    async def request(
        self,
        method: str,
        path: str,
        params: dict = None,
        data: Any = None,
        files: dict = None,
        content_type: str = None,
        headers: Dict[str, str] = None,
    ) -> Any:
        """Выполнение запроса и разбор тела ответа.

        Ответ с кодом 400 и выше превращается в SendRequestError, в
        response_data которого лежит разобранное тело ошибки.
        """
        response = await self._send_request(
            method,
            path,
            content_type=content_type,
            params=params,
            files=files,
            data=data,
            headers=headers,
        )
        response_data = await parse_response(response)
        if response.status_code >= 400:
            logger.error(f"{method.upper()} {path} failed with status {response.status_code}")
            raise SendRequestError(
                _error_message(response.status_code, response_data),
                path=path,
                status_code=response.status_code,
                response_data=response_data,
            )
        return response_data

    async def download(
        self,
        path: str,
        params: dict = None,
        mime_type: Optional[str] = None,
        auto_download: bool = True,
        filename: Optional[str] = None,
    ) -> Optional[DownloadedFile]:
        """Скачивание файла.

        При auto_download файл сохраняется в download_dir и возвращается None,
        иначе возвращается DownloadedFile с содержимым.
        """
        headers = {"Accept": mime_type} if mime_type else None
        response = await self._send_request(
            "get", path, params=params, headers=headers
        )
        if response.status_code >= 400:
            response_data = await parse_response(response)
            raise SendRequestError(
                _error_message(response.status_code, response_data),
                path=path,
                status_code=response.status_code,
                response_data=response_data,
            )

        filename = (
            filename
            or extract_content_disposition_filename(
                response.headers.get("Content-Disposition")
            )
            or path.rstrip("/").rsplit("/", 1)[-1]
        )
        content = await response.read()
        mime_type = mime_type or response.headers.get("Content-Type")

        if not auto_download:
            return DownloadedFile(filename=filename, mime_type=mime_type, content=content)

        target = os.path.join(self.download_dir, os.path.basename(filename))
        await asyncio.to_thread(_save_file, target, content)
        logger.info(f"Saved {len(content)} bytes to {target}")
        return None

    def initialize(
        self,
        api_url: str,
        headers: Dict[str, str] = None,
        cookies: Dict[str, str] = None,
        timeout: int = 30,
        retries: int = 3,
        max_connections: int = 100,
        max_connections_per_host: int = 10,
        loading: Optional[Loading] = None,
        download_dir: Optional[str] = None,
    ) -> "AiohttpClient":
        """Инициализация клиента с настройками"""
        self._api_url = str(api_url).rstrip("/")

        if headers:
            self.headers = headers
        if cookies:
            self.cookies = cookies

        self._timeout = int(timeout) if timeout else 30
        self._retries = int(retries) if retries else 3

        self._connection_pool = ConnectionPool(
            max_connections, max_connections_per_host
        )
        self._session_dirty = True

        if loading is not None:
            self.loading = loading
        if download_dir:
            self.download_dir = download_dir

        return self

    async def close(self):
        """Закрытие клиента и освобождение ресурсов"""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None

        await self._connection_pool.close()

    def set_auth_token(self, token: str):
        """Установка Bearer токена авторизации"""
        return self.update_headers(Authorization=f"Bearer {token}")

    def remove_auth(self):
        """Удаление авторизации"""
        if "Authorization" in self._base_headers:
            del self._base_headers["Authorization"]
            self._session_dirty = True
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
