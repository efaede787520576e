"""
Тесты HTTP клиента на базе aiohttp
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientConnectorError, ClientError, ServerDisconnectedError

from common_api.common import AiohttpClient, AiohttpResponse, parse_response
from common_api.lib.exc import SendRequestError
from common_api.lib.models import DownloadedFile


def make_response(status, body=b"", content_type="application/json", **headers):
    headers = {"Content-Type": content_type, **headers}
    return AiohttpResponse(status, headers, body)


@pytest.fixture
def client():
    return AiohttpClient().initialize("http://api.example.com/", retries=1)


class TestParseResponse:
    """Тесты разбора тела ответа"""

    @pytest.mark.asyncio
    async def test_json(self):
        assert await parse_response(make_response(200, b'{"a": 1}')) == {"a": 1}

    @pytest.mark.asyncio
    async def test_empty_body(self):
        assert await parse_response(make_response(200)) is None
        assert await parse_response(make_response(204, b"ignored")) is None

    @pytest.mark.asyncio
    async def test_text_and_binary(self):
        assert await parse_response(make_response(200, b"hello", "text/plain")) == "hello"
        data = await parse_response(make_response(200, b"\x00\x01", "application/octet-stream"))
        assert data == b"\x00\x01"

    @pytest.mark.asyncio
    async def test_unknown_content_type_falls_back_to_text(self):
        assert await parse_response(make_response(200, b"not json", "")) == "not json"


class TestClientSettings:
    """Тесты настроек клиента"""

    def test_initialize(self, client):
        assert client.api_url == "http://api.example.com"
        assert client.download_dir == "."

    def test_auth_token(self, client):
        client.set_auth_token("abc")
        assert client.headers["Authorization"] == "Bearer abc"
        client.remove_auth()
        assert "Authorization" not in client.headers

    @pytest.mark.asyncio
    async def test_with_headers_is_temporary(self, client):
        async with client.with_headers(**{"X-Trace": "1"}):
            assert client.headers["X-Trace"] == "1"
        assert "X-Trace" not in client.headers

    def test_loading_is_injectable(self):
        loading = MagicMock()
        client = AiohttpClient().initialize("http://localhost", loading=loading)
        assert client.loading is loading


class TestRequest:
    """Тесты выполнения запросов"""

    @pytest.mark.asyncio
    async def test_request_returns_parsed_body(self, client, monkeypatch):
        send = AsyncMock(return_value=make_response(200, b'{"id": 1}'))
        monkeypatch.setattr(client, "_send_request", send)
        assert await client.request("get", "/app/1", params={"a": 1}) == {"id": 1}
        send.assert_awaited_once_with(
            "get",
            "/app/1",
            content_type=None,
            params={"a": 1},
            files=None,
            data=None,
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_error_status_raises(self, client, monkeypatch):
        body = b'{"type": "DATABASE_ERROR", "code": "NOT_FOUND", "message": "App not found"}'
        monkeypatch.setattr(
            client, "_send_request", AsyncMock(return_value=make_response(404, body))
        )
        with pytest.raises(SendRequestError) as exc_info:
            await client.request("get", "/app/1")
        error = exc_info.value
        assert error.status_code == 404
        assert error.message == "App not found"
        assert error.path == "/app/1"
        assert error.response_data["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_api_url(self):
        with pytest.raises(SendRequestError) as exc_info:
            await AiohttpClient().request("get", "/app")
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_connection_error_becomes_503(self, client, monkeypatch):
        session = MagicMock()
        session.request.side_effect = ClientError("connection refused")
        monkeypatch.setattr(client, "_ensure_session", AsyncMock(return_value=session))
        with pytest.raises(SendRequestError) as exc_info:
            await client.request("get", "/system/time")
        assert exc_info.value.status_code == 503
        session.request.assert_called_once()

    @pytest.mark.asyncio
    async def test_post_not_resent_after_disconnect(self, monkeypatch):
        """POST, оборванный после отправки, не повторяется"""
        client = AiohttpClient().initialize("http://api.example.com", retries=3)
        session = MagicMock()
        session.request.side_effect = ServerDisconnectedError()
        monkeypatch.setattr(client, "_ensure_session", AsyncMock(return_value=session))
        with pytest.raises(SendRequestError) as exc_info:
            await client.request("post", "/app", data={"name": "x"})
        assert exc_info.value.status_code == 503
        session.request.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_retried_after_disconnect(self, monkeypatch):
        client = AiohttpClient().initialize("http://api.example.com", retries=2)
        session = MagicMock()
        session.request.side_effect = ServerDisconnectedError()
        monkeypatch.setattr(client, "_ensure_session", AsyncMock(return_value=session))
        with pytest.raises(SendRequestError):
            await client.request("get", "/app/1")
        assert session.request.call_count == 2

    @pytest.mark.asyncio
    async def test_post_retried_when_connection_refused(self, monkeypatch):
        """Отказ в соединении означает, что запрос не был отправлен"""
        client = AiohttpClient().initialize("http://api.example.com", retries=2)
        session = MagicMock()
        session.request.side_effect = ClientConnectorError(
            MagicMock(), ConnectionRefusedError("refused")
        )
        monkeypatch.setattr(client, "_ensure_session", AsyncMock(return_value=session))
        with pytest.raises(SendRequestError):
            await client.request("post", "/app", data={"name": "x"})
        assert session.request.call_count == 2


class TestDownload:
    """Тесты скачивания файлов"""

    @pytest.mark.asyncio
    async def test_auto_download_saves_file(self, client, monkeypatch, tmp_path):
        client.download_dir = str(tmp_path)
        response = make_response(
            200,
            b"id,name\n",
            "text/csv",
            **{"Content-Disposition": 'attachment; filename="apps.csv"'},
        )
        send = AsyncMock(return_value=response)
        monkeypatch.setattr(client, "_send_request", send)
        result = await client.download("/app/export/csv", params={"name": "a"}, mime_type="text/csv")
        assert result is None
        assert (tmp_path / "apps.csv").read_bytes() == b"id,name\n"
        send.assert_awaited_once_with(
            "get", "/app/export/csv", params={"name": "a"}, headers={"Accept": "text/csv"}
        )

    @pytest.mark.asyncio
    async def test_download_without_saving(self, client, monkeypatch):
        response = make_response(200, b"%PDF", "application/pdf")
        monkeypatch.setattr(client, "_send_request", AsyncMock(return_value=response))
        result = await client.download("/file/download/report.pdf", auto_download=False)
        assert result == DownloadedFile("report.pdf", "application/pdf", b"%PDF")

    @pytest.mark.asyncio
    async def test_explicit_filename_wins(self, client, monkeypatch):
        response = make_response(
            200, b"x", "text/plain", **{"Content-Disposition": 'attachment; filename="a.txt"'}
        )
        monkeypatch.setattr(client, "_send_request", AsyncMock(return_value=response))
        result = await client.download("/file/download", auto_download=False, filename="b.txt")
        assert result.filename == "b.txt"

    @pytest.mark.asyncio
    async def test_download_error(self, client, monkeypatch):
        monkeypatch.setattr(
            client, "_send_request", AsyncMock(return_value=make_response(500, b"oops", "text/plain"))
        )
        with pytest.raises(SendRequestError) as exc_info:
            await client.download("/file/download")
        assert exc_info.value.message == "oops"
