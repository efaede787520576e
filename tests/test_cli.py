"""
Тесты консольной команды common-api
"""

from unittest.mock import AsyncMock

import pytest

from common_api import cli
from common_api.client import ApiClient
from common_api.config import ClientConfig
from common_api.lib.exc import SendRequestError
from common_api.lib.models import CriteriaDefinition, ExportFormat
from common_api.models import State


class TestCliHelpers:
    """Тесты вспомогательных функций"""

    def test_parse_criteria(self):
        assert cli.parse_criteria(["name=Demo", "state = NORMAL"]) == {
            "name": "Demo",
            "state": "NORMAL",
        }
        assert cli.parse_criteria(None) == {}

    def test_parse_criteria_invalid(self):
        with pytest.raises(ValueError):
            cli.parse_criteria(["name"])

    def test_coerce_criteria(self):
        definitions = (
            CriteriaDefinition("name", str),
            CriteriaDefinition("test", bool),
            CriteriaDefinition("count", int),
            CriteriaDefinition("state", State),
            CriteriaDefinition("organization_id", (str, int)),
        )
        criteria = cli.parse_criteria(
            ["name=1", "test=Yes", "count=7", "state=LOCKED", "organization_id=5", "other=x"]
        )
        assert cli.coerce_criteria(criteria, definitions) == {
            "name": "1",
            "test": True,
            "count": 7,
            "state": State.LOCKED,
            "organization_id": "5",
            "other": "x",
        }

    @pytest.mark.parametrize("item", ["test=maybe", "count=seven", "state=BROKEN"])
    def test_coerce_criteria_invalid(self, item):
        definitions = (
            CriteriaDefinition("test", bool),
            CriteriaDefinition("count", int),
            CriteriaDefinition("state", State),
        )
        with pytest.raises(ValueError):
            cli.coerce_criteria(cli.parse_criteria([item]), definitions)

    def test_resolve_endpoint(self):
        client = ApiClient()
        assert cli.resolve_endpoint(client, "person", "export", ExportFormat.CSV) == client.person.export_csv

    def test_resolve_unsupported(self):
        with pytest.raises(ValueError):
            cli.resolve_endpoint(ApiClient(), "user", "import", ExportFormat.JSON)
        with pytest.raises(ValueError):
            cli.resolve_endpoint(ApiClient(), "nothing", "export", ExportFormat.JSON)


class TestCliMain:
    """Тесты точки входа"""

    def test_init_config(self, tmp_path):
        config_path = tmp_path / "common_api.toml"
        assert cli.main(["--config", str(config_path), "init-config", "--url", "http://api"]) == 0
        assert ClientConfig.from_file(str(config_path)).api_url == "http://api"

    def test_missing_url(self, tmp_path, capsys):
        assert cli.main(["--config", str(tmp_path / "none.toml"), "system-time"]) == 1
        assert "init-config" in capsys.readouterr().out

    def test_request_error_exit_code(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            cli,
            "run_command",
            AsyncMock(side_effect=SendRequestError("boom", "/system/time", 500)),
        )
        args = ["--config", str(tmp_path / "none.toml"), "--url", "http://api", "system-time"]
        assert cli.main(args) == 1

    def test_success_exit_code(self, tmp_path, monkeypatch):
        run = AsyncMock(return_value=None)
        monkeypatch.setattr(cli, "run_command", run)
        args = ["--config", str(tmp_path / "none.toml"), "--url", "http://api", "system-info"]
        assert cli.main(args) == 0
        _, config = run.await_args.args
        assert config.api_url == "http://api"


class TestRunCommand:
    """Тесты выполнения команд"""

    @pytest.mark.asyncio
    async def test_export_coerces_criteria(self, monkeypatch, capsys):
        client = ApiClient()
        download = AsyncMock(return_value=None)
        monkeypatch.setattr(client, "download", download)
        args = cli.build_parser().parse_args(
            ["export", "employee", "csv", "--criteria", "test=yes", "organization_id=5"]
        )
        await cli.run_command(args, ClientConfig(api_url="http://api"))
        download.assert_awaited_once_with(
            "/employee/export/csv",
            params={"test": "true", "organization_id": "5"},
            mime_type="text/csv",
            auto_download=True,
        )
        assert "✅" in capsys.readouterr().out
