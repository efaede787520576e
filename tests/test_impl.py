"""
Тесты помощников *_impl на примере API приложений
"""

import pytest

from common_api.endpoints.app import AppApi
from common_api.endpoints.dict_entry import DictEntryApi
from common_api.endpoints.person import PersonApi
from common_api.lib.exc import SendRequestError
from common_api.lib.impl import (
    delete_all_impl,
    erase_all_impl,
    exists_impl,
    exists_key_impl,
    exists_parent_and_key_impl,
    get_property_by_parent_and_key_impl,
    get_property_impl,
    purge_by_parent_and_key_impl,
    restore_all_impl,
    update_property_impl,
)
from common_api.lib.models import DownloadedFile
from common_api.models import (
    App,
    DictEntry,
    Info,
    Page,
    PageRequest,
    SortRequest,
    State,
    StatefulInfo,
)


@pytest.fixture
def app_api(fake_client):
    return AppApi(fake_client)


class TestListImpl:
    """Тесты получения списков"""

    @pytest.mark.asyncio
    async def test_list_builds_params_and_page(self, app_api, fake_client):
        fake_client.request.return_value = {
            "total_count": 1,
            "total_pages": 1,
            "page_index": 0,
            "page_size": 10,
            "content": [{"id": 1, "code": "demo", "name": "Demo"}],
        }
        page = await app_api.list(
            PageRequest(page_index=0, page_size=10),
            {"name": "Demo", "state": State.NORMAL},
            SortRequest(sort_field="name"),
        )
        fake_client.request.assert_awaited_once_with(
            "get",
            "/app",
            params={
                "page_index": 0,
                "page_size": 10,
                "name": "Demo",
                "state": "NORMAL",
                "sort_field": "name",
            },
        )
        assert isinstance(page, Page)
        assert page.total_count == 1
        assert isinstance(page.content[0], App)
        assert page.content[0].code == "demo"
        fake_client.loading.show_getting.assert_called_once()
        fake_client.loading.hide.assert_called_once()

    @pytest.mark.asyncio
    async def test_list_info_uses_info_class(self, app_api, fake_client):
        fake_client.request.return_value = {"content": [{"id": 2, "state": "LOCKED"}]}
        page = await app_api.list_info(show_loading=False)
        fake_client.request.assert_awaited_once_with("get", "/app/info", params={})
        assert isinstance(page.content[0], StatefulInfo)
        assert page.content[0].state is State.LOCKED
        fake_client.loading.show_getting.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_response_gives_empty_page(self, app_api, fake_client):
        page = await app_api.list()
        assert page.content == []
        assert page.total_count == 0

    def test_unknown_criteria_rejected_before_request(self, app_api, fake_client):
        with pytest.raises(TypeError, match='"criteria.bogus"'):
            app_api.list(criteria={"bogus": 1})
        fake_client.request.assert_not_called()

    def test_invalid_sort_field_rejected(self, app_api):
        with pytest.raises(TypeError):
            app_api.list(sort_request={"sort_field": "unknown"})

    def test_show_loading_must_be_bool(self, app_api):
        with pytest.raises(TypeError, match="show_loading"):
            app_api.list(show_loading="yes")


class TestGetImpl:
    """Тесты получения сущности"""

    @pytest.mark.asyncio
    async def test_get_by_id(self, app_api, fake_client):
        fake_client.request.return_value = {"id": 42, "name": "Demo"}
        app = await app_api.get(42)
        fake_client.request.assert_awaited_once_with("get", "/app/42", params=None)
        assert app.id == 42

    @pytest.mark.asyncio
    async def test_get_by_code_quotes_value(self, app_api, fake_client):
        fake_client.request.return_value = {"code": "a b"}
        await app_api.get_by_code("a b")
        fake_client.request.assert_awaited_once_with("get", "/app/code/a%20b", params=None)

    @pytest.mark.asyncio
    async def test_get_info(self, app_api, fake_client):
        fake_client.request.return_value = {"id": 1, "name": "Demo"}
        info = await app_api.get_info(1)
        fake_client.request.assert_awaited_once_with("get", "/app/1/info")
        assert isinstance(info, StatefulInfo)

    def test_invalid_id(self, app_api):
        with pytest.raises(TypeError):
            app_api.get(1.5)
        with pytest.raises(TypeError):
            app_api.get_by_code(10)

    @pytest.mark.asyncio
    async def test_get_property_none_response(self, app_api, fake_client):
        result = await get_property_impl(
            app_api, "/app/{id}/organization", "organization", StatefulInfo, 1
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_get_with_options(self, fake_client):
        person_api = PersonApi(fake_client)
        fake_client.request.return_value = {"id": 1}
        await person_api.get(1, transform_urls=False)
        fake_client.request.assert_awaited_once_with(
            "get", "/person/1", params={"transform_urls": "false"}
        )


class TestAddAndUpdateImpl:
    """Тесты добавления и обновления"""

    @pytest.mark.asyncio
    async def test_add_from_mapping(self, app_api, fake_client):
        fake_client.request.return_value = {"id": 5, "code": "new"}
        app = await app_api.add({"code": "new", "name": "New"})
        fake_client.request.assert_awaited_once_with(
            "post", "/app", data={"code": "new", "name": "New"}, params=None
        )
        assert app.id == 5
        fake_client.loading.show_adding.assert_called_once()

    def test_add_rejects_other_types(self, app_api):
        with pytest.raises(TypeError):
            app_api.add(["not", "an", "entity"])

    @pytest.mark.asyncio
    async def test_update_takes_id_from_entity(self, app_api, fake_client):
        fake_client.request.return_value = {"id": 3, "name": "x"}
        await app_api.update(App(id=3, name="x"))
        fake_client.request.assert_awaited_once_with(
            "put", "/app/3", data={"id": 3, "name": "x"}, params=None
        )

    def test_update_without_id(self, app_api):
        with pytest.raises(TypeError, match="entity.id"):
            app_api.update(App(name="x"))

    @pytest.mark.asyncio
    async def test_update_by_code(self, app_api, fake_client):
        fake_client.request.return_value = {"code": "c1"}
        await app_api.update_by_code({"code": "c1", "name": "x"})
        fake_client.request.assert_awaited_once_with(
            "put", "/app/code/c1", data={"code": "c1", "name": "x"}, params=None
        )

    @pytest.mark.asyncio
    async def test_update_state_returns_timestamp(self, app_api, fake_client):
        fake_client.request.return_value = "2024-01-01T00:00:00Z"
        result = await app_api.update_state(1, State.DISABLED)
        fake_client.request.assert_awaited_once_with(
            "put", "/app/1/state", data="DISABLED", params=None
        )
        assert result == "2024-01-01T00:00:00Z"

    def test_update_property_type_checked(self, app_api):
        with pytest.raises(TypeError, match="'comment'"):
            update_property_impl(app_api, "/app/{id}/comment", 1, "comment", str, 123)


class TestLifecycleImpl:
    """Тесты удаления, восстановления и окончательного удаления"""

    @pytest.mark.asyncio
    async def test_delete(self, app_api, fake_client):
        fake_client.request.return_value = "2024-01-01T00:00:00Z"
        assert await app_api.delete(1) == "2024-01-01T00:00:00Z"
        fake_client.request.assert_awaited_once_with("delete", "/app/1", params=None)
        fake_client.loading.show_deleting.assert_called_once()

    @pytest.mark.asyncio
    async def test_batch_delete_returns_count(self, app_api, fake_client):
        fake_client.request.return_value = 2
        assert await app_api.batch_delete([1, 2]) == 2
        fake_client.request.assert_awaited_once_with(
            "delete", "/app/batch", data=[1, 2], params=None
        )

    def test_batch_with_empty_ids(self, app_api, fake_client):
        with pytest.raises(TypeError, match="cannot be empty"):
            app_api.batch_delete([])
        fake_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_restore_uses_patch(self, app_api, fake_client):
        assert await app_api.restore_by_code("c1") is None
        fake_client.request.assert_awaited_once_with("patch", "/app/code/c1", params=None)
        fake_client.loading.show_restoring.assert_called_once()

    @pytest.mark.asyncio
    async def test_purge_all_count(self, app_api, fake_client):
        fake_client.request.return_value = "7"
        assert await app_api.purge_all() == 7
        fake_client.request.assert_awaited_once_with("delete", "/app/purge", params=None)

    @pytest.mark.asyncio
    async def test_batch_purge_empty_response(self, app_api, fake_client):
        assert await app_api.batch_purge(["a"]) == 0
        fake_client.request.assert_awaited_once_with(
            "delete", "/app/batch/purge", data=["a"], params=None
        )

    @pytest.mark.asyncio
    async def test_person_erase_forwards_with_user(self, fake_client):
        person_api = PersonApi(fake_client)
        await person_api.erase(9, with_user=True)
        fake_client.request.assert_awaited_once_with(
            "delete", "/person/9/erase", params={"with_user": "true"}
        )
        fake_client.loading.show_erasing.assert_called_once()


class TestAllVariantsImpl:
    """Тесты операций над всеми сущностями сразу"""

    @pytest.mark.asyncio
    async def test_delete_all(self, app_api, fake_client):
        fake_client.request.return_value = 4
        assert await delete_all_impl(app_api, "/app") == 4
        fake_client.request.assert_awaited_once_with("delete", "/app", params=None)

    @pytest.mark.asyncio
    async def test_restore_all(self, app_api, fake_client):
        fake_client.request.return_value = "2"
        assert await restore_all_impl(app_api, "/app", show_loading=False) == 2
        fake_client.request.assert_awaited_once_with("patch", "/app", params=None)
        fake_client.loading.show_restoring.assert_not_called()

    @pytest.mark.asyncio
    async def test_erase_all(self, app_api, fake_client):
        assert await erase_all_impl(app_api, "/app/erase", options={"with_user": True}) == 0
        fake_client.request.assert_awaited_once_with(
            "delete", "/app/erase", params={"with_user": "true"}
        )


class TestExistsImpl:
    """Тесты проверки существования"""

    @pytest.mark.asyncio
    async def test_exists(self, app_api, fake_client):
        assert await exists_impl(app_api, "/app/{id}", 1) is True
        fake_client.request.assert_awaited_once_with("head", "/app/1")

    @pytest.mark.asyncio
    async def test_not_found(self, app_api, fake_client):
        fake_client.request.side_effect = SendRequestError("not found", "/app/code/x", 404)
        assert await exists_key_impl(app_api, "/app/code/{code}", "code", "x") is False

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, app_api, fake_client):
        fake_client.request.side_effect = SendRequestError("boom", "/app/1", 500)
        with pytest.raises(SendRequestError):
            await exists_impl(app_api, "/app/{id}", 1)
        fake_client.loading.hide.assert_called_once()


class TestExportImportImpl:
    """Тесты экспорта и импорта"""

    @pytest.mark.asyncio
    async def test_export_csv(self, app_api, fake_client):
        result = await app_api.export_csv({"name": "a"}, SortRequest(sort_field="code"))
        assert result is None
        fake_client.download.assert_awaited_once_with(
            "/app/export/csv",
            params={"name": "a", "sort_field": "code"},
            mime_type="text/csv",
            auto_download=True,
        )
        fake_client.loading.show_exporting.assert_called_once()

    @pytest.mark.asyncio
    async def test_export_without_auto_download(self, app_api, fake_client):
        downloaded = DownloadedFile("apps.xml", "application/xml", b"<apps/>")
        fake_client.download.return_value = downloaded
        assert await app_api.export_xml(auto_download=False) is downloaded

    def test_export_rejects_unknown_criteria(self, app_api):
        with pytest.raises(TypeError):
            app_api.export_json({"bogus": 1})

    @pytest.mark.asyncio
    async def test_import_bytes(self, app_api, fake_client):
        fake_client.request.return_value = "3"
        count = await app_api.import_json(b"[]", parallel=True, threads=4)
        assert count == 3
        fake_client.request.assert_awaited_once_with(
            "post",
            "/app/import/json",
            params={"parallel": "true", "threads": 4},
            files={"file": ("file", b"[]", "application/json")},
        )

    @pytest.mark.asyncio
    async def test_import_from_path(self, app_api, fake_client, tmp_path):
        path = tmp_path / "apps.csv"
        path.write_bytes(b"code,name\n")
        fake_client.request.return_value = 1
        await app_api.import_csv(str(path))
        _, kwargs = fake_client.request.call_args
        assert kwargs["files"] == {"file": ("apps.csv", b"code,name\n", "text/csv")}
        assert kwargs["params"] == {}

    def test_import_rejects_bad_file(self, app_api):
        with pytest.raises(TypeError):
            app_api.import_excel(12345)


class TestParentAndKeyImpl:
    """Тесты операций по ключу внутри родительской сущности"""

    @pytest.fixture
    def entry_api(self, fake_client):
        return DictEntryApi(fake_client)

    @pytest.mark.asyncio
    async def test_get_substitutes_both_keys(self, entry_api, fake_client):
        fake_client.request.return_value = {"id": 5, "code": "E 1", "dict": {"id": 2}}
        entry = await entry_api.get_by_code("D/1", "E 1")
        fake_client.request.assert_awaited_once_with(
            "get", "/dict/code/D%2F1/entry/code/E%201", params=None
        )
        assert isinstance(entry, DictEntry)
        assert entry.dict_.id == 2

    @pytest.mark.asyncio
    async def test_numeric_parent_key(self, entry_api, fake_client):
        result = await purge_by_parent_and_key_impl(
            entry_api, "/dict/{dict_id}/entry/code/{code}/purge", "dict_id", 7, "code", "E1"
        )
        assert result is None
        fake_client.request.assert_awaited_once_with(
            "delete", "/dict/7/entry/code/E1/purge", params=None
        )

    @pytest.mark.asyncio
    async def test_get_property(self, entry_api, fake_client):
        fake_client.request.return_value = {"id": 1, "code": "P"}
        parent = await get_property_by_parent_and_key_impl(
            entry_api,
            "/dict/{dict_id}/entry/code/{code}/parent",
            "parent",
            Info,
            "dict_id",
            1,
            "code",
            "E1",
        )
        assert isinstance(parent, Info)
        assert parent.code == "P"

    def test_bad_parent_key_rejected(self, entry_api, fake_client):
        with pytest.raises(TypeError, match="dict_code"):
            entry_api.get_by_code(None, "E1")
        with pytest.raises(TypeError, match="dict_id"):
            entry_api.delete_by_code(1.5, "E1")
        fake_client.request.assert_not_called()

    def test_bad_key_rejected(self, entry_api, fake_client):
        with pytest.raises(TypeError, match="code"):
            entry_api.restore_by_code(1, 42)
        fake_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_exists_not_found(self, entry_api, fake_client):
        fake_client.request.side_effect = SendRequestError("not found", "/dict/1", 404)
        exists = await exists_parent_and_key_impl(
            entry_api, "/dict/{dict_id}/entry/code/{code}", "dict_id", 1, "code", "E1"
        )
        assert exists is False
        fake_client.request.assert_awaited_once_with("head", "/dict/1/entry/code/E1")
