"""
Общая часть всех *_impl помощников: индикатор загрузки и отправка запроса
"""

from typing import Any, Optional

from ..checks import (
    check_argument_type,
    check_id_argument_type,
    check_id_array_argument_type,
)
from ..utils import merge_params, stringify_id, substitute


def check_show_loading(show_loading: Any) -> None:
    check_argument_type("show_loading", show_loading, bool)


def entity_name(api) -> str:
    return api.entity_class.__name__


def id_url(url: str, id) -> str:
    check_id_argument_type(id)
    return substitute(url, id=stringify_id(id))


def key_url(url: str, key_name: str, key_value: Any) -> str:
    check_argument_type(key_name, key_value, str)
    return substitute(url, **{key_name: key_value})


def parent_key_url(
    url: str, parent_key_name: str, parent_key_value: Any, key_name: str, key_value: Any
) -> str:
    """Шаблон URL с ключом родительской сущности и ключом самой сущности,
    например /dict/code/{dict_code}/entry/code/{code}
    """
    check_id_argument_type(parent_key_value, parent_key_name)
    check_argument_type(key_name, key_value, str)
    return substitute(
        url,
        **{parent_key_name: stringify_id(parent_key_value), key_name: key_value},
    )


def check_ids(ids) -> list:
    """Проверка списка ID для пакетной операции, пустой список не допускается"""
    check_id_array_argument_type(ids)
    if not ids:
        raise TypeError("The argument 'ids' cannot be empty.")
    return list(ids)


def options_params(options: Optional[dict]) -> Optional[dict]:
    return merge_params(options) or None


def _start(api, show: Optional[str]):
    loading = api.client.loading
    if show:
        getattr(loading, show)()
    return loading


async def perform(api, method: str, url: str, show: Optional[str] = None, **kwargs) -> Any:
    """Отправка одного запроса через клиент API.

    show: имя метода индикатора (например "show_getting") или None.
    """
    loading = _start(api, show)
    try:
        return await api.client.request(method, url, **kwargs)
    finally:
        if show:
            loading.hide()


async def perform_download(api, url: str, show: Optional[str] = None, **kwargs) -> Any:
    loading = _start(api, show)
    try:
        return await api.client.download(url, **kwargs)
    finally:
        if show:
            loading.hide()


def to_count(value: Any) -> int:
    """Количество затронутых сущностей из ответа сервера"""
    if value is None or value == "":
        return 0
    return int(value)
