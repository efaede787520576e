from ..exc import SendRequestError
from .request import (
    check_show_loading,
    entity_name,
    id_url,
    key_url,
    parent_key_url,
    perform,
)


async def head_exists(api, url: str, show_loading: bool) -> bool:
    try:
        await perform(api, "head", url, "show_getting" if show_loading else None)
    except SendRequestError as exc:
        if exc.status_code == 404:
            return False
        raise
    return True


def exists_impl(api, url: str, id, show_loading: bool = True):
    """Проверка существования сущности с указанным ID (HEAD запрос)"""
    full_url = id_url(url, id)
    check_show_loading(show_loading)

    async def send():
        exists = await head_exists(api, full_url, show_loading)
        api.logger.info(
            'Successfully checked the existence of %s by its ID "%s": %s',
            entity_name(api),
            id,
            exists,
        )
        return exists

    return send()


def exists_key_impl(api, url: str, key_name: str, key_value, show_loading: bool = True):
    full_url = key_url(url, key_name, key_value)
    check_show_loading(show_loading)

    async def send():
        exists = await head_exists(api, full_url, show_loading)
        api.logger.info(
            'Successfully checked the existence of %s by its %s "%s": %s',
            entity_name(api),
            key_name,
            key_value,
            exists,
        )
        return exists

    return send()


def exists_parent_and_key_impl(
    api,
    url: str,
    parent_key_name: str,
    parent_key_value,
    key_name: str,
    key_value,
    show_loading: bool = True,
):
    full_url = parent_key_url(url, parent_key_name, parent_key_value, key_name, key_value)
    check_show_loading(show_loading)

    async def send():
        exists = await head_exists(api, full_url, show_loading)
        api.logger.info(
            'Successfully checked the existence of %s by parent %s "%s" and its %s "%s": %s',
            entity_name(api),
            parent_key_name,
            parent_key_value,
            key_name,
            key_value,
            exists,
        )
        return exists

    return send()
