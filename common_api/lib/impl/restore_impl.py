from .request import (
    check_ids,
    check_show_loading,
    entity_name,
    id_url,
    key_url,
    options_params,
    parent_key_url,
    perform,
    to_count,
)


def _show(show_loading: bool):
    return "show_restoring" if show_loading else None


def restore_impl(api, url: str, id, show_loading: bool = True, options: dict = None):
    """Восстановление сущности, помеченной как удалённая"""
    full_url = id_url(url, id)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        await perform(api, "patch", full_url, _show(show_loading), params=params)
        api.logger.info(
            'Successfully restore the deleted %s by its ID "%s".', entity_name(api), id
        )

    return send()


def restore_by_key_impl(
    api, url: str, key_name: str, key_value, show_loading: bool = True, options: dict = None
):
    full_url = key_url(url, key_name, key_value)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        await perform(api, "patch", full_url, _show(show_loading), params=params)
        api.logger.info(
            'Successfully restored the deleted %s by its %s "%s".',
            entity_name(api),
            key_name,
            key_value,
        )

    return send()


def restore_all_impl(api, url: str, show_loading: bool = True, options: dict = None):
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        count = to_count(
            await perform(api, "patch", url, _show(show_loading), params=params)
        )
        api.logger.info("Successfully restore %d deleted %ss.", count, entity_name(api))
        return count

    return send()


def batch_restore_impl(api, url: str, ids, show_loading: bool = True, options: dict = None):
    data = check_ids(ids)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        count = to_count(
            await perform(
                api, "patch", url, _show(show_loading), data=data, params=params
            )
        )
        api.logger.info(
            "Successfully batch restored %d deleted %ss.", count, entity_name(api)
        )
        return count

    return send()


def restore_by_parent_and_key_impl(
    api,
    url: str,
    parent_key_name: str,
    parent_key_value,
    key_name: str,
    key_value,
    show_loading: bool = True,
    options: dict = None,
):
    full_url = parent_key_url(url, parent_key_name, parent_key_value, key_name, key_value)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        await perform(api, "patch", full_url, _show(show_loading), params=params)
        api.logger.info(
            'Successfully restored the %s by parent %s "%s" and its %s "%s".',
            entity_name(api),
            parent_key_name,
            parent_key_value,
            key_name,
            key_value,
        )

    return send()
