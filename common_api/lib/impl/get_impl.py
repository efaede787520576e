from ..utils import create_instance
from .request import (
    check_show_loading,
    entity_name,
    id_url,
    key_url,
    options_params,
    parent_key_url,
    perform,
)


def _show(show_loading: bool):
    return "show_getting" if show_loading else None


def get_impl(api, url: str, id, show_loading: bool = True, options: dict = None):
    """Получение сущности по её ID"""
    full_url = id_url(url, id)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        obj = await perform(api, "get", full_url, _show(show_loading), params=params)
        result = api.entity_class.create(obj)
        api.logger.info('Successfully get the %s by its ID "%s"', entity_name(api), id)
        api.logger.debug("The %s is: %s", entity_name(api), result)
        return result

    return send()


def get_by_key_impl(
    api, url: str, key_name: str, key_value, show_loading: bool = True, options: dict = None
):
    """Получение сущности по значению ключа, например по коду"""
    full_url = key_url(url, key_name, key_value)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        obj = await perform(api, "get", full_url, _show(show_loading), params=params)
        result = api.entity_class.create(obj)
        api.logger.info(
            'Successfully get the %s by its %s "%s".', entity_name(api), key_name, key_value
        )
        api.logger.debug("The %s is: %s", entity_name(api), result)
        return result

    return send()


def get_info_impl(api, url: str, id, show_loading: bool = True):
    full_url = id_url(url, id)
    check_show_loading(show_loading)

    async def send():
        obj = await perform(api, "get", full_url, _show(show_loading))
        result = api.entity_info_class.create(obj)
        api.logger.info(
            'Successfully get the info of the %s by its ID "%s".', entity_name(api), id
        )
        api.logger.debug("The info of the %s is: %s", entity_name(api), result)
        return result

    return send()


def get_info_by_key_impl(
    api, url: str, key_name: str, key_value, show_loading: bool = True
):
    full_url = key_url(url, key_name, key_value)
    check_show_loading(show_loading)

    async def send():
        obj = await perform(api, "get", full_url, _show(show_loading))
        result = api.entity_info_class.create(obj)
        api.logger.info(
            'Successfully get the info of the %s by its %s "%s".',
            entity_name(api),
            key_name,
            key_value,
        )
        api.logger.debug("The info of the %s is: %s", entity_name(api), result)
        return result

    return send()


def get_property_impl(
    api,
    url: str,
    property_name: str,
    property_class,
    id,
    show_loading: bool = True,
    options: dict = None,
):
    """Получение отдельного свойства сущности по её ID.

    Пустой ответ сервера даёт None.
    """
    full_url = id_url(url, id)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        obj = await perform(api, "get", full_url, _show(show_loading), params=params)
        result = create_instance(property_class, obj)
        api.logger.info(
            'Successfully get the %s of the %s by its ID "%s".',
            property_name,
            entity_name(api),
            id,
        )
        api.logger.debug("The %s of the %s is: %s", property_name, entity_name(api), result)
        return result

    return send()


def get_property_by_key_impl(
    api,
    url: str,
    property_name: str,
    property_class,
    key_name: str,
    key_value,
    show_loading: bool = True,
    options: dict = None,
):
    full_url = key_url(url, key_name, key_value)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        obj = await perform(api, "get", full_url, _show(show_loading), params=params)
        result = create_instance(property_class, obj)
        api.logger.info(
            'Successfully get the %s of the %s by its %s "%s".',
            property_name,
            entity_name(api),
            key_name,
            key_value,
        )
        api.logger.debug("The %s of the %s is: %s", property_name, entity_name(api), result)
        return result

    return send()


def get_by_parent_and_key_impl(
    api,
    url: str,
    parent_key_name: str,
    parent_key_value,
    key_name: str,
    key_value,
    show_loading: bool = True,
    options: dict = None,
):
    """Получение сущности по ключу внутри родительской сущности,
    например элемента словаря по коду словаря и своему коду
    """
    full_url = parent_key_url(url, parent_key_name, parent_key_value, key_name, key_value)
    check_show_loading(show_loading)
    params = options_params(options)

    async def send():
        obj = await perform(api, "get", full_url, _show(show_loading), params=params)
        result = api.entity_class.create(obj)
        api.logger.info(
            'Successfully get the %s by parent %s "%s" and its %s "%s".',
            entity_name(api),
            parent_key_name,
            parent_key_value,
            key_name,
            key_value,
        )
        api.logger.debug("The %s is: %s", entity_name(api), result)
        return result

    return send()


def get_info_by_parent_and_key_impl(
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
        obj = await perform(api, "get", full_url, _show(show_loading))
        result = api.entity_info_class.create(obj)
        api.logger.info(
            'Successfully get the info of the %s by parent %s "%s" and its %s "%s".',
            entity_name(api),
            parent_key_name,
            parent_key_value,
            key_name,
            key_value,
        )
        api.logger.debug("The info of the %s is: %s", entity_name(api), result)
        return result

    return send()


def get_property_by_parent_and_key_impl(
    api,
    url: str,
    property_name: str,
    property_class,
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
        obj = await perform(api, "get", full_url, _show(show_loading), params=params)
        result = create_instance(property_class, obj)
        api.logger.info(
            'Successfully get the %s of the %s by parent %s "%s" and its %s "%s".',
            property_name,
            entity_name(api),
            parent_key_name,
            parent_key_value,
            key_name,
            key_value,
        )
        api.logger.debug("The %s of the %s is: %s", property_name, entity_name(api), result)
        return result

    return send()
