from ..checks import check_argument_type, check_id_argument_type
from ..utils import serialize_value, stringify_id, substitute
from .add_impl import normalize_entity
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
    return "show_updating" if show_loading else None


def update_impl(api, url: str, entity, show_loading: bool = True, options: dict = None):
    """Обновление сущности, ID берётся из самой сущности"""
    entity = normalize_entity(api, entity)
    check_id_argument_type(entity.id, "entity.id")
    check_show_loading(show_loading)
    full_url = substitute(url, id=stringify_id(entity.id))
    data = serialize_value(entity)
    params = options_params(options)

    async def send():
        obj = await perform(
            api, "put", full_url, _show(show_loading), data=data, params=params
        )
        result = api.entity_class.create(obj)
        api.logger.info(
            'Successfully update the %s by its ID "%s".', entity_name(api), entity.id
        )
        api.logger.debug("The updated %s is: %s", entity_name(api), result)
        return result

    return send()


def update_by_key_impl(
    api, url: str, key_name: str, entity, show_loading: bool = True, options: dict = None
):
    """Обновление сущности по ключу, значение ключа берётся из самой сущности"""
    entity = normalize_entity(api, entity)
    key_value = getattr(entity, key_name, None)
    check_argument_type(f"entity.{key_name}", key_value, str)
    check_show_loading(show_loading)
    full_url = substitute(url, **{key_name: key_value})
    data = serialize_value(entity)
    params = options_params(options)

    async def send():
        obj = await perform(
            api, "put", full_url, _show(show_loading), data=data, params=params
        )
        result = api.entity_class.create(obj)
        api.logger.info(
            'Successfully update the %s by its %s "%s".',
            entity_name(api),
            key_name,
            key_value,
        )
        api.logger.debug("The updated %s is: %s", entity_name(api), result)
        return result

    return send()


def update_property_impl(
    api,
    url: str,
    id,
    property_name: str,
    property_class,
    property_value,
    show_loading: bool = True,
    options: dict = None,
):
    """Обновление одного свойства сущности по её ID.

    Возвращает время изменения в виде строки ISO-8601.
    """
    full_url = id_url(url, id)
    check_argument_type(property_name, property_value, property_class)
    check_show_loading(show_loading)
    data = serialize_value(property_value)
    params = options_params(options)

    async def send():
        timestamp = await perform(
            api, "put", full_url, _show(show_loading), data=data, params=params
        )
        api.logger.info(
            'Successfully update the %s of a %s by its ID "%s" at: %s',
            property_name,
            entity_name(api),
            id,
            timestamp,
        )
        return timestamp

    return send()


def update_property_by_key_impl(
    api,
    url: str,
    key_name: str,
    key_value,
    property_name: str,
    property_class,
    property_value,
    show_loading: bool = True,
    options: dict = None,
):
    full_url = key_url(url, key_name, key_value)
    check_argument_type(property_name, property_value, property_class)
    check_show_loading(show_loading)
    data = serialize_value(property_value)
    params = options_params(options)

    async def send():
        timestamp = await perform(
            api, "put", full_url, _show(show_loading), data=data, params=params
        )
        api.logger.info(
            'Successfully update the %s of a %s by its %s "%s" at: %s',
            property_name,
            entity_name(api),
            key_name,
            key_value,
            timestamp,
        )
        return timestamp

    return send()


def update_by_parent_and_key_impl(
    api,
    url: str,
    parent_key_name: str,
    parent_key_value,
    key_name: str,
    entity,
    show_loading: bool = True,
    options: dict = None,
):
    """Обновление сущности по ключу внутри родительской сущности.

    Значение ключа берётся из самой сущности, значение ключа родителя
    передаётся отдельно.
    """
    entity = normalize_entity(api, entity)
    key_value = getattr(entity, key_name, None)
    check_argument_type(f"entity.{key_name}", key_value, str)
    full_url = parent_key_url(url, parent_key_name, parent_key_value, key_name, key_value)
    check_show_loading(show_loading)
    data = serialize_value(entity)
    params = options_params(options)

    async def send():
        obj = await perform(
            api, "put", full_url, _show(show_loading), data=data, params=params
        )
        result = api.entity_class.create(obj)
        api.logger.info(
            'Successfully update the %s by parent %s "%s" and its %s "%s".',
            entity_name(api),
            parent_key_name,
            parent_key_value,
            key_name,
            key_value,
        )
        api.logger.debug("The updated %s is: %s", entity_name(api), result)
        return result

    return send()
