from collections.abc import Mapping

from ..checks import check_argument_type
from ..utils import serialize_value
from .request import check_show_loading, entity_name, options_params, perform


def normalize_entity(api, entity):
    """Приведение словаря к классу сущности с проверкой полей"""
    check_argument_type("entity", entity, (api.entity_class, Mapping))
    if isinstance(entity, Mapping):
        return api.entity_class.model_validate(dict(entity))
    return entity


def add_impl(api, url: str, entity, show_loading: bool = True, options: dict = None):
    """Добавление новой сущности"""
    entity = normalize_entity(api, entity)
    check_show_loading(show_loading)
    data = serialize_value(entity)
    params = options_params(options)

    async def send():
        obj = await perform(
            api,
            "post",
            url,
            "show_adding" if show_loading else None,
            data=data,
            params=params,
        )
        result = api.entity_class.create(obj)
        api.logger.info(
            "Successfully add the %s: %s", entity_name(api), getattr(result, "id", None)
        )
        api.logger.debug("The added %s is: %s", entity_name(api), result)
        return result

    return send()
