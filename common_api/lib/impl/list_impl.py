from ..checks import (
    check_criteria_argument,
    check_page_request_argument,
    check_sort_request_argument,
)
from ..utils import merge_params
from .request import check_show_loading, entity_name, perform


def _list_params(api, page_request, criteria, sort_request, show_loading, options):
    page_request = {} if page_request is None else page_request
    criteria = {} if criteria is None else criteria
    sort_request = {} if sort_request is None else sort_request
    check_page_request_argument(page_request)
    check_criteria_argument(criteria, api.CRITERIA_DEFINITIONS)
    check_sort_request_argument(sort_request, api.entity_class)
    check_show_loading(show_loading)
    return merge_params(page_request, criteria, sort_request, options)


def list_impl(
    api,
    url: str,
    page_request=None,
    criteria=None,
    sort_request=None,
    show_loading: bool = True,
    options: dict = None,
):
    """Получение страницы сущностей, удовлетворяющих критериям"""
    params = _list_params(api, page_request, criteria, sort_request, show_loading, options)

    async def send():
        obj = await perform(
            api, "get", url, "show_getting" if show_loading else None, params=params
        )
        page = api.entity_class.create_page(obj)
        api.logger.info("Successfully list %ss.", entity_name(api))
        api.logger.debug("The page of %ss is: %s", entity_name(api), page)
        return page

    return send()


def list_info_impl(
    api,
    url: str,
    page_request=None,
    criteria=None,
    sort_request=None,
    show_loading: bool = True,
    options: dict = None,
):
    """Получение страницы кратких сведений о сущностях"""
    params = _list_params(api, page_request, criteria, sort_request, show_loading, options)

    async def send():
        obj = await perform(
            api, "get", url, "show_getting" if show_loading else None, params=params
        )
        page = api.entity_info_class.create_page(obj)
        api.logger.info("Successfully list infos of %ss.", entity_name(api))
        api.logger.debug("The page of infos of %ss is: %s", entity_name(api), page)
        return page

    return send()
