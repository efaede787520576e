from ..checks import check_argument_type, check_criteria_argument, check_sort_request_argument
from ..models import ExportFormat
from ..utils import merge_params
from .request import check_show_loading, entity_name, perform_download


def export_impl(
    api,
    url: str,
    format,
    criteria=None,
    sort_request=None,
    auto_download: bool = True,
    show_loading: bool = True,
):
    """Экспорт сущностей, удовлетворяющих критериям, в файл.

    При auto_download файл сохраняется клиентом и результатом будет None,
    иначе возвращается DownloadedFile.
    """
    export_format = ExportFormat.parse(format)
    criteria = {} if criteria is None else criteria
    sort_request = {} if sort_request is None else sort_request
    check_criteria_argument(criteria, api.CRITERIA_DEFINITIONS)
    check_sort_request_argument(sort_request, api.entity_class)
    check_argument_type("auto_download", auto_download, bool)
    check_show_loading(show_loading)
    params = merge_params(criteria, sort_request)

    async def send():
        result = await perform_download(
            api,
            url,
            "show_exporting" if show_loading else None,
            params=params,
            mime_type=export_format.mime_type,
            auto_download=auto_download,
        )
        api.logger.info(
            "Successfully export %ss to a %s file: %s",
            entity_name(api),
            export_format.name,
            result.filename if result is not None else url,
        )
        return result

    return send()
