from .client import ApiClient
from .common import AiohttpClient
from .config import ClientConfig
from .lib.checks import (
    check_argument_type,
    check_criteria_argument,
    check_id_argument_type,
    check_id_array_argument_type,
    check_object_argument,
    check_page_request_argument,
    check_sort_request_argument,
)
from .lib.exc import SendRequestError
from .lib.impl import *
from .lib.models import NOTSET, CriteriaDefinition, DownloadedFile, ExportFormat
from .loading import Loading
from .models import *
