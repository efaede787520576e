import asyncio
import io
import os
from typing import Optional, Tuple

from ..checks import check_argument_type
from ..models import ExportFormat
from .request import check_show_loading, entity_name, perform, to_count

FILE_TYPES = (bytes, bytearray, str, os.PathLike, io.IOBase)


def read_file_argument(
    file, filename: Optional[str] = None
) -> Tuple[str, bytes]:
    """Имя и содержимое файла: путь, bytes или бинарный поток.

    Чтение блокирующее, из корутин вызывается через read_file_argument_async.
    """
    check_argument_type("file", file, FILE_TYPES)
    if isinstance(file, (str, os.PathLike)):
        with open(file, "rb") as f:
            return filename or os.path.basename(os.fspath(file)), f.read()
    if isinstance(file, io.IOBase):
        name = getattr(file, "name", None)
        name = os.path.basename(name) if isinstance(name, str) else None
        return filename or name or "file", file.read()
    return filename or "file", bytes(file)


async def read_file_argument_async(
    file, filename: Optional[str] = None
) -> Tuple[str, bytes]:
    if isinstance(file, (bytes, bytearray)):
        return read_file_argument(file, filename)
    return await asyncio.to_thread(read_file_argument, file, filename)


def import_impl(
    api,
    url: str,
    format,
    file,
    parallel: Optional[bool] = None,
    threads: Optional[int] = None,
    show_loading: bool = True,
    filename: Optional[str] = None,
):
    """Импорт сущностей из файла. Возвращает количество импортированных"""
    import_format = ExportFormat.parse(format)
    check_argument_type("file", file, FILE_TYPES)
    check_argument_type("parallel", parallel, bool, nullable=True)
    check_argument_type("threads", threads, int, nullable=True)
    check_show_loading(show_loading)
    params = {}
    if parallel is not None:
        params["parallel"] = str(parallel).lower()
    if threads is not None:
        params["threads"] = threads

    async def send():
        name, content = await read_file_argument_async(file, filename)
        count = to_count(
            await perform(
                api,
                "post",
                url,
                "show_importing" if show_loading else None,
                params=params,
                files={"file": (name, content, import_format.mime_type)},
            )
        )
        api.logger.info(
            "Successfully import %d %ss from a %s file: %s",
            count,
            entity_name(api),
            import_format.value,
            name,
        )
        return count

    return send()
