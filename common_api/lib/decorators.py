"""
Декораторы методов API
"""

import inspect
import logging
from collections.abc import Mapping
from functools import wraps
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

DecoratedCallable = TypeVar("DecoratedCallable", bound=Callable[..., Any])

# Значения этих аргументов и полей не попадают в лог
SECRET_ARGUMENTS = {"password", "token", "verify_code", "security_key"}

MASK = "***"

# Длинное бинарное содержимое заменяется его размером
MAX_BYTES_IN_LOG = 64


def mask_value(value: Any) -> Any:
    """Копия значения для лога со скрытыми секретными полями"""
    if isinstance(value, BaseModel):
        value = {k: v for k, v in value if v is not None}
    if isinstance(value, Mapping):
        return {
            k: MASK if k in SECRET_ARGUMENTS else mask_value(v) for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [mask_value(item) for item in value]
    if isinstance(value, (bytes, bytearray)) and len(value) > MAX_BYTES_IN_LOG:
        return f"<{len(value)} bytes>"
    return value


def _format_call(func: Callable, self: Any, args: tuple, kwargs: dict) -> str:
    sig = inspect.signature(func)
    try:
        bound_args = sig.bind(self, *args, **kwargs)
    except TypeError:
        # Сигнатура не совпала: вызов сам выбросит ошибку ниже
        return f"{func.__name__}(...)"
    bound_args.apply_defaults()
    arguments = ", ".join(
        f"{name}={MASK}" if name in SECRET_ARGUMENTS else f"{name}={mask_value(value)!r}"
        for name, value in bound_args.arguments.items()
        if name != "self"
    )
    return f"{func.__name__}({arguments})"


def log_call(func: DecoratedCallable) -> DecoratedCallable:
    """Логирование вызова метода API с его аргументами на уровне DEBUG.

    Использует логгер экземпляра (self.logger). Работает как с обычными,
    так и с асинхронными методами. Секретные поля скрываются и внутри
    моделей и словарей.
    """

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(self, *args, **kwargs):
            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug("%s", _format_call(func, self, args, kwargs))
            return await func(self, *args, **kwargs)

        return async_wrapper

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("%s", _format_call(func, self, args, kwargs))
        return func(self, *args, **kwargs)

    return wrapper
