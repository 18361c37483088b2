"""Measurement decorator for functions."""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, Optional, TypeVar, Union, overload

from .nested_perf_logger import NestedPerfLogger

F = TypeVar("F", bound=Callable)

logger = logging.getLogger(__name__)

# One engine per thread for decorated functions that don't bring their own
_local = threading.local()


def default_engine() -> NestedPerfLogger:
    """Engine used by @measured in the calling thread."""
    engine = getattr(_local, "engine", None)
    if engine is None:
        engine = _local.engine = NestedPerfLogger()
    return engine


@overload
def measured(func: F) -> F: ...


@overload
def measured(
    key: str = "",
    perf: Optional[NestedPerfLogger] = None,
    sink: Optional[Callable[[str], Any]] = None,
) -> Callable[[F], F]: ...


def measured(
    func_or_key: Union[F, str, None] = None,
    perf: Optional[NestedPerfLogger] = None,
    sink: Optional[Callable[[str], Any]] = None,
) -> Union[F, Callable[[F], F]]:
    """Decorator timing each call of a function.

    Can be used with or without arguments:
        @measured
        def my_func(): ...

        @measured("custom_key", sink=print)
        def my_func(): ...

    If no key is provided, uses the function's name. Start and Stop lines go
    to sink, by default this module's logger at INFO.
    """

    def make_wrapper(func: F, key: str) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            engine = perf if perf is not None else default_engine()
            with engine.measure(key, sink=sink or logger.info):
                return func(*args, **kwargs)

        return wrapper  # type: ignore

    # Called as @measured (no parens) - func_or_key is the function
    if callable(func_or_key):
        return make_wrapper(func_or_key, func_or_key.__name__)

    identifier = func_or_key or ""

    def decorator(func: F) -> F:
        return make_wrapper(func, identifier or func.__name__)

    return decorator
