import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast, overload

from .config import get_config
from .duration import Duration
from .timers import Timer

F = TypeVar("F", bound=Callable[..., Any])
R = TypeVar("R")


def time_call(func: Callable[..., R], *args: Any, **kwargs: Any) -> tuple[R, Duration]:
    """
    Run `func` and time it.

    Returns:
        The function's result and how long the call took
    """
    timer = Timer.start()
    result = func(*args, **kwargs)
    return result, timer.elapsed()


def _report(name: str, elapsed: Duration) -> None:
    config = get_config()
    if config.reporter is not None:
        config.reporter.report(name, elapsed, config)


def _wrap(func: F, name: str) -> F:
    # check if function is a coroutine function (async)
    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            timer = Timer.start()
            try:
                return await func(*args, **kwargs)
            finally:
                _report(name, timer.elapsed())

        return cast(F, async_wrapper)
    else:

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            timer = Timer.start()
            try:
                return func(*args, **kwargs)
            finally:
                _report(name, timer.elapsed())

        return cast(F, sync_wrapper)


@overload
def measure(name_or_func: None = None) -> Callable[[F], F]: ...


@overload
def measure(name_or_func: str) -> Callable[[F], F]: ...


@overload
def measure(name_or_func: F) -> F: ...


def measure(name_or_func: str | F | None = None) -> F | Callable[[F], F]:
    """
    Decorator reporting how long each call takes to the configured reporter

    Usage:
        @measure()
        def my_function():
            pass

        @measure("custom_name")
        def my_function():
            pass

        @measure  # no parentheses
        async def my_function():
            pass

    Args:
        name_or_func: Custom report name, function to measure, or None.
                     If None, the function name is used.

    Returns:
        Wrapped function or decorator
    """
    if isinstance(name_or_func, str):
        custom_name = name_or_func

        def decorator(func: F) -> F:
            return _wrap(func, custom_name)

        return decorator
    elif callable(name_or_func):
        func = cast(F, name_or_func)
        return _wrap(func, func.__name__)
    else:

        def decorator(func: F) -> F:
            return _wrap(func, func.__name__)

        return decorator
