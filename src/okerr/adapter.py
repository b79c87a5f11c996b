"""
Adapter: capture exception-raising computations into a Result.

    trycatch(lambda: int("42"))        # → Ok(42)
    trycatch(lambda: int("x"))         # → Err(ValueError(...))
    await trycatch(fetch_user)         # fetch_user is async → Ok(user) or Err(exc)
    await settle(task)                 # already-running task/future/coroutine

The return shape follows the runtime shape of the computation's result: a
plain value gives a Result right away, an awaitable gives a coroutine that
resolves to a Result. The coroutine never raises for a failure of the
wrapped awaitable, so it can be awaited without try/except.

Only Exception subclasses are captured. KeyboardInterrupt, SystemExit and
asyncio.CancelledError propagate, and so does ResultConstructionError,
which signals a programming error rather than a data failure.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, TypeVar, overload

import structlog

from okerr.errors import ResultConstructionError
from okerr.log import capture_logging_enabled
from okerr.result import Result, err, ok

T = TypeVar("T")

log = structlog.get_logger("okerr")


@overload
def trycatch(fn: Callable[[], Awaitable[T]]) -> Coroutine[Any, Any, Result[T, Exception]]: ...


@overload
def trycatch(fn: Callable[[], T]) -> Result[T, Exception]: ...


def trycatch(fn: Callable[[], Any]) -> Any:
    """
    Invoke `fn()` and convert its outcome into a Result.

    Returns:
        Result[T, Exception] when `fn` returns a plain value or raises,
        or a coroutine resolving to Result[T, Exception] when `fn` returns
        an awaitable (coroutine, Task, Future, any object with __await__).
    """
    try:
        value = fn()
    except ResultConstructionError:
        raise
    except Exception as e:
        _log_capture(e, mode="sync")
        return err(e)

    if inspect.isawaitable(value):
        return settle(value)
    return ok(value)


async def settle(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """
    Await an in-flight awaitable and convert its outcome into a Result.

        task = asyncio.create_task(download(url))
        ...
        result = await settle(task)   # Ok(bytes) or Err(exc), never raises
    """
    try:
        value = await awaitable
    except ResultConstructionError:
        raise
    except Exception as e:
        _log_capture(e, mode="async")
        return err(e)
    return ok(value)


def _log_capture(error: Exception, mode: str) -> None:
    if capture_logging_enabled():
        log.debug(
            "okerr.captured",
            mode=mode,
            error_type=type(error).__name__,
            error=str(error),
        )
