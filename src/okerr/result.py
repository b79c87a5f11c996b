"""
Result container: a value that is either Ok(value) or Err(error).

Expected failures travel as data instead of exceptions. Combinators thread
the container through a pipeline and skip the success-only steps once an
Err shows up:

    ┌───────────┐   flat_map    ┌───────────┐     map       ┌──────────┐
    │   parse   │──── Ok ───────│ validate  │──── Ok ───────│  format  │──→ Result[T, E]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Err                       │ Err                       │ Err
          └───────────────────────────┴───────────────────────────┴──→ Result[T, E]

Representation:
  - Two slots, _value and _error. The inactive one holds a private sentinel,
    so None is a perfectly good success or failure payload.
  - Construction is gated by a private guard object only ok()/err() know.
  - replace(), replace_err(), ok_or_insert() and ok_or_insert_with() mutate
    the instance and return it. Every other combinator leaves it untouched.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar, overload

from okerr.errors import ResultConstructionError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Coroutine

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class _Sentinel:
    """Marker for the inactive slot. Never exposed outside this module."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f"<{self._name}>"


_NO_VALUE = _Sentinel("no value")
_NO_ERROR = _Sentinel("no error")
_CREATE_GUARD = object()


class Result(Generic[T, E]):
    """
    Discriminated union of a success value (Ok) and a failure value (Err).

    Always build instances with ok() / err() (or trycatch()):

        >>> ok(21).map(lambda x: x * 2).unwrap()
        42

        >>> err("boom").map(lambda x: x * 2).is_err()
        True

        >>> err("boom").unwrap_or(0)
        0
    """

    __slots__ = ("_value", "_error")

    def __init__(self, guard: object, value: Any, error: Any) -> None:
        if guard is not _CREATE_GUARD:
            raise ResultConstructionError()
        self._value: Any = value
        self._error: Any = error

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def ok(value: T) -> Result[T, Any]:
        """Same as the module-level ok()."""
        return ok(value)

    @staticmethod
    def err(error: E) -> Result[Any, E]:
        """Same as the module-level err()."""
        return err(error)

    @overload
    @staticmethod
    def trycatch(fn: Callable[[], Awaitable[T]]) -> Coroutine[Any, Any, Result[T, Exception]]: ...

    @overload
    @staticmethod
    def trycatch(fn: Callable[[], T]) -> Result[T, Exception]: ...

    @staticmethod
    def trycatch(fn: Callable[[], Any]) -> Any:
        """Same as okerr.adapter.trycatch()."""
        from okerr.adapter import trycatch

        return trycatch(fn)

    @staticmethod
    def try_(awaitable: Awaitable[T]) -> Coroutine[Any, Any, Result[T, Exception]]:
        """Same as okerr.adapter.settle(): await an in-flight awaitable into a Result."""
        from okerr.adapter import settle

        return settle(awaitable)

    # ──────────────────────── Introspection ────────────────────────

    def is_ok(self) -> bool:
        """True when the success slot is filled and the failure slot is empty."""
        return self._value is not _NO_VALUE and self._error is _NO_ERROR

    def is_err(self) -> bool:
        """True when the failure slot is filled and the success slot is empty."""
        return self._value is _NO_VALUE and self._error is not _NO_ERROR

    # ──────────────────────── Value Extraction ────────────────────────

    def expect(self) -> T:
        """
        Return the success value, or raise the failure.

        An exception payload is raised as-is. Any other payload is raised
        wrapped in UnwrapError, with the original on `.error`.
        """
        if self.is_ok():
            return self._value
        if isinstance(self._error, BaseException):
            raise self._error
        raise UnwrapError(self._error)

    def unwrap(self) -> T:
        """Alias of expect()."""
        return self.expect()

    def unwrap_or(self, default: T) -> T:
        """Return the success value, or `default` on Err. Never raises."""
        if self.is_ok():
            return self._value
        return default

    def unwrap_or_else(self, default_fn: Callable[[], T]) -> T:
        """Return the success value, or call `default_fn()` on Err."""
        if self.is_ok():
            return self._value
        return default_fn()

    # ──────────────────────── Transformations ────────────────────────

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """
        Transform the success value. An Err passes through with the same error.

            ok(5).map(lambda x: x * 2)    # → Ok(10)
            err(e).map(lambda x: x * 2)   # → Err(e)
        """
        if self.is_ok():
            return ok(fn(self._value))
        return err(self._error)

    def map_or(self, fn: Callable[[T], U], default: U) -> Result[U, E]:
        """
        Transform the success value, or turn an Err into Ok(default).

        Unlike map(), the fallback branch yields an Ok, not an Err.
        """
        if self.is_ok():
            return ok(fn(self._value))
        return ok(default)

    def map_or_else(self, fn: Callable[[T], U], default_fn: Callable[[], U]) -> Result[U, E]:
        """Like map_or(), with the fallback produced lazily by `default_fn()`."""
        if self.is_ok():
            return ok(fn(self._value))
        return ok(default_fn())

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning function. Short-circuits on Err.

        The Result returned by `fn` is handed back as-is, with no extra layer:

            def parse_port(raw: str) -> Result[int, str]:
                return ok(int(raw)) if raw.isdigit() else err(f"bad port {raw!r}")

            ok("8080").flat_map(parse_port)   # → Ok(8080)
            ok("http").flat_map(parse_port)   # → Err("bad port 'http'")
        """
        if self.is_ok():
            return fn(self._value)
        return err(self._error)

    def flat_map_or(self, fn: Callable[[T], Result[U, E]], default: Result[U, E]) -> Result[U, E]:
        """Like flat_map(), but an Err is replaced by the `default` Result."""
        if self.is_ok():
            return fn(self._value)
        return default

    def flat_map_or_else(
        self,
        fn: Callable[[T], Result[U, E]],
        default_fn: Callable[[], Result[U, E]],
    ) -> Result[U, E]:
        """Like flat_map_or(), with the fallback Result produced lazily."""
        if self.is_ok():
            return fn(self._value)
        return default_fn()

    # ──────────────────────── Boolean Combinators ────────────────────────

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return `other` if this is Ok, else an Err carrying this error."""
        if self.is_ok():
            return other
        return err(self._error)

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Lazy and_(): `fn(value)` is only called when this is Ok."""
        if self.is_ok():
            return fn(self._value)
        return err(self._error)

    def or_(self, other: Result[T, E]) -> Result[T, E]:
        """Return `other` if this is Err, else this very instance."""
        if self.is_err():
            return other
        return self

    def or_else(self, fn: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Lazy or_(): `fn()` is only called when this is Err."""
        if self.is_err():
            return fn()
        return self

    # ──────────────────────── In-place Repair ────────────────────────

    def ok_or_insert(self, value: T) -> Result[T, E]:
        """
        Turn an Err into Ok(value) in place. An Ok keeps its current value.

        Returns self for chaining.
        """
        if self.is_err():
            self._set_ok(value)
        return self

    def ok_or_insert_with(self, fn: Callable[[], T]) -> Result[T, E]:
        """Like ok_or_insert(), computing the value with `fn()` only when Err."""
        if self.is_err():
            self._set_ok(fn())
        return self

    def replace(self, value: T) -> Result[T, E]:
        """Overwrite in place with Ok(value), whatever the current state."""
        self._set_ok(value)
        return self

    def replace_err(self, error: E) -> Result[T, E]:
        """Overwrite in place with Err(error), whatever the current state."""
        self._value = _NO_VALUE
        self._error = error
        return self

    def _set_ok(self, value: T) -> None:
        self._value = value
        self._error = _NO_ERROR

    # ──────────────────────── Side Effects ────────────────────────

    def if_ok(
        self,
        fn: Callable[[T], Any],
        else_fn: Optional[Callable[[E], Any]] = None,
    ) -> Result[T, E]:
        """
        Call `fn(value)` on Ok, or `else_fn(error)` on Err when given.

        Always returns self unchanged. Useful for logging:

            fetch_user(uid).if_ok(
                lambda user: log.info("user.loaded", id=user.id),
                lambda error: log.warning("user.missing", error=str(error)),
            )
        """
        if self.is_ok():
            fn(self._value)
        elif else_fn is not None:
            else_fn(self._error)
        return self

    def if_err(
        self,
        fn: Callable[[E], Any],
        else_fn: Optional[Callable[[T], Any]] = None,
    ) -> Result[T, E]:
        """Mirror of if_ok(): `fn(error)` on Err, `else_fn(value)` on Ok."""
        if self.is_err():
            fn(self._error)
        elif else_fn is not None:
            else_fn(self._value)
        return self

    # ──────────────────────── Conversion ────────────────────────

    def to_json(self) -> T:
        """Serialization hook: the success value, raising on Err like unwrap()."""
        return self.unwrap()

    def to_js(self) -> T:
        """Alias of to_json()."""
        return self.unwrap()

    # ──────────────────────── Dunder methods ────────────────────────

    def __iter__(self) -> Iterator[T]:
        """Iterate over zero (Err) or one (Ok) value, snapshotted now."""
        return _ResultIterator(self._value)

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` holds only for Ok."""
        return self.is_ok()

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        if self.is_ok() and other.is_ok():
            return self._value == other._value
        if self.is_err() and other.is_err():
            return self._error == other._error
        return False

    # Mutable through replace()/ok_or_insert(), so not hashable.
    __hash__ = None  # type: ignore[assignment]


class _ResultIterator(Generic[T]):
    """Single-pass iterator over the success slot captured at creation."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    def __iter__(self) -> _ResultIterator[T]:
        return self

    def __next__(self) -> T:
        if self._value is _NO_VALUE:
            raise StopIteration
        value, self._value = self._value, _NO_VALUE
        return value


# ──────────────────────── Factories ────────────────────────


def ok(value: T) -> Result[T, Any]:
    """Create a Result in the Ok state holding `value`."""
    return Result(_CREATE_GUARD, value, _NO_ERROR)


def err(error: E) -> Result[Any, E]:
    """Create a Result in the Err state holding `error`."""
    return Result(_CREATE_GUARD, _NO_VALUE, error)
