"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages, for use in
the test suites of code that returns Results.

Usage in tests:
    from okerr import ResultAssertions

    def test_parse_port():
        result = parse_port("8080")
        assert ResultAssertions.assert_ok(result) == 8080

    def test_parse_port_rejects_text():
        error = ResultAssertions.assert_err(parse_port("http"), ValueError)
        assert "http" in str(error)
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from okerr.result import Result

T = TypeVar("T")
E = TypeVar("E")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_ok(result: Result[T, E], message: str = "") -> T:
        """
        Assert the Result is Ok and return the value.

            value = ResultAssertions.assert_ok(result)
        """
        context = f" - {message}" if message else ""
        captured: list[Any] = []
        result.if_err(captured.append)
        assert result.is_ok(), f"Expected Ok but got Err({captured[0]!r}){context}"
        return next(iter(result))

    @staticmethod
    def assert_err(
        result: Result[T, E],
        expected_type: Optional[type] = None,
        message: str = "",
    ) -> E:
        """
        Assert the Result is Err, optionally checking the error's type, and return the error.

            error = ResultAssertions.assert_err(result, ZeroDivisionError)
        """
        context = f" - {message}" if message else ""
        assert result.is_err(), f"Expected Err but got Ok({next(iter(result))!r}){context}"
        captured: list[Any] = []
        result.if_err(captured.append)
        error = captured[0]
        if expected_type is not None:
            assert isinstance(error, expected_type), (
                f"Expected error of type {expected_type.__name__} "
                f"but got {type(error).__name__}: {error!r}{context}"
            )
        return error

    @staticmethod
    def assert_ok_value(result: Result[T, E], expected_value: Any) -> None:
        """Assert the Result is Ok with the specific value."""
        value = ResultAssertions.assert_ok(result)
        assert value == expected_value, (
            f"Expected Ok value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_err_value(result: Result[T, E], expected_error: Any) -> None:
        """Assert the Result is Err with the specific error (compared with ==)."""
        error = ResultAssertions.assert_err(result)
        assert error == expected_error, (
            f"Expected Err value {expected_error!r} but got {error!r}"
        )
