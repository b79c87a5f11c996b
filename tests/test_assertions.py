"""Tests for ResultAssertions test helper."""

import pytest

from okerr import ResultAssertions, err, ok


class TestAssertOk:
    def test_passes_on_ok(self):
        value = ResultAssertions.assert_ok(ok(42))
        assert value == 42

    def test_fails_on_err_with_clear_message(self):
        with pytest.raises(AssertionError, match="Expected Ok but got Err"):
            ResultAssertions.assert_ok(err("Name is required"))

    def test_custom_message(self):
        with pytest.raises(AssertionError, match="custom context"):
            ResultAssertions.assert_ok(err("x"), "custom context")


class TestAssertErr:
    def test_passes_on_err(self):
        error = ResultAssertions.assert_err(err("missing"))
        assert error == "missing"

    def test_checks_error_type(self):
        error = ResultAssertions.assert_err(err(KeyError("id")), LookupError)
        assert isinstance(error, KeyError)

    def test_fails_on_wrong_error_type(self):
        with pytest.raises(AssertionError, match="Expected error of type ValueError"):
            ResultAssertions.assert_err(err(KeyError("id")), ValueError)

    def test_fails_on_ok(self):
        with pytest.raises(AssertionError, match="Expected Err but got Ok"):
            ResultAssertions.assert_err(ok(42))


class TestAssertValues:
    def test_ok_value_matches(self):
        ResultAssertions.assert_ok_value(ok("Alice"), "Alice")

    def test_ok_value_mismatch(self):
        with pytest.raises(AssertionError, match="Expected Ok value 'Bob'"):
            ResultAssertions.assert_ok_value(ok("Alice"), "Bob")

    def test_err_value_matches(self):
        ResultAssertions.assert_err_value(err("gone"), "gone")

    def test_err_value_mismatch(self):
        with pytest.raises(AssertionError, match="Expected Err value 'x'"):
            ResultAssertions.assert_err_value(err("y"), "x")
