"""
okerr: a discriminated Result container for Python.

Explicit, composable error handling: expected failures are values, not
exceptions.

    from okerr import Result, ok, err, trycatch

    def parse_age(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return err(f"not a number: {raw!r}")
        return ok(int(raw))

    greeting = (
        parse_age("30")
        .and_then(lambda age: ok(age) if age >= 18 else err("too young"))
        .map(lambda age: f"Welcome, {age}-year-old")
        .unwrap_or("Access denied")
    )

    config = trycatch(lambda: json.loads(raw_config))   # Ok(dict) or Err(JSONDecodeError)
"""

from okerr.result import Result, ok, err
from okerr.adapter import trycatch, settle
from okerr.errors import OkerrError, ResultConstructionError, UnwrapError
from okerr.config import OkerrSettings, get_settings
from okerr.log import configure_logging
from okerr.assertions import ResultAssertions

__all__ = [
    "Result",
    "ok",
    "err",
    "trycatch",
    "settle",
    "OkerrError",
    "ResultConstructionError",
    "UnwrapError",
    "OkerrSettings",
    "get_settings",
    "configure_logging",
    "ResultAssertions",
]

__version__ = "1.0.0"
