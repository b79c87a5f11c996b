"""
Exceptions raised by okerr itself.

Two tiers, never mixed:
  - Represented failures live inside an Err and are only raised when the
    caller opts in via unwrap()/expect()/to_json()/to_js().
  - Misuse faults (ResultConstructionError) signal a programming error and
    are never converted into an Err, not even by trycatch().
"""

from __future__ import annotations

from typing import Any


class OkerrError(Exception):
    """Base class for exceptions raised by the okerr library."""


class ResultConstructionError(OkerrError, TypeError):
    """
    Raised when Result is instantiated directly instead of through ok()/err().

    Subclasses TypeError so callers catching the builtin still see it.
    """

    def __init__(self, message: str = "Results can only be created with the ok or err functions") -> None:
        super().__init__(message)


class UnwrapError(OkerrError):
    """
    Raised by the unwrap family when the Err payload is not an exception.

    Exception payloads are re-raised as-is; anything else (a string, an enum,
    a dict) travels on `.error` so the original value is never lost.

        try:
            err("disk full").unwrap()
        except UnwrapError as e:
            e.error  # "disk full"
    """

    def __init__(self, error: Any) -> None:
        super().__init__(f"Called unwrap on an Err value: {error!r}")
        self.error = error
