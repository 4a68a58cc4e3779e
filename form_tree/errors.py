"""Exception types raised while encoding keys and building field trees."""

from __future__ import annotations

from typing import Any


class FormTreeError(Exception):
    """Base exception for all form-tree errors."""


class MalformedKeyError(FormTreeError, ValueError):
    """Raised when a composite key cannot describe a path to a field."""

    def __init__(self, key: Any, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"malformed key {key!r}: {reason}")


class InvalidValueError(FormTreeError, TypeError):
    """Raised when a flat entry value is not a usable content/selection record."""

    def __init__(self, key: Any, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"invalid value for key {key!r}: {reason}")


class RecordBuildError(FormTreeError):
    """Raised when one record in a batch fails to build.

    The original error is available as ``__cause__``.
    """

    def __init__(self, index: int, key: Any, reason: str) -> None:
        self.index = index
        self.key = key
        self.reason = reason
        super().__init__(f"record {index} failed at key {key!r}: {reason}")
