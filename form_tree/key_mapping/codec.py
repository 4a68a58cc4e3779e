"""Composite key encoding for field ancestor chains."""

from __future__ import annotations

from typing import TYPE_CHECKING

from form_tree.errors import MalformedKeyError


if TYPE_CHECKING:
    from collections.abc import Iterable


DEFAULT_SEPARATOR = ">"


class PathCodec:
    """Map between composite keys and ordered ancestor segments."""

    def __init__(self, sep: str = DEFAULT_SEPARATOR) -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def __repr__(self) -> str:
        return f"PathCodec(sep={self.sep!r})"

    def encode(self, segments: Iterable[str]) -> str:
        """Join ancestor segments into a composite key."""
        parts = tuple(segments)
        if not parts:
            raise MalformedKeyError(parts, "at least one segment is required")
        for part in parts:
            if not isinstance(part, str):
                raise MalformedKeyError(parts, f"segment {part!r} is {type(part).__name__}, expected str")
            if self.sep in part:
                raise MalformedKeyError(parts, f"segment {part!r} contains separator {self.sep!r}")
        joined = self.sep.join(parts)
        # a multi-character separator can straddle a segment boundary
        if self.decode(joined) != parts:
            raise MalformedKeyError(parts, f"segments are ambiguous with separator {self.sep!r}")
        return joined

    def decode(self, key: str) -> tuple[str, ...]:
        """Split a composite key into segments, keeping empty segments as they are."""
        return tuple(key.split(self.sep))

    def ancestors(self, key: str) -> tuple[str, ...]:
        """Decode a key that must name a field: non-empty, with no empty segment."""
        if not isinstance(key, str):
            raise MalformedKeyError(key, f"expected str, got {type(key).__name__}")
        if not key:
            raise MalformedKeyError(key, "key must not be empty")
        parts = self.decode(key)
        if any(not part for part in parts):
            raise MalformedKeyError(key, "empty segment")
        return parts

    def child(self, key: str, segment: str) -> str:
        """Extend a key by one segment."""
        return self.encode((*self.ancestors(key), segment))

    def is_descendant(self, key: str, ancestor_key: str) -> bool:
        """Return True when ``key`` lies strictly beneath ``ancestor_key``."""
        parts = self.decode(key)
        prefix = self.decode(ancestor_key)
        return len(parts) > len(prefix) and parts[: len(prefix)] == prefix


def encode(segments: Iterable[str], sep: str = DEFAULT_SEPARATOR) -> str:
    """Join ancestor segments with ``sep``."""
    return PathCodec(sep).encode(segments)


def decode(key: str, sep: str = DEFAULT_SEPARATOR) -> tuple[str, ...]:
    """Split a composite key on ``sep``."""
    return PathCodec(sep).decode(key)
