"""Ordered flat form record keyed by composite field paths."""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from form_tree.errors import MalformedKeyError
from form_tree.key_mapping import DEFAULT_SEPARATOR, PathCodec
from form_tree.tree.builder import TreeBuilder
from form_tree.tree.flatten import flatten
from form_tree.tree.nodes import FieldValue, as_field_value


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from form_tree.tree.nodes import FieldNode


_Key = str | tuple[str, ...]


class FormRecord(MutableMapping[str, FieldValue]):
    """Dict-like flat record written by a form renderer.

    Keys are composite key strings or tuples of segments. Values are stored
    as :class:`FieldValue`. Insertion order is kept because it decides the
    order of first-seen siblings when the record is built.
    """

    def __init__(
        self,
        entries: Mapping[_Key, Any] | Iterable[tuple[_Key, Any]] | None = None,
        *,
        sep: str = DEFAULT_SEPARATOR,
    ) -> None:
        super().__init__()
        self._codec = PathCodec(sep)
        self._data: dict[str, FieldValue] = {}
        if entries is not None:
            self.update(entries)

    @classmethod
    def from_tree(cls, nodes: Iterable[FieldNode], sep: str = DEFAULT_SEPARATOR) -> FormRecord:
        """Create a record that builds back into ``nodes``."""
        return cls(flatten(nodes, sep=sep), sep=sep)

    @property
    def sep(self) -> str:
        return self._codec.sep

    def _normalize(self, key: _Key) -> str:
        if isinstance(key, tuple):
            key = self._codec.encode(key)
        _ = self._codec.ancestors(key)
        return key

    def _subtree_keys(self, key: str) -> list[str]:
        return [
            candidate
            for candidate in self._data
            if candidate == key or self._codec.is_descendant(candidate, key)
        ]

    @override
    def __getitem__(self, key: _Key) -> FieldValue:
        return self._data[self._normalize(key)]

    @override
    def __setitem__(self, key: _Key, value: Any) -> None:
        normalized = self._normalize(key)
        self._data[normalized] = as_field_value(normalized, value)

    @override
    def __delitem__(self, key: _Key) -> None:
        """Delete a field and every entry nested beneath it."""
        if not self.discard(key):
            raise KeyError(key)

    @override
    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, tuple)):
            return False
        try:
            return self._normalize(key) in self._data
        except MalformedKeyError:
            return False

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    def discard(self, key: _Key) -> int:
        """Remove a field and its descendants if present; return how many entries went."""
        removed = self._subtree_keys(self._normalize(key))
        for candidate in removed:
            del self._data[candidate]
        return len(removed)

    def build(self) -> list[FieldNode]:
        """Build the nested field tree for this record."""
        return TreeBuilder(codec=self._codec).build(self._data)

    def to_plain_dict(self) -> dict[str, dict[str, Any]]:
        return {key: value.to_plain_dict() for key, value in self._data.items()}

    def copy(self) -> dict[str, dict[str, Any]]:
        """Return a detached plain-dict snapshot of the record."""
        return self.to_plain_dict()

    @override
    def __repr__(self) -> str:
        return repr(self.to_plain_dict())
