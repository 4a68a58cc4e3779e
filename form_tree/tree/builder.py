"""Nested field tree reconstruction from flattened form records."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from form_tree.errors import FormTreeError, RecordBuildError
from form_tree.key_mapping import DEFAULT_SEPARATOR, PathCodec

from .nodes import FieldNode, as_field_value, find_sibling


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = logging.getLogger(__name__)


def expand_selection(selection: str | Iterable[str] | None) -> list[FieldNode]:
    """Turn a selection into stub nodes, one per chosen identifier.

    A single identifier gives one stub, a sequence gives one stub per distinct
    non-empty identifier in order, and ``None`` or ``""`` gives none.
    """
    if not selection:
        return []
    if isinstance(selection, str):
        return [FieldNode(field_id=selection)]

    stubs: list[FieldNode] = []
    seen: set[str] = set()
    for field_id in selection:
        if not field_id or field_id in seen:
            continue
        seen.add(field_id)
        stubs.append(FieldNode(field_id=field_id))
    return stubs


class TreeBuilder:
    """Build ordered field trees from flat ``key -> value`` form records."""

    def __init__(self, sep: str = DEFAULT_SEPARATOR, *, codec: PathCodec | None = None) -> None:
        super().__init__()
        self.codec = codec if codec is not None else PathCodec(sep)

    def build(self, record: Mapping[str, Any]) -> list[FieldNode]:
        """Build the root nodes for one record.

        Keys are processed in the record's iteration order, which fixes the
        order of first-seen siblings. Any bad key or value fails the whole
        record.
        """
        result: list[FieldNode] = []
        for key, raw_value in record.items():
            ancestors = self.codec.ancestors(key)
            value = as_field_value(key, raw_value)

            siblings = result
            for segment in ancestors[:-1]:
                node = find_sibling(siblings, segment)
                if node is None:
                    node = FieldNode(field_id=segment)
                    siblings.append(node)
                siblings = node.selected

            leaf_id = ancestors[-1]
            content = value.content or ""
            selected = expand_selection(value.selection)
            leaf = find_sibling(siblings, leaf_id)
            if leaf is None:
                siblings.append(FieldNode(field_id=leaf_id, content=content, selected=selected))
            else:
                leaf.content = content
                leaf.selected = selected

        logger.debug("built %d root field(s) from %d entries", len(result), len(record))
        return result

    def build_records(self, records: Iterable[Mapping[str, Any]]) -> list[list[FieldNode]]:
        """Build every record in order; the first failing record aborts the batch."""
        trees: list[list[FieldNode]] = []
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise RecordBuildError(index, None, f"record is not a mapping ({type(record).__name__})")
            try:
                trees.append(self.build(record))
            except FormTreeError as exc:
                key = getattr(exc, "key", None)
                reason = getattr(exc, "reason", str(exc))
                raise RecordBuildError(index, key, reason) from exc
        return trees


def build(record: Mapping[str, Any], sep: str = DEFAULT_SEPARATOR) -> list[FieldNode]:
    """Build the root field nodes for one flat record."""
    return TreeBuilder(sep).build(record)


def build_records(records: Iterable[Mapping[str, Any]], sep: str = DEFAULT_SEPARATOR) -> list[list[FieldNode]]:
    """Build one tree per record, preserving record order."""
    return TreeBuilder(sep).build_records(records)
