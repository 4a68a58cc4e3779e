"""Flatten field trees back into composite-key records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from form_tree.key_mapping import DEFAULT_SEPARATOR, PathCodec

from .nodes import FieldNode, FieldValue


if TYPE_CHECKING:
    from collections.abc import Iterable


def flatten(nodes: Iterable[FieldNode], sep: str = DEFAULT_SEPARATOR) -> dict[str, FieldValue]:
    """Flatten root nodes into an ordered ``key -> FieldValue`` record.

    Nodes are visited in pre-order. Each entry selects the node's children
    so that building the record again recreates them as stubs before the
    deeper entries fill them in.
    """
    codec = PathCodec(sep)
    record: dict[str, FieldValue] = {}

    def visit(node: FieldNode, path: tuple[str, ...]) -> None:
        node_path = (*path, node.field_id)
        key = codec.encode(node_path)
        record[key] = FieldValue(
            content=node.content or None,
            selection=[child.field_id for child in node.selected] or None,
        )
        for child in node.selected:
            visit(child, node_path)

    for root in nodes:
        visit(root, ())
    return record
