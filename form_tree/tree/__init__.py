"""Field tree models, building and flattening."""

from .builder import TreeBuilder, build, build_records, expand_selection
from .flatten import flatten
from .nodes import FieldNode, FieldValue


__all__ = ["FieldNode", "FieldValue", "TreeBuilder", "build", "build_records", "expand_selection", "flatten"]
