"""form-tree - build nested field trees from flat conditional form records"""

from ._version import version as __version__
from .errors import FormTreeError, InvalidValueError, MalformedKeyError, RecordBuildError
from .key_mapping import DEFAULT_SEPARATOR, PathCodec, decode, encode
from .mappings import FormRecord
from .tree import FieldNode, FieldValue, TreeBuilder, build, build_records, expand_selection, flatten


__all__ = [
    "DEFAULT_SEPARATOR",
    "FieldNode",
    "FieldValue",
    "FormRecord",
    "FormTreeError",
    "InvalidValueError",
    "MalformedKeyError",
    "PathCodec",
    "RecordBuildError",
    "TreeBuilder",
    "__version__",
    "build",
    "build_records",
    "decode",
    "encode",
    "expand_selection",
    "flatten",
]
