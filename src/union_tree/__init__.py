"""union_tree: route alternatives through a balanced tree of two-variant sum types."""

from .config import EmitConfig
from .either import Either, Left, Right, index_of, unwrap, wrap
from .emit import Dialect, available_dialects, emit_expression, emit_type, get_dialect, register_dialect
from .exceptions import (
    ConfigurationError,
    IndexOutOfRangeError,
    InvalidCountError,
    MalformedInvocationError,
    MalformedPathError,
    ShapeMismatchError,
    UnionTreeError,
    UnknownDialectError,
)
from .macro import Invocation, expand, parse_invocation
from .path import Path, Side, build_path, depth, enumerate_paths, path_to_index, tree_shape
from .tree_math import first_half, power_of_two_ceiling

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Dialect",
    "Either",
    "EmitConfig",
    "IndexOutOfRangeError",
    "InvalidCountError",
    "Invocation",
    "Left",
    "MalformedInvocationError",
    "MalformedPathError",
    "Path",
    "Right",
    "ShapeMismatchError",
    "Side",
    "UnionTreeError",
    "UnknownDialectError",
    "available_dialects",
    "build_path",
    "depth",
    "emit_expression",
    "emit_type",
    "enumerate_paths",
    "expand",
    "first_half",
    "get_dialect",
    "index_of",
    "parse_invocation",
    "path_to_index",
    "power_of_two_ceiling",
    "register_dialect",
    "tree_shape",
    "unwrap",
    "wrap",
]
