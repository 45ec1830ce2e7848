"""flattree: index arithmetic for flat, array-laid-out binary trees."""

from .tree_math import (
    UINT64_MAX,
    FlatTreeError,
    IndexOverflowError,
    LeafNodeError,
    children,
    copath,
    count,
    depth,
    direct_path,
    index,
    left_child,
    left_span,
    offset,
    parent,
    right_child,
    right_span,
    sibling,
    spans,
    uncle,
)
from .roots import full_root_spans, full_roots

__version__ = "0.1.0"

__all__ = [
    "UINT64_MAX",
    "FlatTreeError",
    "IndexOverflowError",
    "LeafNodeError",
    "children",
    "copath",
    "count",
    "depth",
    "direct_path",
    "full_root_spans",
    "full_roots",
    "index",
    "left_child",
    "left_span",
    "offset",
    "parent",
    "right_child",
    "right_span",
    "sibling",
    "spans",
    "uncle",
]
