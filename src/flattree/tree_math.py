"""Index algebra for flat (in-order, array-laid-out) binary trees.

A flat tree numbers the nodes of an infinite perfect binary tree in-order,
so leaves take the even indices and internal nodes the odd ones:

            3
        1       5
      0   2   4   6

Conventions
- Every node index, depth and offset is an unsigned 64-bit value. Inputs
  outside [0, UINT64_MAX] raise ValueError; results that would leave that
  range raise IndexOverflowError instead of wrapping.
- "*_with_depth" variants take the node's depth from the caller and skip
  the trailing-bit count. The depth is trusted, not re-checked against the
  node.
- Child access on a leaf raises LeafNodeError.
"""

from __future__ import annotations

UINT64_MAX = (1 << 64) - 1


class FlatTreeError(ValueError):
    """Base class for flat tree addressing errors."""


class IndexOverflowError(FlatTreeError, OverflowError):
    """Raised when a computed index does not fit in 64 bits."""


class LeafNodeError(FlatTreeError):
    """Raised when children are requested for a leaf node."""


def _check_u64(name: str, x: int) -> None:
    if x < 0:
        raise ValueError(f"{name} cannot be negative: {x}")
    if x > UINT64_MAX:
        raise ValueError(f"{name} does not fit in 64 bits: {x}")


def _checked(x: int, what: str) -> int:
    if x > UINT64_MAX:
        raise IndexOverflowError(f"{what} overflows 64 bits")
    return x


def index(depth: int, offset: int) -> int:
    """Return the flat index of the node at (depth, offset).

    Parameters
    - depth: Levels above the leaves (0 for leaves).
    - offset: Position of the node among all nodes of that depth.

    Returns
    - offset * 2^(depth+1) + 2^depth - 1.

    Raises
    - ValueError: If depth or offset is negative or wider than 64 bits.
    - IndexOverflowError: If the index does not fit in 64 bits.
    """
    _check_u64("depth", depth)
    _check_u64("offset", offset)
    if depth > 64:
        raise IndexOverflowError(f"depth {depth} overflows 64 bits")
    return _checked((offset << (depth + 1)) | ((1 << depth) - 1), f"index({depth}, {offset})")


def depth(node: int) -> int:
    """
    Depth of a node: the number of trailing one bits of the index, i.e.
    trailing zero bits of node + 1. Leaves (even indices) are depth 0.
    """
    _check_u64("node", node)
    x = node + 1
    return (x & -x).bit_length() - 1


def offset_with_depth(node: int, depth: int) -> int:
    _check_u64("node", node)
    return node >> (depth + 1)


def offset(node: int) -> int:
    """Position of a node among the nodes of its depth, left to right."""
    return offset_with_depth(node, depth(node))


def parent_with_depth(node: int, depth: int) -> int:
    return index(depth + 1, offset_with_depth(node, depth) >> 1)


def parent(node: int) -> int:
    return parent_with_depth(node, depth(node))


def sibling_with_depth(node: int, depth: int) -> int:
    # flip left <-> right at the same depth
    return index(depth, offset_with_depth(node, depth) ^ 1)


def sibling(node: int) -> int:
    return sibling_with_depth(node, depth(node))


def uncle_with_depth(node: int, depth: int) -> int:
    return sibling_with_depth(parent_with_depth(node, depth), depth + 1)


def uncle(node: int) -> int:
    """Sibling of the node's parent."""
    return uncle_with_depth(node, depth(node))


def left_child_with_depth(node: int, depth: int) -> int:
    if depth == 0:
        raise LeafNodeError(f"leaf node {node} has no children")
    return index(depth - 1, offset_with_depth(node, depth) << 1)


def left_child(node: int) -> int:
    return left_child_with_depth(node, depth(node))


def right_child_with_depth(node: int, depth: int) -> int:
    if depth == 0:
        raise LeafNodeError(f"leaf node {node} has no children")
    return index(depth - 1, (offset_with_depth(node, depth) << 1) + 1)


def right_child(node: int) -> int:
    return right_child_with_depth(node, depth(node))


def children_with_depth(node: int, depth: int) -> tuple[int, int]:
    return left_child_with_depth(node, depth), right_child_with_depth(node, depth)


def children(node: int) -> tuple[int, int]:
    """Return (left_child, right_child).

    Raises
    - LeafNodeError: If node is a leaf.
    """
    return children_with_depth(node, depth(node))


def left_span_with_depth(node: int, depth: int) -> int:
    return offset_with_depth(node, depth) << (depth + 1)


def left_span(node: int) -> int:
    """Flat index of the leftmost leaf under node."""
    return left_span_with_depth(node, depth(node))


def right_span_with_depth(node: int, depth: int) -> int:
    x = ((offset_with_depth(node, depth) + 1) << (depth + 1)) - 2
    return _checked(x, f"right span of {node}")


def right_span(node: int) -> int:
    """Flat index of the rightmost leaf under node."""
    return right_span_with_depth(node, depth(node))


def spans_with_depth(node: int, depth: int) -> tuple[int, int]:
    return left_span_with_depth(node, depth), right_span_with_depth(node, depth)


def spans(node: int) -> tuple[int, int]:
    """Inclusive (leftmost, rightmost) leaf indices covered by node."""
    return spans_with_depth(node, depth(node))


def count_with_depth(node: int, depth: int) -> int:
    _check_u64("node", node)
    return _checked((2 << depth) - 1, f"node count under {node}")


def count(node: int) -> int:
    """Number of nodes, leaves and internal, in the subtree rooted at node."""
    return count_with_depth(node, depth(node))


def _ancestor(node: int, target_depth: int) -> int:
    # the ancestor at target_depth covers the node's leftmost leaf
    return index(target_depth, left_span(node) >> (target_depth + 1))


def direct_path(node: int, top: int) -> list[int]:
    """Ancestors of node up to and including top, nearest first.

    Parameters
    - node: Starting node (not included in the result).
    - top: An ancestor of node, usually the root of a full subtree.

    Returns
    - List of parents from node up to top; empty if node == top.

    Raises
    - ValueError: If top is neither node nor one of its ancestors.
    """
    k = depth(node)
    t = depth(top)
    if t < k or _ancestor(node, t) != top:
        raise ValueError(f"{top} is not an ancestor of {node}")

    d: list[int] = []
    while k < t:
        node = parent_with_depth(node, k)
        k += 1
        d.append(node)
    return d


def copath(node: int, top: int) -> list[int]:
    """Siblings of node and of its direct path below top, nearest first.

    Raises
    - ValueError: If top is neither node nor one of its ancestors.
    - IndexOverflowError: If top has depth 64 (top == UINT64_MAX); the
      sibling of its depth-63 child does not fit in 64 bits.
    """
    if node == top:
        return []

    d = direct_path(node, top)
    d.insert(0, node)
    d.pop()
    return [sibling(y) for y in d]
