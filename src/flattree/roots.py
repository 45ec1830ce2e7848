"""Decomposition of a leaf prefix into full subtree roots.

For n leaves the prefix [0, n) splits into one perfect subtree per set bit
of n, largest first (the "peaks" of a Merkle Mountain Range). Taking the
largest subtree that still fits and moving the cursor past it yields
exactly those subtrees. Two equal-sized neighbours are never both emitted,
since together they would form a larger subtree that fits.
"""

from __future__ import annotations

from .tree_math import _check_u64, index, spans


def full_roots(boundary: int) -> list[int]:
    """Return the roots of the full subtrees covering the leaves below boundary.

    Parameters
    - boundary: One-past-the-end flat index, 2 * n for n leaves.

    Returns
    - Root indices ordered by increasing left span. Empty for a boundary of
      0 and for odd boundaries, which do not sit between two leaves.
    """
    _check_u64("boundary", boundary)
    if boundary & 1:
        return []

    remaining = boundary >> 1
    leaf = 0  # leaf offset of the cursor
    roots: list[int] = []
    while remaining:
        d = remaining.bit_length() - 1
        roots.append(index(d, leaf >> d))
        leaf += 1 << d
        remaining -= 1 << d
    return roots


def full_root_spans(boundary: int) -> list[tuple[int, int]]:
    """(left_span, right_span) of every root returned by full_roots(boundary)."""
    return [spans(r) for r in full_roots(boundary)]
