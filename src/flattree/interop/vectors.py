from __future__ import annotations

import json
import os
from typing import Any, Callable

from .. import roots, tree_math

OPS: dict[str, Callable[..., Any]] = {
    "index": tree_math.index,
    "depth": tree_math.depth,
    "offset": tree_math.offset,
    "parent": tree_math.parent,
    "sibling": tree_math.sibling,
    "uncle": tree_math.uncle,
    "left_child": tree_math.left_child,
    "right_child": tree_math.right_child,
    "children": tree_math.children,
    "left_span": tree_math.left_span,
    "right_span": tree_math.right_span,
    "spans": tree_math.spans,
    "count": tree_math.count,
    "direct_path": tree_math.direct_path,
    "copath": tree_math.copath,
    "full_roots": roots.full_roots,
    "full_root_spans": roots.full_root_spans,
}

ERRORS: dict[str, type[Exception]] = {
    "FlatTreeError": tree_math.FlatTreeError,
    "IndexOverflowError": tree_math.IndexOverflowError,
    "LeafNodeError": tree_math.LeafNodeError,
    "ValueError": ValueError,
}


class VectorError(Exception):
    """Raised when a test vector document is malformed."""


def _plain(x: Any) -> Any:
    # JSON has no tuples
    if isinstance(x, (tuple, list)):
        return [_plain(y) for y in x]
    return x


def _run_case(case: Any, n: int) -> None:
    if not isinstance(case, dict):
        raise VectorError(f"case {n}: must be an object")
    op = case.get("op")
    if not isinstance(op, str) or op not in OPS:
        raise VectorError(f"case {n}: unknown op {op!r}")
    args = case.get("args", [])
    if not isinstance(args, list):
        raise VectorError(f"case {n}: args must be a list")

    if "error" in case:
        err = ERRORS.get(case["error"])
        if err is None:
            raise VectorError(f"case {n}: unknown error {case['error']!r}")
        try:
            OPS[op](*args)
        except err:
            return
        except Exception as e:
            raise AssertionError(
                f"case {n}: {op}{tuple(args)} raised {type(e).__name__}, expected {case['error']}"
            ) from e
        raise AssertionError(f"case {n}: {op}{tuple(args)} did not raise {case['error']}")

    if "expected" not in case:
        raise VectorError(f"case {n}: needs 'expected' or 'error'")
    got = _plain(OPS[op](*args))
    assert got == case["expected"], f"case {n}: {op}{tuple(args)} = {got}, expected {case['expected']}"


def run_vector(vec: dict[str, Any]) -> int:
    """
    Execute one decoded flat_tree vector document.
    expects fields: type ("flat_tree"), cases (list of {op, args, expected | error}).
    Returns the number of cases executed; raises AssertionError on the first mismatch.
    """
    if vec.get("type") != "flat_tree":
        raise VectorError(f"unsupported vector type {vec.get('type')!r}")
    cases = vec.get("cases")
    if not isinstance(cases, list):
        raise VectorError("cases must be a list")
    for n, case in enumerate(cases):
        _run_case(case, n)
    return len(cases)


def ingest_and_run_vectors(directory: str) -> dict[str, int]:
    """
    Load JSON test vectors from a directory and run flat_tree documents.
    Returns summary counts.
    """
    summary = {"total": 0, "passed": 0, "failed": 0, "skipped": 0}
    for fname in sorted(os.listdir(directory)):
        if not fname.endswith(".json"):
            continue
        path = os.path.join(directory, fname)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            summary["skipped"] += 1
            continue
        summary["total"] += 1
        if not isinstance(data, dict) or data.get("type") != "flat_tree":
            summary["skipped"] += 1
            continue
        try:
            run_vector(data)
            summary["passed"] += 1
        except Exception:
            summary["failed"] += 1
    return summary
