from __future__ import annotations

import argparse
import sys

from ..roots import full_roots
from ..tree_math import (
    FlatTreeError,
    children,
    count,
    depth,
    index,
    offset,
    parent,
    sibling,
    spans,
    uncle,
)
from .vectors import ingest_and_run_vectors


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flattree")
    sub = p.add_subparsers(dest="cmd", required=True)
    ix = sub.add_parser("index", help="flat index of (depth, offset)")
    ix.add_argument("depth", type=int)
    ix.add_argument("offset", type=int)
    nd = sub.add_parser("node", help="relationships of a node")
    nd.add_argument("node", type=int)
    rt = sub.add_parser("roots", help="full roots below a boundary index")
    rt.add_argument("boundary", type=int)  # 2 * leaf count
    vc = sub.add_parser("vectors", help="run JSON test vectors in a directory")
    vc.add_argument("directory")
    return p


def _or_dash(fn, node: int) -> str:
    try:
        return str(fn(node))
    except FlatTreeError:
        return "-"


def describe(node: int) -> list[str]:
    """Lines of `key: value` describing node; overflowing or missing relatives print as '-'."""
    lines = [f"node: {node}", f"depth: {depth(node)}", f"offset: {offset(node)}"]
    for key, fn in (("parent", parent), ("sibling", sibling), ("uncle", uncle)):
        lines.append(f"{key}: {_or_dash(fn, node)}")
    try:
        left, right = children(node)
        lines.append(f"children: {left} {right}")
    except FlatTreeError:
        lines.append("children: -")
    try:
        lo, hi = spans(node)
        lines.append(f"spans: {lo} {hi}")
    except FlatTreeError:
        lines.append("spans: -")
    lines.append(f"count: {_or_dash(count, node)}")
    return lines


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    try:
        if args.cmd == "index":
            print(index(args.depth, args.offset))
            return 0
        if args.cmd == "node":
            print("\n".join(describe(args.node)))
            return 0
        if args.cmd == "roots":
            for r in full_roots(args.boundary):
                print(r)
            return 0
        if args.cmd == "vectors":
            summary = ingest_and_run_vectors(args.directory)
            print(" ".join(f"{k}={v}" for k, v in summary.items()))
            return 1 if summary["failed"] else 0
    except (ValueError, OSError) as e:
        print(f"flattree: error: {e}", file=sys.stderr)
        return 2
    return 2


if __name__ == "__main__":
    sys.exit(main())
