import unittest

from flattree import tree_math
from flattree.tree_math import (
    UINT64_MAX,
    IndexOverflowError,
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
)


class TestAlgorithmicTreeMath(unittest.TestCase):
    def test_round_trip(self):
        for d in range(0, 20):
            for i in list(range(0, 64)) + [12345, 2**40 - 1]:
                x = index(d, i)
                self.assertEqual(depth(x), d)
                self.assertEqual(offset(x), i)

    def test_index_is_a_bijection_on_a_prefix(self):
        seen = {}
        for d in range(0, 8):
            for i in range(0, 256 >> d):
                x = index(d, i)
                self.assertNotIn(x, seen)
                seen[x] = (d, i)
        # every index below 255 is produced exactly once
        self.assertEqual(sorted(k for k in seen if k < 255), list(range(255)))

    def test_leaf_identity(self):
        for i in range(0, 500):
            self.assertEqual(index(0, i), 2 * i)
            self.assertEqual(depth(2 * i), 0)

    def test_parent_child_inverse(self):
        for node in range(1, 1024, 2):
            self.assertEqual(parent(left_child(node)), node)
            self.assertEqual(parent(right_child(node)), node)
            self.assertEqual(children(node), (left_child(node), right_child(node)))

    def test_sibling_symmetry(self):
        for node in range(0, 1024):
            self.assertEqual(sibling(sibling(node)), node)
            self.assertNotEqual(sibling(node), node)
            self.assertEqual(parent(sibling(node)), parent(node))

    def test_span_and_count_laws(self):
        for node in range(0, 1024):
            lo, hi = spans(node)
            self.assertEqual(lo % 2, 0)
            self.assertEqual(hi % 2, 0)
            self.assertLessEqual(lo, hi)
            self.assertEqual((lo, hi), (left_span(node), right_span(node)))
            self.assertEqual(count(node), 2 ** (depth(node) + 1) - 1)
            # leaves + internal nodes inside the span
            self.assertEqual(count(node), hi - lo + 1)

    def test_with_depth_variants_match(self):
        names = [
            "parent",
            "sibling",
            "uncle",
            "left_span",
            "right_span",
            "spans",
            "count",
            "offset",
        ]
        for node in range(0, 300):
            d = depth(node)
            for name in names:
                plain = getattr(tree_math, name)
                with_depth = getattr(tree_math, name + "_with_depth")
                self.assertEqual(with_depth(node, d), plain(node), (name, node))
            if d:
                self.assertEqual(tree_math.children_with_depth(node, d), children(node))
                self.assertEqual(tree_math.left_child_with_depth(node, d), left_child(node))
                self.assertEqual(tree_math.right_child_with_depth(node, d), right_child(node))


class TestAlgorithmicPaths(unittest.TestCase):
    def test_direct_path_and_copath_lengths_match(self):
        top = 15  # root of 8 leaves
        for leaf in range(0, 16, 2):
            dp = direct_path(leaf, top)
            cp = copath(leaf, top)
            self.assertEqual(len(dp), 4)
            self.assertEqual(len(dp), len(cp))
            self.assertEqual(dp[-1], top)
            self.assertEqual(cp[0], sibling(leaf))
            self.assertEqual(parent(leaf), dp[0])
            for lower, upper in zip(dp, dp[1:]):
                self.assertEqual(parent(lower), upper)
            for node, sib in zip([leaf] + dp[:-1], cp):
                self.assertEqual(sibling(node), sib)

    def test_path_to_self_is_empty(self):
        self.assertEqual(direct_path(5, 5), [])
        self.assertEqual(copath(5, 5), [])

    def test_top_must_be_an_ancestor(self):
        with self.assertRaises(ValueError):
            direct_path(4, 1)  # 1 covers leaves 0..2 only
        with self.assertRaises(ValueError):
            direct_path(3, 1)  # lower than the node
        with self.assertRaises(ValueError):
            copath(8, 3)

    def test_copath_below_the_top_of_range(self):
        leaf = 6
        top = (1 << 63) - 1  # depth 63, the largest subtree with a sibling
        self.assertEqual(len(copath(leaf, top)), len(direct_path(leaf, top)))
        self.assertEqual(direct_path(leaf, UINT64_MAX)[-1], UINT64_MAX)
        self.assertEqual(len(direct_path(leaf, UINT64_MAX)), 64)
        # the depth-63 child of the top node has no representable sibling
        with self.assertRaises(IndexOverflowError):
            copath(leaf, UINT64_MAX)


if __name__ == "__main__":
    unittest.main()
