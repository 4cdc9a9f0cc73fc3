import unittest

from union_tree.exceptions import IndexOutOfRangeError, InvalidCountError, MalformedPathError
from union_tree.path import (
    Node,
    Side,
    build_path,
    depth,
    enumerate_paths,
    is_prefix_code,
    leaf_paths,
    parse_path,
    path_to_index,
    render_path,
    tree_shape,
)

L = Side.LEFT
R = Side.RIGHT


class TestAlgorithmicPath(unittest.TestCase):
    def test_known_paths(self):
        cases = [
            (1, 0, ()),
            (2, 0, (L,)),
            (2, 1, (R,)),
            (3, 0, (L, L)),
            (3, 1, (L, R)),
            (3, 2, (R,)),
            (5, 0, (L, L, L)),
            (5, 4, (R,)),
        ]
        for count, n, want in cases:
            with self.subTest(count=count, n=n):
                self.assertEqual(build_path(count, n), want)

    def test_power_of_two_counts_are_symmetric(self):
        for k in range(1, 8):
            count = 2**k
            for n in range(count):
                path = build_path(count, n)
                self.assertEqual(len(path), k)
                # Reading the path as binary digits gives the index.
                self.assertEqual(int("".join(str(int(s)) for s in path), 2), n)

    def test_path_lengths_bounded_by_depth(self):
        for count in range(2, 300):
            lengths = [len(p) for p in enumerate_paths(count)]
            self.assertEqual(lengths[0], depth(count))
            self.assertEqual(max(lengths), depth(count))
            self.assertGreaterEqual(min(lengths), 1)
        self.assertEqual(depth(1), 0)
        self.assertEqual(build_path(1, 0), ())

    def test_paths_form_prefix_code(self):
        for count in range(1, 300):
            paths = enumerate_paths(count)
            self.assertEqual(len(set(paths)), count)
            self.assertTrue(is_prefix_code(paths), count)

    def test_shape_consistent_across_indices(self):
        for count in range(1, 200):
            expected = leaf_paths(tree_shape(count))
            self.assertEqual(expected, dict(enumerate(enumerate_paths(count))))
            # A second enumeration induces the same tree.
            self.assertEqual(enumerate_paths(count), enumerate_paths(count))

    def test_left_subtree_is_perfect(self):
        shape = tree_shape(11)
        self.assertIsInstance(shape, Node)
        self.assertEqual(sorted(leaf_paths(shape.left)), list(range(8)))
        self.assertTrue(all(len(p) == 3 for p in leaf_paths(shape.left).values()))
        self.assertEqual(sorted(leaf_paths(shape.right)), [8, 9, 10])

    def test_deterministic(self):
        self.assertEqual(build_path(1_000_003, 777_777), build_path(1_000_003, 777_777))
        first = build_path(12345, 6789)
        self.assertEqual(build_path(12345, 6789), first)
        self.assertFalse(hasattr(build_path, "cache_info"))

    def test_large_counts(self):
        count = 2**70 + 3
        self.assertEqual(len(build_path(count, 0)), 71)
        self.assertEqual(build_path(count, count - 1), (R, R))
        self.assertEqual(path_to_index(count, build_path(count, 2**69 + 5)), 2**69 + 5)

    def test_path_to_index_inverts_build_path(self):
        for count in range(1, 100):
            for n in range(count):
                self.assertEqual(path_to_index(count, build_path(count, n)), n)

    def test_path_to_index_rejects_non_leaves(self):
        with self.assertRaises(IndexOutOfRangeError):
            path_to_index(3, (R, L))
        with self.assertRaises(IndexOutOfRangeError):
            path_to_index(3, (L,))
        with self.assertRaises(IndexOutOfRangeError):
            path_to_index(1, (L,))
        with self.assertRaises(InvalidCountError):
            path_to_index(0, ())

    def test_errors(self):
        with self.assertRaises(InvalidCountError):
            build_path(0, 0)
        with self.assertRaises(IndexOutOfRangeError):
            build_path(5, 5)
        with self.assertRaises(IndexOutOfRangeError):
            build_path(5, 9)
        with self.assertRaises(IndexOutOfRangeError):
            build_path(3, -1)
        with self.assertRaises(IndexOutOfRangeError) as ctx:
            build_path(1, 1)
        self.assertIn("not in [0, 1)", str(ctx.exception))

    def test_render_and_parse(self):
        self.assertEqual(render_path((L, R, R)), "LRR")
        self.assertEqual(render_path(()), "")
        self.assertEqual(parse_path("lrr"), (L, R, R))
        self.assertEqual(parse_path("-"), ())
        with self.assertRaises(MalformedPathError):
            parse_path("LX")

    def test_plain_int_sides(self):
        self.assertEqual(path_to_index(3, (0, 0)), 0)
        self.assertEqual(path_to_index(3, (0, 1)), 1)
        self.assertEqual(path_to_index(3, (1,)), 2)
        self.assertEqual(path_to_index(5, [0, 1, 1]), 3)
        self.assertEqual(render_path((0, 1)), "LR")
        self.assertEqual(Side.coerce(0), L)
        self.assertIs(Side.coerce(R), R)

    def test_invalid_sides_rejected(self):
        for bad in ("L", 2, -1, None):
            with self.subTest(side=bad):
                with self.assertRaises(MalformedPathError):
                    path_to_index(3, (bad, 0))
                with self.assertRaises(MalformedPathError):
                    render_path((bad,))


if __name__ == "__main__":
    unittest.main()
