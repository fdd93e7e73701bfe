import random
import unittest

import numpy

from blocksortkit import rotation, sorter
from blocksortkit.errors import LengthMismatch

def descending(symbol):
    return -ord(symbol)

class TestSorter(unittest.TestCase):
    def test_banana(self):
        matrix = rotation.build("banana")
        for method in sorter.METHODS:
            self.assertEqual(sorter.sort(matrix, method=method), [5,3,1,0,4,2])

    def test_identical_rows_keep_offset_order(self):
        for method in sorter.METHODS:
            self.assertEqual(sorter.sort(rotation.build("aaaa"), method=method), [0,1,2,3])
            self.assertEqual(sorter.sort(rotation.build("abab"), method=method), [0,2,1,3])

    def test_custom_key(self):
        matrix = rotation.build("banana")
        for method in sorter.METHODS:
            perm = sorter.sort(matrix, key=descending, method=method)
            self.assertEqual(perm, [2,4,0,1,3,5])
            self.assertTrue(sorter.is_sorted(matrix, perm, key=descending))

    def test_doubling_matches_naive(self):
        rng = random.Random(1234)
        for _ in range(200):
            length = rng.randrange(0, 40)
            alphabet = rng.choice(["ab", "abc", "xyz01"])
            data = "".join(rng.choice(alphabet) for _ in range(length))
            matrix = rotation.build(data)
            naive = sorter.sort(matrix, method="naive")
            self.assertEqual(sorter.sort(matrix, method="doubling"), naive, data)
            self.assertTrue(sorter.is_sorted(matrix, naive))

    def test_periodic_input(self):
        data = "abc" * 5
        matrix = rotation.build(data)
        expected = [0,3,6,9,12, 1,4,7,10,13, 2,5,8,11,14]
        for method in sorter.METHODS:
            self.assertEqual(sorter.sort(matrix, method=method), expected)

    def test_empty_and_single(self):
        for method in sorter.METHODS:
            self.assertEqual(sorter.sort(rotation.build(""), method=method), [])
            self.assertEqual(sorter.sort(rotation.build("q"), method=method), [0])

    def test_unknown_method(self):
        with self.assertRaises(ValueError):
            sorter.sort(rotation.build("abc"), method="quick")

    def test_is_sorted(self):
        self.assertFalse(sorter.is_sorted(rotation.build("banana"), [0,1,2,3,4,5]))
        self.assertFalse(sorter.is_sorted(rotation.build("aaaa"), [1,0,2,3]))
        self.assertFalse(sorter.is_sorted(rotation.build("abc"), [0,0,1]))
        with self.assertRaises(LengthMismatch):
            sorter.is_sorted(rotation.build("abc"), [0,1])

    def test_compare_rows(self):
        self.assertEqual(sorter.compare_rows("ab", "ac"), -1)
        self.assertEqual(sorter.compare_rows("ac", "ab"), 1)
        self.assertEqual(sorter.compare_rows("ab", "ab"), 0)
        self.assertEqual(sorter.compare_rows("ab", "abc"), -1)
        self.assertEqual(sorter.compare_rows("ab", "ac", key=descending), 1)

    def test_symbol_ranks(self):
        ranks = sorter.symbol_ranks("banana")
        numpy.testing.assert_array_equal(ranks, [1,0,2,0,2,0])
        ranks = sorter.symbol_ranks("banana", key=descending)
        numpy.testing.assert_array_equal(ranks, [1,2,0,2,0,2])
        ranks = sorter.symbol_ranks([[1], [0], [1], [2]])
        numpy.testing.assert_array_equal(ranks, [1,0,1,2])

if __name__ == "__main__":
    unittest.main()
