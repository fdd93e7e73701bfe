"""Stable ordering of the rows of a conjugacy matrix.

Rows are compared lexicographically by the keys of their symbols over the
whole rotation.  Rows that compare equal stay in increasing offset order,
which is what lets the inverse transform work without a sentinel symbol.

The key must order the symbols totally: two different symbols may not share
a key value.  This is not checked.
"""
import numpy

from .errors import LengthMismatch

METHODS = ("naive", "doubling")

def _identity(symbol):
    return symbol

def symbol_ranks(symbols, key=None):
    """Dense ranks of `symbols` under `key`, as an int64 array."""
    key = key or _identity
    keys = [key(symbol) for symbol in symbols]
    ranks = numpy.zeros(len(keys), dtype=numpy.int64)
    order = sorted(range(len(keys)), key=keys.__getitem__)
    rank = 0
    for prev, i in zip(order, order[1:]):
        if keys[prev] < keys[i]:
            rank += 1
        ranks[i] = rank
    return ranks

def compare_rows(a, b, key=None):
    key = key or _identity
    for x, y in zip(a, b):
        kx = key(x)
        ky = key(y)
        if kx < ky:
            return -1
        if ky < kx:
            return 1
    return (len(a) > len(b)) - (len(a) < len(b))

def __naive_sort(matrix, key):
    length = len(matrix)
    rows = [matrix[k] for k in range(length)]
    perm = list(range(length))
    # one stable pass per column, last column first
    for i in range(length - 1, -1, -1):
        perm.sort(key=lambda k: key(rows[k][i]))
    return perm

def __doubling_sort(ranks):
    length = len(ranks)
    span = 1
    while span < length:
        shifted = numpy.roll(ranks, -span)
        order = numpy.lexsort((shifted, ranks))
        first = ranks[order]
        second = shifted[order]
        boundary = numpy.zeros(length, dtype=numpy.int64)
        boundary[1:] = (first[1:] != first[:-1]) | (second[1:] != second[:-1])
        ranks = numpy.empty(length, dtype=numpy.int64)
        ranks[order] = numpy.cumsum(boundary)
        if ranks[order[-1]] == length - 1:
            break
        span *= 2
    # equal rotations keep offset order
    return numpy.argsort(ranks, kind="stable").tolist()

def sort(matrix, key=None, method="naive"):
    """Return the sorted permutation: perm[row] is the offset of that row."""
    if method not in METHODS:
        raise ValueError("unknown sort method: {!r}".format(method))
    if len(matrix) == 0:
        return []
    if method == "naive":
        return __naive_sort(matrix, key or _identity)
    return __doubling_sort(symbol_ranks(matrix[0], key))

def is_sorted(matrix, perm, key=None):
    length = len(matrix)
    if len(perm) != length:
        raise LengthMismatch("permutation", length, len(perm))
    if sorted(perm) != list(range(length)):
        return False
    for p, q in zip(perm, perm[1:]):
        order = compare_rows(matrix[p], matrix[q], key)
        if 0 < order or (order == 0 and q < p):
            return False
    return True
