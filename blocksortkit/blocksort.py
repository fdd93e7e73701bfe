import operator

import numpy

from . import column, rotation, sorter
from .errors import InvalidIndex

def __like(template, symbols):
    # give the symbols back in the same kind of container as the input
    if isinstance(template, str):
        return "".join(symbols)
    if isinstance(template, bytes):
        return bytes(symbols)
    if isinstance(template, bytearray):
        return bytearray(symbols)
    if isinstance(template, numpy.ndarray):
        return numpy.array(symbols, dtype=template.dtype)
    if isinstance(template, tuple):
        return tuple(symbols)
    return list(symbols)

def __argsort(array):
    if isinstance(array, (bytes, bytearray)):
        values = numpy.frombuffer(bytes(array), dtype=numpy.uint8)
    else:
        values = array
    return numpy.argsort(values, kind="stable")

def __sorting_lf(array, key):
    # unhashable symbols: invert a stable sort of the positions
    key = key or (lambda symbol: symbol)
    order = sorted(range(len(array)), key=lambda i: key(array[i]))
    lf = [0] * len(order)
    for rank, i in enumerate(order):
        lf[i] = rank
    return lf

def __counting_lf(array, key):
    counts = {}
    for symbol in array:
        counts[symbol] = counts.get(symbol, 0) + 1
    starts = {}
    total = 0
    for symbol in sorted(counts, key=key):
        starts[symbol] = total
        total += counts[symbol]
    lf = []
    for symbol in array:
        lf.append(starts[symbol])
        starts[symbol] += 1
    return lf

def first_column(array, key=None):
    """First column of the sorted matrix: the symbols of `array` stably sorted."""
    return sorted(array, key=key)

def lf_mapping(array, key=None):
    """Last-to-first mapping of a transform output.

    The j-th occurrence of a symbol in `array` maps to the j-th occurrence
    of the same symbol in the first column.
    """
    numeric = isinstance(array, (bytes, bytearray)) or (
        isinstance(array, numpy.ndarray) and array.dtype.kind in "bui")
    if key is None and numeric:
        order = __argsort(array)
        lf = numpy.empty(len(order), dtype=numpy.int64)
        lf[order] = numpy.arange(len(order))
        return lf.tolist()
    try:
        return __counting_lf(array, key)
    except TypeError:
        return __sorting_lf(array, key)

def encode(array, key=None, method="naive"):
    """Burrows-Wheeler transform of `array`.

    Returns (encoded, index): the last column of the sorted rotations and
    the row holding the unrotated input.  Both are needed by decode().

    `encoded` is a str, bytes, bytearray, tuple or numpy array (same dtype)
    when `array` is one of those (a subclass gives its base type); any other sequence
    comes back as a list.
    """
    matrix = rotation.build(array)
    perm = sorter.sort(matrix, key, method)
    encoded = column.extract_last(matrix, perm)
    index = perm.index(0) if perm else 0
    return __like(array, encoded), index

def decode(array, index, key=None):
    length = len(array)
    if length == 0:
        return __like(array, [])
    if isinstance(index, bool):
        raise InvalidIndex(index, length)
    try:
        i = operator.index(index)
    except TypeError:
        raise InvalidIndex(index, length) from None
    if i < 0 or length <= i:
        raise InvalidIndex(index, length)

    lf = lf_mapping(array, key)
    decoded = [None] * length
    # walk backwards: the row ending in s[k] is preceded by the row lf[i]
    for k in range(length - 1, -1, -1):
        decoded[k] = array[i]
        i = lf[i]
    return __like(array, decoded)

if __name__ == "__main__":
    for data in ["banana", "Hello World!", [4,2,3,3,4,2,1,5]]:
        encoded, index = encode(data)
        decoded = decode(encoded, index)
        print(data)
        print(encoded, index)
        print(decoded)
