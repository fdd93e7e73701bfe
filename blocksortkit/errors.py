class BlocksortError(ValueError):
    pass

class InvalidIndex(BlocksortError, IndexError):
    """primary index outside [0, n) on decode"""
    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(
            "primary index {!r} is out of range for length {:d}".format(index, length))

class LengthMismatch(BlocksortError):
    def __init__(self, name, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            "{:s} has length {:d}, expected {:d}".format(name, actual, expected))

class FormatError(BlocksortError):
    pass
