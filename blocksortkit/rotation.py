class Rotation:
    """Cyclic view of a sequence shifted left by `offset`.

    rotation[i] == sequence[(i + offset) % n]; nothing is copied.
    """
    __slots__ = ("sequence", "offset")

    def __init__(self, sequence, offset):
        self.sequence = sequence
        self.offset = offset

    def __len__(self):
        return len(self.sequence)

    def __getitem__(self, i):
        length = len(self.sequence)
        if i < -length or length <= i:
            raise IndexError("rotation index out of range")
        return self.sequence[(i + self.offset) % length]

    def __iter__(self):
        for i in range(len(self.sequence)):
            yield self[i]

    def __eq__(self, other):
        try:
            if len(self) != len(other):
                return False
        except TypeError:
            return NotImplemented
        return all(a == b for a, b in zip(self, other))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "Rotation({!r}, {:d})".format(self.sequence, self.offset)

    def tolist(self):
        return list(self)


class ConjugacyMatrix:
    """All cyclic rotations of a sequence, row k being the rotation by k."""
    __slots__ = ("sequence",)

    def __init__(self, sequence):
        self.sequence = sequence

    def __len__(self):
        return len(self.sequence)

    def __getitem__(self, k):
        length = len(self.sequence)
        if k < -length or length <= k:
            raise IndexError("matrix row out of range")
        return Rotation(self.sequence, k % length)

    def __iter__(self):
        for k in range(len(self.sequence)):
            yield Rotation(self.sequence, k)

    def __repr__(self):
        return "ConjugacyMatrix({!r})".format(self.sequence)

    def materialize(self):
        # rotated table: each row is the previous one shifted left by one
        copied = list(self.sequence)
        table = []
        for _ in range(len(copied)):
            table.append(copied.copy())
            copied.append(copied.pop(0))
        return table


def build(sequence):
    return ConjugacyMatrix(sequence)
