from .errors import LengthMismatch

def __check(matrix, perm):
    if len(perm) != len(matrix):
        raise LengthMismatch("permutation", len(matrix), len(perm))

def extract_column(matrix, perm, column):
    __check(matrix, perm)
    return [matrix[k][column] for k in perm]

def extract_last(matrix, perm):
    return extract_column(matrix, perm, -1)

def extract_first(matrix, perm):
    return extract_column(matrix, perm, 0)
