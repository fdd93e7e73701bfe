"""Byte layout for transformed data.

A single block is ``[u32 primary index][last column]``.  A block stream is
``[u32 block count]`` followed by ``[u32 block length][block]`` for every
block.  All integers are little-endian.
"""
import logging

import numpy

from . import blocksort
from .errors import FormatError

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 64 * 1024
DEFAULT_METHOD = "doubling"

_U32 = numpy.dtype("<u4")
_U32_MAX = 0xffffffff

def __serialize_u32(value):
    if value < 0 or _U32_MAX < value:
        raise FormatError("{:d} does not fit in a 4-byte header".format(value))
    return numpy.array([value], dtype=_U32).view(numpy.uint8)

def __deserialize_u32(byte_array, offset):
    if len(byte_array) < offset + 4:
        raise FormatError("truncated header at byte {:d}".format(offset))
    return int(numpy.frombuffer(byte_array, dtype=_U32, count=1, offset=offset)[0])

def pack(encoded, index):
    payload = numpy.frombuffer(bytes(encoded), dtype=numpy.uint8)
    return (numpy.r_[__serialize_u32(index), payload]).astype(numpy.uint8).tobytes()

def unpack(byte_array):
    byte_array = bytes(byte_array)
    index = __deserialize_u32(byte_array, 0)
    return byte_array[4:], index

def encode_blocks(data, block_size=DEFAULT_BLOCK_SIZE, method=DEFAULT_METHOD):
    """Transform `data` block by block into a block stream."""
    if block_size < 1:
        raise ValueError("block size must be positive, got {!r}".format(block_size))
    data = bytes(data)
    chunks = []
    for offset in range(0, len(data), block_size):
        block = data[offset:offset + block_size]
        encoded, index = blocksort.encode(block, method=method)
        packed = pack(encoded, index)
        logger.debug("block at %d: %d bytes, primary index %d", offset, len(block), index)
        chunks.append(__serialize_u32(len(packed)))
        chunks.append(numpy.frombuffer(packed, dtype=numpy.uint8))
    header = __serialize_u32(len(chunks) // 2)
    return numpy.concatenate([header] + chunks).astype(numpy.uint8).tobytes()

def decode_blocks(byte_array):
    byte_array = bytes(byte_array)
    num_blocks = __deserialize_u32(byte_array, 0)
    offset = 4
    decoded = []
    for i in range(num_blocks):
        size = __deserialize_u32(byte_array, offset)
        offset += 4
        if len(byte_array) < offset + size:
            raise FormatError("block {:d} is truncated: {:d} of {:d} bytes".format(
                i, len(byte_array) - offset, size))
        encoded, index = unpack(byte_array[offset:offset + size])
        offset += size
        decoded.append(blocksort.decode(encoded, index))
        logger.debug("block %d: %d bytes restored", i, len(encoded))
    if offset != len(byte_array):
        raise FormatError("{:d} trailing bytes after the last block".format(
            len(byte_array) - offset))
    return b"".join(decoded)
