import argparse
import logging
import sys

from . import container, sorter
from .errors import BlocksortError

logger = logging.getLogger("blocksortkit")

def _read(path):
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as bin_file:
        return bin_file.read()

def _write(path, data):
    if path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as bin_file:
        bin_file.write(data)

def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be positive: {!r}".format(text))
    return value

def make_parser():
    parser = argparse.ArgumentParser(
        prog="blocksortkit",
        description="Burrows-Wheeler transform of a file, and its inverse.")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-c", "--encode", action="store_true",
                      help="transform the input into a block stream")
    mode.add_argument("-d", "--decode", action="store_true",
                      help="restore the original data from a block stream")
    parser.add_argument("-i", "--input", default="-", help="input path, - for stdin")
    parser.add_argument("-o", "--output", default="-", help="output path, - for stdout")
    parser.add_argument("--block-size", type=_positive_int, default=container.DEFAULT_BLOCK_SIZE)
    parser.add_argument("--method", choices=sorter.METHODS, default=container.DEFAULT_METHOD,
                        help="rotation sort used when encoding")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser

def main(argv=None):
    args = make_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s")
    try:
        data = _read(args.input)
        if args.encode:
            result = container.encode_blocks(data, args.block_size, args.method)
        else:
            result = container.decode_blocks(data)
        _write(args.output, result)
    except (BlocksortError, OSError) as e:
        logger.error("%s", e)
        return 1
    logger.debug("%d bytes in, %d bytes out", len(data), len(result))
    return 0

if __name__ == "__main__":
    sys.exit(main())
