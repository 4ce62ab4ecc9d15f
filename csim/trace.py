import logging
import re
from collections import namedtuple
from contextlib import contextmanager

from .config import ADDRESS_BITS
from .errors import TraceFormatError

LOGGER = logging.getLogger(__name__)

OP_TYPES = ('I', 'L', 'S', 'M')

MemOp = namedtuple('MemOp', 'op_type address word_size')

_LINE_RE = re.compile(r'^\s*([A-Z])\s+((?:0[xX])?[0-9a-fA-F]+)\s*,\s*(\d+)\s*$')


def parse_line(line):
    match = _LINE_RE.match(line)
    if match is None:
        raise TraceFormatError('Malformed trace line: {!r}'.format(line), line)
    op_type, address, word_size = match.groups()
    if op_type not in OP_TYPES:
        raise TraceFormatError(
            'Not supported cache operation: {}!'.format(op_type), line)
    address = int(address, 16)
    if address >> ADDRESS_BITS:
        raise TraceFormatError(
            'Address wider than {} bits: {:x}'.format(ADDRESS_BITS, address), line)
    return MemOp(op_type, address, int(word_size))


def read_trace(lines):
    """Yield a MemOp per trace line, stopping at the first malformed one.

    Blank lines are skipped. Whatever was read before a bad line is still
    replayed; the bad line and everything after it are not.
    """
    for number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            mem_op = parse_line(line)
        except TraceFormatError as e:
            LOGGER.warning('Stopped reading trace at line %d: %s', number, e)
            return
        yield mem_op


@contextmanager
def open_trace(file_path):
    # Undecodable bytes become U+FFFD and fail parse_line like any bad line.
    with open(file_path, mode='r', errors='replace') as f:
        yield read_trace(f)
