from .address import block_offset, decode
from .cache import Cache, Counters, Line, Outcome, Set
from .config import CacheConfig
from .errors import ConfigError, CsimError, TraceFormatError
from .replay import replay, simulate
from .trace import MemOp, open_trace, parse_line, read_trace

__all__ = [
    'Cache', 'CacheConfig', 'ConfigError', 'Counters', 'CsimError', 'Line',
    'MemOp', 'Outcome', 'Set', 'TraceFormatError', 'block_offset', 'decode',
    'open_trace', 'parse_line', 'read_trace', 'replay', 'simulate',
]
