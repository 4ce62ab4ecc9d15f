import logging
from itertools import count

from .address import decode
from .cache import Cache, Counters
from .errors import TraceFormatError

LOGGER = logging.getLogger(__name__)

ACCESSES_PER_OP = {'I': 0, 'L': 1, 'S': 1, 'M': 2}


def replay(cache, events, block_bits, counters=None, listener=None):
    """Run every data access in ``events`` through ``cache``.

    Loads and stores access the cache once, modifies twice (a load then a
    store to the same address), instruction fetches not at all. Each access
    gets the next stamp from a counter starting at 1. ``counters`` is updated
    in place, so it holds everything replayed so far even if ``events``
    raises part way through.
    """
    if counters is None:
        counters = Counters()
    timestamps = count(1)
    for event in events:
        try:
            accesses = ACCESSES_PER_OP[event.op_type]
        except KeyError:
            raise TraceFormatError(
                'Not supported cache operation: {}!'.format(event.op_type)) from None
        if not accesses:
            continue
        set_index, tag = decode(event.address, block_bits, cache.set_bits)
        outcomes = tuple(
            cache.access(set_index, tag, next(timestamps), counters)
            for _ in range(accesses))
        if listener is not None:
            listener(event, outcomes)
    return counters


def simulate(config, events, counters=None, listener=None):
    cache = Cache.from_config(config)
    if LOGGER.isEnabledFor(logging.DEBUG):
        for row in cache.dump():
            LOGGER.debug(row)
    counters = replay(cache, events, config.block_bits, counters, listener)
    LOGGER.info('replay finished: %s', counters)
    return counters


def describe(outcomes):
    return ' '.join(outcome.value for outcome in outcomes)


def format_event(event, outcomes):
    return '{} {:x},{} {}'.format(
        event.op_type, event.address, event.word_size, describe(outcomes))
