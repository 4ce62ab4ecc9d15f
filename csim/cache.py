import enum
import logging

LOGGER = logging.getLogger(__name__)


class Outcome(enum.Enum):
    HIT = 'hit'
    MISS_FILL = 'miss'
    MISS_EVICT = 'miss eviction'


class Counters:
    def __init__(self, hits=0, misses=0, evictions=0):
        self.hits = hits
        self.misses = misses
        self.evictions = evictions

    def as_tuple(self):
        return self.hits, self.misses, self.evictions

    def __eq__(self, other):
        if not isinstance(other, Counters):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return 'Counters(hits={}, misses={}, evictions={})'.format(*self.as_tuple())

    def __str__(self):
        return 'hits:{} misses:{} evictions:{}'.format(*self.as_tuple())


class Line:
    def __init__(self, valid=False, tag=None, time=0):
        self.valid = valid
        self.tag = tag
        self.time = time


class Set:
    def __init__(self, lines):
        self.lines = tuple(lines)

    def find(self, tag):
        for line in self.lines:
            if line.valid and line.tag == tag:
                return line
        return None

    def free_line(self):
        for line in self.lines:
            if not line.valid:
                return line
        return None

    def lru_line(self):
        # Strict less-than keeps the lowest index on equal stamps.
        result = self.lines[0]
        for line in self.lines:
            if line.time < result.time:
                result = line
        return result


class Cache:
    """Set-associative cache of ``2 ** set_bits`` sets, each holding
    ``associativity`` lines, with least-recently-used replacement.

    Only tags and recency stamps are tracked; there is no block data.
    """

    def __init__(self, set_bits, associativity):
        self.set_bits = set_bits
        self.associativity = associativity
        sets = []
        for _ in range(1 << set_bits):
            sets.append(Set(Line() for _ in range(associativity)))
        self.sets = tuple(sets)
        LOGGER.debug('built cache with %d sets of %d lines',
                     len(self.sets), associativity)

    @classmethod
    def from_config(cls, config):
        return cls(config.set_bits, config.associativity)

    def access(self, set_index, tag, timestamp, counters: Counters) -> Outcome:
        """Look up ``tag`` in set ``set_index`` and update it.

        A hit refreshes the matching line's stamp. A miss fills the first
        invalid line by index, or, when the set is full, evicts the line with
        the oldest stamp. Exactly one line and one of ``counters.hits`` /
        ``counters.misses`` change; ``counters.evictions`` also grows on an
        eviction.
        """
        cache_set = self.sets[set_index]
        line = cache_set.find(tag)
        if line is not None:
            counters.hits += 1
            line.time = timestamp
            return Outcome.HIT

        counters.misses += 1
        line = cache_set.free_line()
        if line is not None:
            outcome = Outcome.MISS_FILL
        else:
            counters.evictions += 1
            line = cache_set.lru_line()
            outcome = Outcome.MISS_EVICT
        line.valid = True
        line.tag = tag
        line.time = timestamp
        return outcome

    def valid_lines(self, set_index):
        return sum(1 for line in self.sets[set_index].lines if line.valid)

    def dump(self):
        rows = []
        for i, cache_set in enumerate(self.sets):
            for j, line in enumerate(cache_set.lines):
                rows.append('set: {}; line: {}, valid: {:d}, time: {}'.format(
                    i, j, line.valid, line.time))
        return rows
