from collections import namedtuple

from .errors import ConfigError

ADDRESS_BITS = 64
# Every set is allocated up front.
MAX_SET_BITS = 20


class CacheConfig(namedtuple('CacheConfig', 'set_bits associativity block_bits')):
    __slots__ = ()

    @classmethod
    def create(cls, set_bits, associativity, block_bits):
        for name, value in (('set_bits', set_bits),
                            ('associativity', associativity),
                            ('block_bits', block_bits)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(
                    '{} must be an integer, got {!r}'.format(name, value))
        if set_bits < 0:
            raise ConfigError('set_bits must be non-negative: {}'.format(set_bits))
        if block_bits < 0:
            raise ConfigError(
                'block_bits must be non-negative: {}'.format(block_bits))
        if associativity < 1:
            raise ConfigError(
                'associativity must be at least 1: {}'.format(associativity))
        if set_bits > MAX_SET_BITS:
            raise ConfigError('set_bits above {} would allocate too many sets: {}'.format(
                MAX_SET_BITS, set_bits))
        # Decomposition is only defined within the address width.
        if set_bits + block_bits > ADDRESS_BITS:
            raise ConfigError('set_bits + block_bits exceeds the {}-bit address width: {}'.format(
                ADDRESS_BITS, set_bits + block_bits))
        return cls(set_bits, associativity, block_bits)

    @property
    def num_sets(self):
        return 1 << self.set_bits

    @property
    def block_size(self):
        return 1 << self.block_bits
