def decode(address, block_bits, set_bits):
    """Split an address into (set_index, tag).

    The block offset occupies the low ``block_bits`` bits and never affects
    whether an access hits, so it is dropped here.
    """
    set_index = (address >> block_bits) & ((1 << set_bits) - 1)
    tag = address >> (block_bits + set_bits)
    return set_index, tag


def block_offset(address, block_bits):
    return address & ((1 << block_bits) - 1)
