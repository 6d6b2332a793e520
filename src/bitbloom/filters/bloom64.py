from bitbloom.filters.fixed import FixedWidthBloom


class Bloom64(FixedWidthBloom):
    """
    A 64-bit Bloom filter.

    Bit positions are selected over the whole 64-bit word, so filters built
    here are not bit-compatible with ones that only ever set the low 32 bits.
    """

    WIDTH = 64
