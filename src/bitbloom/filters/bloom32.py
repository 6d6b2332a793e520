from bitbloom.filters.fixed import FixedWidthBloom


class Bloom32(FixedWidthBloom):
    """
    A 32-bit Bloom filter.

    Instead of deriving a size from a target false positive rate, the filter
    has a fixed length and assumes the caller has already bounded the error
    rate for the data it expects to see.
    """

    WIDTH = 32
