from bitbloom.filters.bloom32 import Bloom32
from bitbloom.filters.bloom64 import Bloom64
from bitbloom.filters.fixed import FixedWidthBloom
from bitbloom.filters.rate import estimate_false_positive_rate
from bitbloom.filters.variable import BloomFilter

__all__ = [
    "Bloom32",
    "Bloom64",
    "BloomFilter",
    "FixedWidthBloom",
    "estimate_false_positive_rate",
]
