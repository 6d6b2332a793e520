"""Fixed-size Bloom filters for integer keys."""

import logging

from bitbloom.config import LAYOUT, BloomLayout
from bitbloom.errors import (
    BloomError,
    FilterSizeMismatchError,
    InvalidBitCountError,
)
from bitbloom.filters import (
    Bloom32,
    Bloom64,
    BloomFilter,
    FixedWidthBloom,
    estimate_false_positive_rate,
)
from bitbloom.hashing import (
    mix,
    mix_many,
    position_mask,
    select_positions,
    word_address,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "LAYOUT",
    "Bloom32",
    "Bloom64",
    "BloomError",
    "BloomFilter",
    "BloomLayout",
    "FilterSizeMismatchError",
    "FixedWidthBloom",
    "InvalidBitCountError",
    "estimate_false_positive_rate",
    "mix",
    "mix_many",
    "position_mask",
    "select_positions",
    "word_address",
]
