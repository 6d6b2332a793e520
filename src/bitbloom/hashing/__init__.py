from bitbloom.hashing.fnv import FNV_OFFSET_BASIS, FNV_PRIME, mix, mix_many
from bitbloom.hashing.selector import (
    combined_mask,
    position_mask,
    select_positions,
    select_positions_many,
    word_address,
)

__all__ = [
    "FNV_OFFSET_BASIS",
    "FNV_PRIME",
    "combined_mask",
    "mix",
    "mix_many",
    "position_mask",
    "select_positions",
    "select_positions_many",
    "word_address",
]
