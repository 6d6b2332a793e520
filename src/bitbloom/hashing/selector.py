"""Derive bit positions from a mixed hash by slicing it into byte windows."""

from typing import Tuple

import numpy as np

from bitbloom.config import LAYOUT

WINDOW_SHIFTS = tuple(
    range(0, LAYOUT.hash_bits, LAYOUT.window_bits)
)[: LAYOUT.positions_per_key]


def select_positions(mixed: int, bit_width: int) -> Tuple[int, ...]:
    """
    Return the 4 bit positions for a mixed hash in a vector of ``bit_width``.

    Each 8-bit window of ``mixed`` is reduced modulo ``bit_width``. Positions
    may repeat. For power-of-two widths up to 256 this is the same as masking
    each window with ``bit_width - 1``.
    """
    window = LAYOUT.window_mask
    return tuple(
        ((mixed >> shift) & window) % bit_width for shift in WINDOW_SHIFTS
    )


def position_mask(mixed: int, bit_width: int) -> int:
    mask = 0
    for pos in select_positions(mixed, bit_width):
        mask |= 1 << pos
    return mask


def word_address(position: int) -> Tuple[int, int]:
    """Split a bit position into ``(word_index, bit_offset)``."""
    return divmod(position, LAYOUT.word_bits)


def select_positions_many(mixed: np.ndarray, bit_width: int) -> np.ndarray:
    """Vectorized :func:`select_positions`; returns a ``(n, 4)`` uint64 array."""
    mixed = np.asarray(mixed, dtype=np.uint64).reshape(-1)
    shifts = np.array(WINDOW_SHIFTS, dtype=np.uint64)
    windows = (mixed[:, None] >> shifts) & np.uint64(LAYOUT.window_mask)
    return windows % np.uint64(bit_width)


def combined_mask(mixed: np.ndarray, bit_width: int) -> int:
    """OR of the position masks of every hash in ``mixed``.

    Only valid for ``bit_width <= 64``.
    """
    positions = select_positions_many(mixed, bit_width)
    bits = np.left_shift(np.uint64(1), positions)
    return int(np.bitwise_or.reduce(bits, axis=None))
