"""FNV-1a mixing for 32-bit integer keys."""

import operator
from typing import Iterable

import numpy as np

from bitbloom.config import LAYOUT

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

_BYTE_SHIFTS = (0, 8, 16, 24)


def mix(key: int) -> int:
    """
    Hash an integer key to an unsigned 32-bit value.

    The key is reduced to its low 32 bits (two's complement), so ``-1`` and
    ``0xFFFFFFFF`` hash identically. Bytes are fed least-significant first.
    """
    # Raw keys are mostly small numbers; used directly they would only ever
    # land in the low-order bits of a filter.
    x = operator.index(key) & LAYOUT.hash_mask
    h = FNV_OFFSET_BASIS
    for shift in _BYTE_SHIFTS:
        h = ((h ^ ((x >> shift) & 0xFF)) * FNV_PRIME) & LAYOUT.hash_mask
    return h


def _as_uint32(keys: Iterable[int]) -> np.ndarray:
    if isinstance(keys, np.ndarray) and keys.dtype.kind in "iu":
        # Integer casts to an unsigned type wrap modulo 2**32.
        return keys.ravel().astype(np.uint32)
    return np.fromiter(
        (operator.index(k) & LAYOUT.hash_mask for k in keys), dtype=np.uint32
    )


def mix_many(keys: Iterable[int]) -> np.ndarray:
    x = _as_uint32(keys)
    h = np.full(x.shape, FNV_OFFSET_BASIS, dtype=np.uint32)
    prime = np.uint32(FNV_PRIME)
    byte = np.uint32(0xFF)
    for shift in _BYTE_SHIFTS:
        h ^= (x >> np.uint32(shift)) & byte
        h *= prime
    return h
