"""Bloom filter of arbitrary length backed by 64-bit words."""

import logging
import numbers
from typing import Iterable, Tuple

import numpy as np

from bitbloom.config import LAYOUT
from bitbloom.errors import FilterSizeMismatchError, InvalidBitCountError
from bitbloom.filters.rate import estimate_false_positive_rate
from bitbloom.hashing.fnv import mix, mix_many
from bitbloom.hashing.selector import (
    select_positions,
    select_positions_many,
    word_address,
)

logger = logging.getLogger(__name__)


class BloomFilter:
    """
    Immutable Bloom filter over ``ceil(bit_count / 64)`` unsigned 64-bit words.

    Positions come from the same byte windows as the fixed-width filters,
    reduced modulo the allocated bit count, so a one-word filter has exactly
    the layout of a ``Bloom64``. Windows are 8 bits wide: bits at index 256
    and above are allocated but never set.
    """

    __slots__ = ("_words",)

    def __init__(self, bit_count: int) -> None:
        if (
            isinstance(bit_count, bool)
            or not isinstance(bit_count, numbers.Integral)
            or bit_count <= 0
        ):
            raise InvalidBitCountError(bit_count)
        word_count = LAYOUT.words_for(int(bit_count))
        words = np.zeros(word_count, dtype=np.uint64)
        words.flags.writeable = False
        self._words = words
        allocated = word_count * LAYOUT.word_bits
        logger.debug(
            "BloomFilter: requested %d bits, allocated %d words (%d bits)",
            bit_count,
            word_count,
            allocated,
        )
        if allocated > LAYOUT.reachable_bits:
            logger.warning(
                "BloomFilter: only the first %d of %d bits are reachable",
                LAYOUT.reachable_bits,
                allocated,
            )

    @classmethod
    def _wrap(cls, words: np.ndarray) -> "BloomFilter":
        words.flags.writeable = False
        instance = cls.__new__(cls)
        instance._words = words
        return instance

    @classmethod
    def from_keys(cls, bit_count: int, keys: Iterable[int]) -> "BloomFilter":
        return cls(bit_count).add_many(keys)

    @property
    def word_count(self) -> int:
        return len(self._words)

    @property
    def bit_count(self) -> int:
        return LAYOUT.word_bits * len(self._words)

    @property
    def words(self) -> np.ndarray:
        return self._words

    def _addresses(self, key: int) -> Tuple[Tuple[int, int], ...]:
        return tuple(
            word_address(pos)
            for pos in select_positions(mix(key), self.bit_count)
        )

    def _check_compatible(self, other: "BloomFilter") -> None:
        if not isinstance(other, BloomFilter):
            raise TypeError(
                f"cannot combine BloomFilter with {type(other).__name__}"
            )
        if len(other._words) != len(self._words):
            raise FilterSizeMismatchError(len(self._words), len(other._words))

    def add(self, key: int) -> "BloomFilter":
        words = self._words.copy()
        for index, offset in self._addresses(key):
            words[index] |= np.uint64(1) << np.uint64(offset)
        return self._wrap(words)

    def add_many(self, keys: Iterable[int]) -> "BloomFilter":
        positions = select_positions_many(
            mix_many(keys), self.bit_count
        ).ravel()
        word_bits = np.uint64(LAYOUT.word_bits)
        words = self._words.copy()
        np.bitwise_or.at(
            words,
            (positions // word_bits).astype(np.intp),
            np.left_shift(np.uint64(1), positions % word_bits),
        )
        return self._wrap(words)

    def _bit_states(self, key: int):
        return (
            (int(self._words[index]) >> offset) & 1
            for index, offset in self._addresses(key)
        )

    def contains(self, key: int) -> bool:
        """True if ``key`` may be in the set, False if it definitely is not."""
        return all(self._bit_states(key))

    def contains_any(self, key: int) -> bool:
        """Legacy membership test that accepts a key when any of its bits is set."""
        return any(self._bit_states(key))

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def union(self, other: "BloomFilter") -> "BloomFilter":
        self._check_compatible(other)
        return self._wrap(np.bitwise_or(self._words, other._words))

    def intersect(self, other: "BloomFilter") -> "BloomFilter":
        self._check_compatible(other)
        return self._wrap(np.bitwise_and(self._words, other._words))

    def symmetric_difference(self, other: "BloomFilter") -> "BloomFilter":
        self._check_compatible(other)
        return self._wrap(np.bitwise_xor(self._words, other._words))

    def __or__(self, other):
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return self.intersect(other)

    def __xor__(self, other):
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return self.symmetric_difference(other)

    def false_positive_rate(self, count: int) -> float:
        return estimate_false_positive_rate(self.bit_count, count)

    def popcount(self) -> int:
        return int(np.unpackbits(self._words.view(np.uint8)).sum())

    def is_empty(self) -> bool:
        return not self._words.any()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return bool(np.array_equal(self._words, other._words))

    def __hash__(self) -> int:
        folded = int(np.bitwise_xor.reduce(self._words))
        return (folded >> 32) | (folded & 0xFFFFFFFF)

    def __repr__(self) -> str:
        return (
            f"BloomFilter(bit_count={self.bit_count}, "
            f"popcount={self.popcount()})"
        )
