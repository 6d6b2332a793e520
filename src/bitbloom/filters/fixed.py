"""Bloom filters that fit in a single machine word."""

import operator
from dataclasses import dataclass
from typing import ClassVar, Iterable, Type, TypeVar

from bitbloom.filters.rate import estimate_false_positive_rate
from bitbloom.hashing.fnv import mix, mix_many
from bitbloom.hashing.selector import combined_mask, position_mask

F = TypeVar("F", bound="FixedWidthBloom")


@dataclass(frozen=True)
class FixedWidthBloom:
    """
    Immutable Bloom filter whose bit vector is one ``WIDTH``-bit word.

    Every operation returns a new filter. Each key sets 4 positions taken
    from the bytes of its FNV-1a hash; that count is fixed and does not
    depend on how many keys the caller plans to store.
    """

    bits: int = 0

    WIDTH: ClassVar[int] = 0

    def __post_init__(self) -> None:
        bits = operator.index(self.bits)
        if not 0 <= bits < 1 << self.WIDTH:
            raise ValueError(
                f"{type(self).__name__} bits must fit in {self.WIDTH} "
                f"unsigned bits, got {bits:#x}"
            )
        object.__setattr__(self, "bits", bits)

    @classmethod
    def from_keys(cls: Type[F], keys: Iterable[int]) -> F:
        return cls().add_many(keys)

    @property
    def bit_count(self) -> int:
        return self.WIDTH

    def _mask(self, key: int) -> int:
        return position_mask(mix(key), self.WIDTH)

    def _check_compatible(self, other: "FixedWidthBloom") -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with "
                f"{type(other).__name__}"
            )

    def add(self: F, key: int) -> F:
        return type(self)(self.bits | self._mask(key))

    def add_many(self: F, keys: Iterable[int]) -> F:
        return type(self)(self.bits | combined_mask(mix_many(keys), self.WIDTH))

    def contains(self, key: int) -> bool:
        """True if ``key`` may be in the set, False if it definitely is not."""
        mask = self._mask(key)
        return self.bits & mask == mask

    def contains_any(self, key: int) -> bool:
        """
        Looser membership test: True when any one of the key's bits is set.

        Matches filters built by older code that tested ``bits & mask != 0``.
        It has a much higher false positive rate than :meth:`contains`.
        """
        return self.bits & self._mask(key) != 0

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def union(self: F, other: F) -> F:
        self._check_compatible(other)
        return type(self)(self.bits | other.bits)

    def intersect(self: F, other: F) -> F:
        """Approximate intersection: keys must test positive in both filters."""
        self._check_compatible(other)
        return type(self)(self.bits & other.bits)

    def symmetric_difference(self: F, other: F) -> F:
        # XOR of the vectors. Not a sound approximation of set intersection;
        # kept for parity with filters produced by the legacy operation.
        self._check_compatible(other)
        return type(self)(self.bits ^ other.bits)

    def __or__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.intersect(other)

    def __xor__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.symmetric_difference(other)

    def false_positive_rate(self, count: int) -> float:
        return estimate_false_positive_rate(self.WIDTH, count)

    def popcount(self) -> int:
        return bin(self.bits).count("1")

    def is_empty(self) -> bool:
        return self.bits == 0

    def __hash__(self) -> int:
        # Fold into 32 bits; the high half is zero for 32-bit filters.
        return (self.bits >> 32) | (self.bits & 0xFFFFFFFF)

    def __repr__(self) -> str:
        digits = self.WIDTH // 4
        return f"{type(self).__name__}(bits={self.bits:#0{digits + 2}x})"
