from dataclasses import dataclass


@dataclass(frozen=True)
class BloomLayout:
    hash_bits: int = 32
    word_bits: int = 64
    window_bits: int = 8
    positions_per_key: int = 4

    @property
    def window_mask(self) -> int:
        return (1 << self.window_bits) - 1

    @property
    def hash_mask(self) -> int:
        return (1 << self.hash_bits) - 1

    @property
    def reachable_bits(self) -> int:
        # A window can never select a position at or above this.
        return 1 << self.window_bits

    def words_for(self, bit_count: int) -> int:
        return -(-bit_count // self.word_bits)


LAYOUT = BloomLayout()
