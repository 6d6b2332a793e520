"""Exceptions raised by bitbloom filters."""


class BloomError(ValueError):
    pass


class InvalidBitCountError(BloomError):
    def __init__(self, bit_count) -> None:
        self.bit_count = bit_count
        super().__init__(
            f"bit_count must be a positive integer, got {bit_count!r}"
        )


class FilterSizeMismatchError(BloomError):
    def __init__(self, left_words: int, right_words: int) -> None:
        self.left_words = left_words
        self.right_words = right_words
        super().__init__(
            "cannot combine filters of different sizes: "
            f"{left_words} words vs {right_words} words"
        )
