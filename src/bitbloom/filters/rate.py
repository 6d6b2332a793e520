import math

_LN2_SQUARED = math.log(2) ** 2


def estimate_false_positive_rate(bit_width: int, count: int) -> float:
    """
    Standard false positive estimate for ``bit_width`` bits and ``count`` keys.

    The formula assumes the optimal number of hash functions for ``count``.
    Filters here always set 4 positions per key, so the value is a guide for
    sizing, not a bound.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count!r}")
    return math.exp(-bit_width * _LN2_SQUARED / count)
