import pytest

from bitbloom.filters.bloom32 import Bloom32
from bitbloom.filters.bloom64 import Bloom64


class TestBloom64:
    def test_golden_bits(self) -> None:
        """Positions use the full word: key 0 sets bits 11, 21 and 53."""
        assert Bloom64().add(0).bits == 0x0020000000200800
        assert Bloom64().add(1).bits == 0x0840020000000010

    def test_reaches_high_half(self, sample_keys) -> None:
        bf = Bloom64().add_many(sample_keys)
        assert bf.bits >> 32 != 0

    def test_no_false_negatives(self, sample_keys) -> None:
        for k in sample_keys:
            assert k in Bloom64().add(k)

    def test_union_and_intersect(self) -> None:
        a = Bloom64().add(1)
        b = Bloom64().add(2)
        assert (a | b).bits == a.bits | b.bits
        assert (a & b).bits == a.bits & b.bits
        assert (a ^ b).bits == a.bits ^ b.bits

    def test_intersect_soundness(self, sample_keys) -> None:
        a = Bloom64().add_many(range(0, 40))
        b = Bloom64().add_many(range(20, 60))
        i = a & b
        for k in sample_keys:
            if k in i:
                assert k in a and k in b

    def test_hash_folds_halves(self) -> None:
        bf = Bloom64(bits=0x0000000100000002)
        assert hash(bf) == 0x3
        assert hash(Bloom64().add(0)) == 0x00200000 | 0x00200800

    def test_equal_values_hash_equal(self, sample_keys) -> None:
        a = Bloom64.from_keys(sample_keys)
        b = Bloom64.from_keys(reversed(sample_keys))
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_to_bloom32(self) -> None:
        assert Bloom64() != Bloom32()

    def test_bits_validated(self) -> None:
        Bloom64(bits=(1 << 64) - 1)
        with pytest.raises(ValueError):
            Bloom64(bits=1 << 64)

    def test_false_positive_rate_uses_64_bits(self) -> None:
        assert Bloom64().false_positive_rate(10) < Bloom32().false_positive_rate(10)
        assert 0 < Bloom64().false_positive_rate(1) <= 1

    def test_repr(self) -> None:
        assert repr(Bloom64()) == "Bloom64(bits=0x0000000000000000)"
