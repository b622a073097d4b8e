"""Unit tests for pebbles.randomness."""

import pytest

from pebbles.randomness import (
    RANDOM_VALUE_SIZE,
    RandomnessUnavailableError,
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    get_default_random_source,
    get_random_u32,
)


class BytesSource(RandomSource):
    def __init__(self, value):
        self.value = value
        self.salts = []

    def random(self, salt):
        self.salts.append(salt)
        return self.value


class FailingSource(RandomSource):
    def random(self, salt):
        raise OSError("entropy pool unavailable")


class TestGetRandomU32:
    """Tests for get_random_u32."""

    def test_reads_first_four_bytes_little_endian(self):
        assert get_random_u32(BytesSource(b"\x01\x00\x00\x00" + bytes(28))) == 1
        assert get_random_u32(BytesSource(b"\x00\x00\x00\x01" + bytes(28))) == 2**24
        assert get_random_u32(BytesSource(b"\xff\xff\xff\xff\x07")) == 2**32 - 1

    def test_fresh_salt_per_call(self):
        source = BytesSource(bytes(32))
        get_random_u32(source)
        get_random_u32(source)
        assert len(source.salts) == 2
        assert source.salts[0] != source.salts[1]

    def test_explicit_salt_is_passed_through(self):
        source = BytesSource(bytes(32))
        get_random_u32(source, salt=b"message-1")
        assert source.salts == [b"message-1"]

    @pytest.mark.parametrize("value", [b"", b"\x01\x02\x03", None])
    def test_short_value_fails_loudly(self, value):
        with pytest.raises(RandomnessUnavailableError):
            get_random_u32(BytesSource(value))

    def test_source_failure_is_chained(self):
        with pytest.raises(RandomnessUnavailableError) as exc_info:
            get_random_u32(FailingSource())
        assert isinstance(exc_info.value.__cause__, OSError)


class TestSources:
    """Tests for the bundled randomness sources."""

    def test_system_source_returns_full_value(self):
        assert len(SystemRandomSource().random(b"salt")) == RANDOM_VALUE_SIZE

    def test_seeded_source_is_reproducible(self):
        first = SeededRandomSource(42)
        second = SeededRandomSource(42)
        draws_first = [get_random_u32(first) for _ in range(5)]
        draws_second = [get_random_u32(second) for _ in range(5)]
        assert draws_first == draws_second

    def test_default_source_selection(self):
        assert isinstance(get_default_random_source(), SystemRandomSource)
        seeded = get_default_random_source(7)
        assert isinstance(seeded, SeededRandomSource)
        assert seeded.seed == 7
