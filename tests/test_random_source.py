"""Tests for random sources and the source factory."""

import pytest

from reverse_pattern.core import ConfigurationError, RandomSourceError, get_settings
from reverse_pattern.random_source import (
    MersenneRandom,
    RandomSource,
    ScriptedRandom,
    SimpleRandom,
    make_random_source,
)


class TestCapability:
    """Test every source satisfies the capability interface."""

    @pytest.mark.parametrize(
        "source",
        [MersenneRandom(1), SimpleRandom(1), ScriptedRandom([0])],
    )
    def test_is_random_source(self, source):
        """Test sources expose generate, seed and max."""
        assert isinstance(source, RandomSource)


class TestMersenneRandom:
    """Test the Mersenne Twister source."""

    def test_in_range(self):
        """Test values stay within the inclusive range."""
        source = MersenneRandom(3)
        values = [source.generate(2, 5) for _ in range(200)]
        assert min(values) >= 2
        assert max(values) <= 5
        assert set(values) == {2, 3, 4, 5}

    def test_seed_reproduces(self):
        """Test reseeding restarts the sequence."""
        source = MersenneRandom(11)
        first = [source.generate(0, 100) for _ in range(10)]
        source.seed(11)
        assert [source.generate(0, 100) for _ in range(10)] == first

    def test_instances_independent(self):
        """Test two instances do not share state."""
        a = MersenneRandom(5)
        b = MersenneRandom(5)
        for _ in range(10):
            a.generate(0, 10)
        assert b.generate(0, 10) == MersenneRandom(5).generate(0, 10)

    def test_max(self):
        """Test the reported upper bound."""
        assert MersenneRandom(0).max() == 2**31 - 1

    def test_inverted_range(self):
        """Test low > high is rejected."""
        with pytest.raises(RandomSourceError):
            MersenneRandom(0).generate(3, 1)

    def test_range_above_max(self):
        """Test ranges beyond max() are rejected."""
        source = MersenneRandom(0)
        with pytest.raises(RandomSourceError):
            source.generate(0, source.max() + 1)


class TestSimpleRandom:
    """Test the Park-Miller source."""

    def test_known_sequence(self):
        """Test the minimal standard sequence from seed 1."""
        source = SimpleRandom(1)
        top = source.max()
        assert source.generate(0, top) == 16806
        assert source.generate(0, top) == 282475248

    def test_zero_seed(self):
        """Test a zero seed still produces values."""
        source = SimpleRandom(0)
        assert 0 <= source.generate(0, 9) <= 9

    def test_in_range(self):
        """Test values stay within the inclusive range."""
        source = SimpleRandom(42)
        values = {source.generate(0, 3) for _ in range(200)}
        assert values == {0, 1, 2, 3}

    def test_seed_reproduces(self):
        """Test reseeding restarts the sequence."""
        source = SimpleRandom(99)
        first = [source.generate(0, 1000) for _ in range(10)]
        source.seed(99)
        assert [source.generate(0, 1000) for _ in range(10)] == first

    def test_negative_low(self):
        """Test negative bounds are rejected."""
        with pytest.raises(RandomSourceError):
            SimpleRandom(1).generate(-1, 3)


class TestScriptedRandom:
    """Test the scripted test double."""

    def test_returns_sequence(self):
        """Test values come back in order and calls are recorded."""
        source = ScriptedRandom([3, 1])
        assert source.generate(0, 5) == 3
        assert source.generate(1, 2) == 1
        assert source.calls == [(0, 5), (1, 2)]

    def test_exhausted(self):
        """Test running out of values raises."""
        source = ScriptedRandom([1])
        source.generate(0, 1)
        with pytest.raises(RandomSourceError):
            source.generate(0, 1)

    def test_repeat(self):
        """Test repeat cycles through the values."""
        source = ScriptedRandom([0, 1], repeat=True)
        assert [source.generate(0, 1) for _ in range(5)] == [0, 1, 0, 1, 0]

    def test_expect_single_pair(self):
        """Test a single expectation applies to every call."""
        source = ScriptedRandom([0], expect=(0, 0), repeat=True)
        source.generate(0, 0)
        with pytest.raises(RandomSourceError) as excinfo:
            source.generate(0, 1)
        assert "expected (0, 0)" in str(excinfo.value)

    def test_expect_per_call(self):
        """Test a list of expectations is matched call by call."""
        source = ScriptedRandom([2, 0], expect=[(1, 3), (0, 1)])
        assert source.generate(1, 3) == 2
        assert source.generate(0, 1) == 0
        with pytest.raises(RandomSourceError):
            source.generate(0, 1)

    def test_expect_pair_as_list(self):
        """Test a two-int list is a single expected pair."""
        source = ScriptedRandom([0], expect=[0, 0], repeat=True)
        source.generate(0, 0)
        with pytest.raises(RandomSourceError) as excinfo:
            source.generate(0, 1)
        assert "expected (0, 0)" in str(excinfo.value)

    def test_expect_malformed(self):
        """Test an expectation that is not made of pairs is rejected up front."""
        with pytest.raises(TypeError):
            ScriptedRandom([0], expect=[0, 1, 2])

    def test_seed_rewinds(self):
        """Test seed() records the value and restarts the script."""
        source = ScriptedRandom([4, 5])
        source.generate(0, 9)
        source.seed(12)
        assert source.seeds == [12]
        assert source.call_count == 0
        assert source.generate(0, 9) == 4


class TestFactory:
    """Test make_random_source."""

    def test_by_name(self):
        """Test sources are resolved by name."""
        assert isinstance(make_random_source("mersenne", 1), MersenneRandom)
        assert isinstance(make_random_source("SIMPLE", 1), SimpleRandom)

    def test_seeded_sources_match(self):
        """Test two factory sources with the same seed agree."""
        a = make_random_source("simple", 8)
        b = make_random_source("simple", 8)
        assert [a.generate(0, 50) for _ in range(5)] == [b.generate(0, 50) for _ in range(5)]

    def test_defaults_from_settings(self, monkeypatch):
        """Test the kind and seed default to settings."""
        monkeypatch.setenv("REVERSE_PATTERN_RANDOM_SOURCE", "simple")
        monkeypatch.setenv("REVERSE_PATTERN_DEFAULT_SEED", "1")
        get_settings.cache_clear()

        source = make_random_source()
        assert isinstance(source, SimpleRandom)
        assert source.generate(0, source.max()) == 16806

    def test_unknown_name(self):
        """Test an unknown source name is a configuration error."""
        with pytest.raises(ConfigurationError):
            make_random_source("quantum")
