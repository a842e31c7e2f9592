"""Random sources - the bounded-integer capability scopes draw from.

A scope tree never owns a random source. One is passed to every
``generate`` call, so the same tree can be replayed under different
determinism policies:

- MersenneRandom: Mersenne Twister, reproducible from a seed
- SimpleRandom: Park-Miller minimal standard LCG, reproducible from a seed
- ScriptedRandom: pre-programmed sequence for behavioural tests

None of the sources are thread-safe. Concurrent generations must each
receive their own instance.
"""

from __future__ import annotations

import logging
import random
import secrets
from itertools import cycle as _cycle
from typing import Iterable, Iterator, Protocol, Sequence, runtime_checkable

from reverse_pattern.core.config import get_settings
from reverse_pattern.core.errors import ConfigurationError, RandomSourceError

logger = logging.getLogger(__name__)

MT_RAND_MAX = 2**31 - 1
PARK_MILLER_MODULUS = 2**31 - 1
PARK_MILLER_MULTIPLIER = 16807


# =============================================================================
# Capability
# =============================================================================


@runtime_checkable
class RandomSource(Protocol):
    """Capability interface for bounded random integers."""

    def generate(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` inclusive."""
        ...

    def seed(self, value: int | None) -> None:
        """Reset the source so the sequence restarts from ``value``."""
        ...

    def max(self) -> int:
        """Upper bound of the values this source can produce."""
        ...


def check_range(source: RandomSource, low: int, high: int) -> None:
    """Validate a requested range against a source.

    Raises:
        RandomSourceError: If the range is inverted or outside ``[0, max()]``
    """
    if low > high:
        raise RandomSourceError(f"Invalid range: low {low} is greater than high {high}")
    if low < 0 or high > source.max():
        raise RandomSourceError(
            f"Range [{low}, {high}] is outside the source range [0, {source.max()}]"
        )


# =============================================================================
# Seeded Sources
# =============================================================================


class MersenneRandom:
    """Mersenne Twister source with instance-owned state."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random()
        self.seed(seed)

    def generate(self, low: int, high: int) -> int:
        check_range(self, low, high)
        return self._rng.randint(low, high)

    def seed(self, value: int | None) -> None:
        self._rng.seed(value)

    def max(self) -> int:
        return MT_RAND_MAX


class SimpleRandom:
    """Park-Miller minimal standard generator.

    ``state = state * 16807 mod (2**31 - 1)``. The state never reaches 0,
    so seeds that reduce to 0 are replaced with 1.
    """

    def __init__(self, seed: int | None = None):
        self._state = 1
        self.seed(seed)

    def generate(self, low: int, high: int) -> int:
        check_range(self, low, high)
        self._state = (self._state * PARK_MILLER_MULTIPLIER) % PARK_MILLER_MODULUS
        span = high - low + 1
        # state - 1 lies in [0, modulus - 2], scale it onto [0, span - 1]
        return low + (self._state - 1) * span // (PARK_MILLER_MODULUS - 1)

    def seed(self, value: int | None) -> None:
        if value is None:
            value = secrets.randbits(31)
        self._state = value % PARK_MILLER_MODULUS or 1

    def max(self) -> int:
        return PARK_MILLER_MODULUS - 1


# =============================================================================
# Scripted Source
# =============================================================================


class ScriptedRandom:
    """Deterministic source returning a pre-programmed sequence.

    Every call is recorded in ``calls``. When ``expect`` is given, each call
    must match it: a single ``(low, high)`` pair applies to every call, a
    list of pairs is matched call by call.

    Args:
        values: Values returned in order
        expect: Expected call arguments
        repeat: Cycle through ``values`` instead of failing when exhausted
        max_value: Value reported by ``max()``
    """

    def __init__(
        self,
        values: Iterable[int],
        expect: Sequence[int] | Sequence[Sequence[int]] | None = None,
        repeat: bool = False,
        max_value: int = MT_RAND_MAX,
    ):
        self._values = list(values)
        self._expect = self._normalize_expect(expect)
        self._repeat = repeat
        self._max_value = max_value
        self.calls: list[tuple[int, int]] = []
        self.seeds: list[int | None] = []
        self._iter: Iterator[int] = self._make_iter()

    @staticmethod
    def _normalize_expect(expect):
        """Coerce ``expect`` to a ``(low, high)`` tuple or a list of them.

        Any two-int sequence counts as a single pair, so ``[0, 0]`` means
        ``(0, 0)`` for every call.

        Raises:
            TypeError: If ``expect`` is neither a pair nor a list of pairs
        """
        if expect is None:
            return None
        if len(expect) == 2 and all(isinstance(v, int) for v in expect):
            return (expect[0], expect[1])
        pairs = []
        for pair in expect:
            if isinstance(pair, int) or len(pair) != 2:
                raise TypeError(
                    f"expect must be a (low, high) pair or a list of pairs, got {expect!r}"
                )
            pairs.append((pair[0], pair[1]))
        return pairs

    def _make_iter(self) -> Iterator[int]:
        if self._repeat and self._values:
            return _cycle(self._values)
        return iter(self._values)

    def _expected_for(self, index: int) -> tuple[int, int] | None:
        if self._expect is None:
            return None
        if isinstance(self._expect, tuple):
            return self._expect
        if index >= len(self._expect):
            raise RandomSourceError(
                f"Unexpected call #{index + 1}: only {len(self._expect)} calls were expected"
            )
        return self._expect[index]

    def generate(self, low: int, high: int) -> int:
        expected = self._expected_for(len(self.calls))
        self.calls.append((low, high))
        if expected is not None and (low, high) != expected:
            raise RandomSourceError(
                f"Unexpected arguments for call #{len(self.calls)}: "
                f"got ({low}, {high}), expected {expected}"
            )
        try:
            return next(self._iter)
        except StopIteration:
            raise RandomSourceError(
                f"Scripted values exhausted after {len(self._values)} draws"
            ) from None

    def seed(self, value: int | None) -> None:
        """Record the seed and rewind the script."""
        self.seeds.append(value)
        self.calls.clear()
        self._iter = self._make_iter()

    def max(self) -> int:
        return self._max_value

    @property
    def call_count(self) -> int:
        return len(self.calls)


# =============================================================================
# Factory
# =============================================================================

RANDOM_SOURCES: dict[str, type] = {
    "mersenne": MersenneRandom,
    "simple": SimpleRandom,
}


def make_random_source(kind: str | None = None, seed: int | None = None) -> RandomSource:
    """Create a seeded random source by name.

    Args:
        kind: Source name (defaults to Settings.random_source)
        seed: Seed value (defaults to Settings.default_seed)

    Returns:
        A new, independent random source

    Raises:
        ConfigurationError: If the source name is unknown
    """
    settings = get_settings()
    kind = (kind or settings.random_source).lower()
    if seed is None:
        seed = settings.default_seed

    source_cls = RANDOM_SOURCES.get(kind)
    if source_cls is None:
        raise ConfigurationError(
            f"Unknown random source '{kind}', expected one of: {', '.join(sorted(RANDOM_SOURCES))}"
        )

    logger.debug("Creating %s random source (seed=%s)", kind, seed)
    return source_cls(seed)
