"""
Scope - the node type every generation tree is built from.

A scope appends its contribution to a caller-owned result buffer, using a
random source that is borrowed for the duration of a single call. Scopes
carry a repetition bound ``[min_occurrences, max_occurrences]``; a fixed
bound (``min == max``) never consumes a random draw for the count.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from reverse_pattern.core.config import get_settings
from reverse_pattern.core.errors import ConfigurationError, RandomSourceError
from reverse_pattern.generator.buffer import ResultBuffer, ResultSink
from reverse_pattern.random_source import RandomSource


# Draw purposes reported to tracing sources
DRAW_COUNT = "count"
DRAW_LITERAL = "literal"
DRAW_CHILD = "child"


class Scope(ABC):
    """Abstract generation node."""

    def __init__(self, name: str):
        self._name = name
        self._min_occurrences = 1
        self._max_occurrences = 1
        self._parent: Scope | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Scope | None:
        """Group this scope is attached to, if any."""
        return self._parent

    # =========================================================================
    # Repetition Bound
    # =========================================================================

    @property
    def min_occurrences(self) -> int:
        return self._min_occurrences

    @property
    def max_occurrences(self) -> int:
        return self._max_occurrences

    def set_min_occurrences(self, value: int) -> None:
        self._min_occurrences = value

    def set_max_occurrences(self, value: int) -> None:
        self._max_occurrences = value

    def validate_bounds(self) -> None:
        """Check ``0 <= min <= max``, and ``max <= limit`` when a limit is configured.

        Raises:
            ConfigurationError: If the bound cannot be generated
        """
        low, high = self._min_occurrences, self._max_occurrences
        if low < 0 or high < 0:
            raise ConfigurationError(
                f"Scope '{self.name}' has a negative repetition bound [{low}, {high}]"
            )
        if low > high:
            raise ConfigurationError(
                f"Scope '{self.name}' has min occurrences {low} greater than max {high}"
            )
        limit = get_settings().max_occurrences_limit
        if limit is not None and high > limit:
            raise ConfigurationError(
                f"Scope '{self.name}' max occurrences {high} exceeds the limit of {limit}"
            )

    def resolve_repeat(self, random_source: RandomSource) -> int:
        """Number of repetitions for one generation.

        Fixed bounds return directly without touching the random source.
        """
        if self._min_occurrences == self._max_occurrences:
            return self._min_occurrences
        return self.draw(random_source, self._min_occurrences, self._max_occurrences, DRAW_COUNT)

    def draw(self, random_source: RandomSource, low: int, high: int, purpose: str) -> int:
        """Draw one value in ``[low, high]`` and check the source kept to it.

        Sources exposing ``note(scope, purpose)`` are told what the draw is for.

        Raises:
            RandomSourceError: If the source returns a value outside the range
        """
        note = getattr(random_source, "note", None)
        if callable(note):
            note(self.name, purpose)
        value = random_source.generate(low, high)
        if not isinstance(value, int) or not low <= value <= high:
            raise RandomSourceError(
                f"Random source returned {value!r} for scope '{self.name}', "
                f"outside the requested range [{low}, {high}]"
            )
        return value

    # =========================================================================
    # Generation
    # =========================================================================

    @abstractmethod
    def generate(self, result: ResultSink, random_source: RandomSource) -> None:
        """Append this scope's contribution to ``result``.

        Args:
            result: Caller-owned buffer, append-only
            random_source: Source for every nondeterministic choice

        Raises:
            ConfigurationError: If the scope has nothing valid to emit
        """

    def render(self, random_source: RandomSource) -> str:
        """Generate into a scratch buffer and return the text.

        Nothing is returned on failure, so callers never see a partial prefix.
        """
        buffer = ResultBuffer()
        self.generate(buffer, random_source)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"occurrences=[{self._min_occurrences}, {self._max_occurrences}])"
        )
