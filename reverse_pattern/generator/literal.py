"""LiteralScope - a leaf emitting repeated picks from a pool of literals."""

from __future__ import annotations

import logging

from reverse_pattern.core.errors import ConfigurationError
from reverse_pattern.generator.buffer import ResultSink
from reverse_pattern.generator.scope import DRAW_LITERAL, Scope
from reverse_pattern.random_source import RandomSource

logger = logging.getLogger(__name__)


class LiteralScope(Scope):
    """Leaf scope holding an ordered pool of literal alternatives.

    Duplicates are allowed and weight an alternative. Each repetition picks
    an alternative independently by index.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._literals: list[str] = []

    def add_literal(self, literal: str) -> None:
        self._literals.append(literal)

    def get_literals(self) -> list[str]:
        """Copy of the pool, in insertion order."""
        return list(self._literals)

    def generate(self, result: ResultSink, random_source: RandomSource) -> None:
        self.validate_bounds()
        if self.max_occurrences == 0:
            return
        if not self._literals:
            raise ConfigurationError(f"Literal scope '{self.name}' has no literals to generate from")

        repeat = self.resolve_repeat(random_source)
        last = len(self._literals) - 1
        logger.debug("Scope '%s' emitting %d literal(s) from a pool of %d", self.name, repeat, last + 1)

        for _ in range(repeat):
            index = self.draw(random_source, 0, last, DRAW_LITERAL)
            result.append(self._literals[index])
