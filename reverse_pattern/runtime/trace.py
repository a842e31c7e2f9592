"""
Generation tracing.

Records every random draw made while a scope tree generates, enabling:
- Replay of a run through ScriptedRandom
- Debugging of repetition counts and alternative choices
- Assertions on the exact draw sequence in tests
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from reverse_pattern.generator.buffer import ResultBuffer
from reverse_pattern.generator.scope import Scope
from reverse_pattern.random_source import RandomSource


class DrawStep(BaseModel):
    """A single random draw."""

    scope: str | None = None
    """Name of the scope that drew (None if the scope did not announce itself)."""

    purpose: str | None = None
    """What the draw decided: 'count', 'literal' or 'child'."""

    low: int
    """Inclusive lower bound requested."""

    high: int
    """Inclusive upper bound requested."""

    value: int
    """Value returned by the source."""


class GenerationTrace(BaseModel):
    """Complete trace of one generation run."""

    root: str
    """Name of the scope generation started from."""

    started_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    """ISO timestamp of when generation started."""

    completed_at: str | None = None
    """ISO timestamp of when generation completed."""

    output: str | None = None
    """The generated text (None until complete)."""

    draws: list[DrawStep] = Field(default_factory=list)
    """Draws in the order they were made."""

    def add_draw(
        self,
        low: int,
        high: int,
        value: int,
        scope: str | None = None,
        purpose: str | None = None,
    ) -> DrawStep:
        """Add a draw to the trace.

        Returns:
            The created DrawStep
        """
        step = DrawStep(scope=scope, purpose=purpose, low=low, high=high, value=value)
        self.draws.append(step)
        return step

    def count_draws(self, purpose: str | None = None, scope: str | None = None) -> int:
        """Count draws, optionally filtered by purpose and scope."""
        return sum(
            1
            for step in self.draws
            if (purpose is None or step.purpose == purpose)
            and (scope is None or step.scope == scope)
        )

    def values(self) -> list[int]:
        """Drawn values in order, suitable for ScriptedRandom replay."""
        return [step.value for step in self.draws]

    def complete(self, output: str) -> None:
        """Mark the trace as complete.

        Args:
            output: The generated text
        """
        self.output = output
        self.completed_at = datetime.now(timezone.utc).isoformat()

    def summary(self) -> dict[str, Any]:
        """Summarise the trace for logging or display."""
        return {
            "root": self.root,
            "output": self.output,
            "total_draws": len(self.draws),
            "count_draws": self.count_draws("count"),
            "literal_draws": self.count_draws("literal"),
            "child_draws": self.count_draws("child"),
        }


class TracingRandom:
    """Random source wrapper that records each draw into a trace.

    Scopes announce the purpose of their next draw through ``note``; the
    announcement is consumed by the following ``generate`` call.
    """

    def __init__(self, source: RandomSource, trace: GenerationTrace):
        self._source = source
        self.trace = trace
        self._pending: tuple[str | None, str | None] = (None, None)

    def note(self, scope: str, purpose: str) -> None:
        self._pending = (scope, purpose)

    def generate(self, low: int, high: int) -> int:
        scope, purpose = self._pending
        self._pending = (None, None)
        value = self._source.generate(low, high)
        self.trace.add_draw(low, high, value, scope=scope, purpose=purpose)
        return value

    def seed(self, value: int | None) -> None:
        self._source.seed(value)

    def max(self) -> int:
        return self._source.max()


def generate_with_trace(scope: Scope, source: RandomSource) -> tuple[str, GenerationTrace]:
    """Generate from a scope tree, recording every draw.

    Args:
        scope: Root of the tree
        source: Random source to draw from

    Returns:
        The generated text and its completed trace
    """
    trace = GenerationTrace(root=scope.name)
    buffer = ResultBuffer()
    scope.generate(buffer, TracingRandom(source, trace))
    output = buffer.getvalue()
    trace.complete(output)
    return output, trace
