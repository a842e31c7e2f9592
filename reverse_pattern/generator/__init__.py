"""
Generator package - scope trees that manufacture matching strings.

Usage:
    from reverse_pattern.generator import LiteralScope
    from reverse_pattern.random_source import MersenneRandom

    scope = LiteralScope("digits")
    for digit in "0123456789":
        scope.add_literal(digit)
    scope.set_min_occurrences(3)
    scope.set_max_occurrences(5)

    text = scope.render(MersenneRandom(seed=42))
"""

from reverse_pattern.generator.buffer import ResultBuffer, ResultSink
from reverse_pattern.generator.scope import (
    Scope,
    DRAW_COUNT,
    DRAW_LITERAL,
    DRAW_CHILD,
)
from reverse_pattern.generator.literal import LiteralScope
from reverse_pattern.generator.group import GroupScope

__all__ = [
    # Buffer
    "ResultBuffer",
    "ResultSink",
    # Scopes
    "Scope",
    "LiteralScope",
    "GroupScope",
    # Draw purposes
    "DRAW_COUNT",
    "DRAW_LITERAL",
    "DRAW_CHILD",
]
