"""Random sources - bounded-integer capability and its implementations."""

from reverse_pattern.random_source.service import (
    RandomSource,
    MersenneRandom,
    SimpleRandom,
    ScriptedRandom,
    RANDOM_SOURCES,
    check_range,
    make_random_source,
)

__all__ = [
    # Capability
    "RandomSource",
    "check_range",
    # Sources
    "MersenneRandom",
    "SimpleRandom",
    "ScriptedRandom",
    # Factory
    "RANDOM_SOURCES",
    "make_random_source",
]
