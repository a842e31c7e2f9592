"""
Reverse pattern generator.

Manufactures strings that conform to a pattern described as a tree of
scopes, drawing every choice from a pluggable random source.
"""

from reverse_pattern.core import (
    ConfigurationError,
    RandomSourceError,
    ReversePatternError,
    Settings,
    configure_logging,
    get_settings,
)
from reverse_pattern.generator import GroupScope, LiteralScope, ResultBuffer, Scope
from reverse_pattern.random_source import (
    MersenneRandom,
    RandomSource,
    ScriptedRandom,
    SimpleRandom,
    make_random_source,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "configure_logging",
    "ReversePatternError",
    "ConfigurationError",
    "RandomSourceError",
    # Generator
    "Scope",
    "LiteralScope",
    "GroupScope",
    "ResultBuffer",
    # Random sources
    "RandomSource",
    "MersenneRandom",
    "SimpleRandom",
    "ScriptedRandom",
    "make_random_source",
]
