"""
Runtime package.

Provides draw-level tracing of scope-tree generation.
"""

from reverse_pattern.runtime.trace import (
    DrawStep,
    GenerationTrace,
    TracingRandom,
    generate_with_trace,
)

__all__ = [
    "DrawStep",
    "GenerationTrace",
    "TracingRandom",
    "generate_with_trace",
]
