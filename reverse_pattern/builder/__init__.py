"""Builder - scope trees from declarative descriptions."""

from reverse_pattern.builder.schemas import ScopeSpec
from reverse_pattern.builder.service import ScopeBuilder

__all__ = [
    "ScopeSpec",
    "ScopeBuilder",
]
