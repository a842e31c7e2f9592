"""Declarative scope-tree descriptions."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ScopeSpec(BaseModel):
    """Description of one scope and, for groups, its children."""

    name: str = Field(..., min_length=1, description="Scope name used in diagnostics")
    kind: Literal["literal", "group"] = Field("literal", description="Scope type")
    literals: list[str] = Field(default_factory=list, description="Literal alternatives, in order")
    children: list[ScopeSpec] = Field(default_factory=list, description="Child scopes of a group")
    min_occurrences: int = Field(1, ge=0, description="Minimum repetitions")
    max_occurrences: int = Field(1, ge=0, description="Maximum repetitions")
    alternating: bool = Field(False, description="Groups pick one child per repetition")

    @model_validator(mode="after")
    def check_shape(self) -> "ScopeSpec":
        if self.min_occurrences > self.max_occurrences:
            raise ValueError(
                f"min_occurrences ({self.min_occurrences}) is greater than "
                f"max_occurrences ({self.max_occurrences})"
            )
        if self.kind == "literal" and self.children:
            raise ValueError(f"Literal scope '{self.name}' cannot have children")
        if self.kind == "group" and self.literals:
            raise ValueError(f"Group scope '{self.name}' cannot hold literals")
        return self
