"""Builds scope trees from declarative descriptions (dicts or YAML)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from reverse_pattern.builder.schemas import ScopeSpec
from reverse_pattern.core.errors import ConfigurationError
from reverse_pattern.generator import GroupScope, LiteralScope, Scope

logger = logging.getLogger(__name__)


class ScopeBuilder:
    """Turns ScopeSpec descriptions into scope trees."""

    def build(self, spec: ScopeSpec | dict[str, Any]) -> Scope:
        """Build a scope tree.

        Raises:
            ConfigurationError: If the description is invalid
        """
        if not isinstance(spec, ScopeSpec):
            try:
                spec = ScopeSpec.model_validate(spec)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid scope description: {e}") from e
        return self._build_node(spec)

    def _build_node(self, spec: ScopeSpec) -> Scope:
        if spec.kind == "literal":
            scope: Scope = LiteralScope(spec.name)
            for literal in spec.literals:
                scope.add_literal(literal)
        else:
            scope = GroupScope(spec.name, alternating=spec.alternating)
            for child in spec.children:
                scope.attach(self._build_node(child))

        scope.set_min_occurrences(spec.min_occurrences)
        scope.set_max_occurrences(spec.max_occurrences)
        return scope

    def load_text(self, text: str) -> Scope:
        """Build a scope tree from a YAML description.

        Raises:
            ConfigurationError: If the YAML is malformed or not a mapping
        """
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed scope description: {e}") from e

        if not isinstance(content, dict):
            raise ConfigurationError("Scope description must be a mapping")
        return self.build(content)

    def load_file(self, path: str | Path) -> Scope:
        """Build a scope tree from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scope description not found: {path}")

        logger.debug("Loading scope description from %s", path)
        with open(path, "r", encoding="utf-8") as f:
            return self.load_text(f.read())
