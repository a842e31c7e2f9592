"""GroupScope - composite scope over an ordered list of child scopes."""

from __future__ import annotations

import logging

from reverse_pattern.core.errors import ConfigurationError
from reverse_pattern.generator.buffer import ResultSink
from reverse_pattern.generator.scope import DRAW_CHILD, Scope
from reverse_pattern.random_source import RandomSource

logger = logging.getLogger(__name__)


class GroupScope(Scope):
    """Composite scope.

    Sequential strategy (default): every repetition generates all children
    in order. Alternating strategy: every repetition draws one child and
    generates only that one.
    """

    def __init__(self, name: str, alternating: bool = False):
        super().__init__(name)
        self._children: list[Scope] = []
        self._alternating = alternating

    def attach(self, child: Scope) -> "GroupScope":
        """Append a child scope.

        Raises:
            ConfigurationError: If attaching would create a cycle or the
                child already belongs to a group
        """
        if child is self or (isinstance(child, GroupScope) and child._contains(self)):
            raise ConfigurationError(
                f"Attaching '{child.name}' to '{self.name}' would create a cycle"
            )
        if child.parent is not None:
            raise ConfigurationError(
                f"Scope '{child.name}' is already attached to '{child.parent.name}'"
            )
        child._parent = self
        self._children.append(child)
        return self

    def _contains(self, scope: Scope) -> bool:
        for child in self._children:
            if child is scope:
                return True
            if isinstance(child, GroupScope) and child._contains(scope):
                return True
        return False

    def get_children(self) -> list[Scope]:
        return list(self._children)

    def count(self) -> int:
        return len(self._children)

    def use_alternating_strategy(self) -> None:
        self._alternating = True

    def use_sequential_strategy(self) -> None:
        self._alternating = False

    @property
    def alternating(self) -> bool:
        return self._alternating

    def generate(self, result: ResultSink, random_source: RandomSource) -> None:
        self.validate_bounds()
        if self.max_occurrences == 0:
            return
        if not self._children:
            raise ConfigurationError(f"Group scope '{self.name}' has no child scopes to generate")

        repeat = self.resolve_repeat(random_source)
        logger.debug(
            "Scope '%s' repeating %d time(s) over %d child(ren), alternating=%s",
            self.name, repeat, len(self._children), self._alternating,
        )

        last = len(self._children) - 1
        for _ in range(repeat):
            if self._alternating:
                index = self.draw(random_source, 0, last, DRAW_CHILD)
                self._children[index].generate(result, random_source)
            else:
                for child in self._children:
                    child.generate(result, random_source)
