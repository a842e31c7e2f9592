"""Append-only result buffer shared by a whole tree traversal."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResultSink(Protocol):
    """Anything scopes can append generated text to (a list works too)."""

    def append(self, text: str) -> None:
        ...


class ResultBuffer:
    """Accumulates generated fragments.

    Scopes only ever append. Reading and resetting belong to the caller
    that owns the buffer.
    """

    def __init__(self, initial: str = ""):
        self._parts: list[str] = [initial] if initial else []

    def append(self, text: str) -> None:
        self._parts.append(text)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def reset(self) -> None:
        self._parts.clear()

    def __str__(self) -> str:
        return self.getvalue()

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.getvalue() == other
        if isinstance(other, ResultBuffer):
            return self.getvalue() == other.getvalue()
        return NotImplemented

    def __repr__(self) -> str:
        return f"ResultBuffer({self.getvalue()!r})"
