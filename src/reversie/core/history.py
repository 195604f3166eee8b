"""MoveHistory: LIFO stack of applied moves."""

from __future__ import annotations

from collections.abc import Iterator

from reversie.core.move import Move


class MoveHistory:
    """Append-only stack of :class:`Move`, popped only by undo."""

    __slots__ = ("_moves",)

    def __init__(self) -> None:
        self._moves: list[Move] = []

    def push(self, move: Move) -> None:
        self._moves.append(move)

    def pop(self) -> Move:
        """Remove and return the most recent move."""
        assert self._moves, "pop from empty move history"
        return self._moves.pop()

    def peek(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def clear(self) -> None:
        self._moves.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def __bool__(self) -> bool:
        return bool(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)
