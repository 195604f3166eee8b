"""Capture resolution: which discs change owner after a placement."""

from __future__ import annotations

from collections.abc import Iterable

from reversie.core.board import Board
from reversie.core.enums import PlayerSlot
from reversie.core.types import DIRECTIONS, Direction, Position


class FlipResolver:
    """Computes the full capture set of a placement, bomb chains included.

    :meth:`resolve` is a pure query and never touches the board, so the
    same call serves move previews and actual application.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def resolve(
        self,
        pos: Position,
        player: PlayerSlot,
        directions: Iterable[Direction] = DIRECTIONS,
    ) -> frozenset[Position]:
        """Every cell *player* captures by placing at *pos*.

        The result does not depend on the order of *directions*.
        """
        captured: set[Position] = set()
        for direction in directions:
            bracketed = self._bracketed(pos, direction, player)
            if bracketed:
                self._record_flips(bracketed, player, captured)
        return frozenset(captured)

    def count(self, pos: Position, player: PlayerSlot) -> int:
        return len(self.resolve(pos, player))

    # -- Internal -----------------------------------------------------------

    def _bracketed(
        self, pos: Position, direction: Direction, player: PlayerSlot
    ) -> list[Position]:
        """Enemy cells between *pos* and the next own disc, or [] if unclosed."""
        board = self._board
        buffer: list[Position] = []
        for cell in pos.ray(direction):
            disc = board[cell]
            if disc is None:
                return []
            if disc.owner == player:
                return buffer
            buffer.append(cell)
        return []

    def _record_flips(
        self,
        bracketed: list[Position],
        player: PlayerSlot,
        captured: set[Position],
    ) -> None:
        board = self._board
        bombs: list[Position] = []
        for cell in bracketed:
            if cell in captured:
                continue
            disc = board[cell]
            assert disc is not None, f"bracketed cell {cell} is empty"
            if disc.is_immune:
                continue
            captured.add(cell)
            if disc.is_volatile:
                bombs.append(cell)
        self._explode(bombs, player, captured)

    def _explode(
        self,
        bombs: list[Position],
        player: PlayerSlot,
        captured: set[Position],
    ) -> None:
        """Spread captures from each captured bomb to its direct neighbours."""
        board = self._board
        opponent = player.opposite
        worklist = list(bombs)
        while worklist:
            bomb = worklist.pop()
            for cell in bomb.neighbours():
                if cell in captured:
                    continue
                disc = board[cell]
                if disc is None or disc.owner != opponent or disc.is_immune:
                    continue
                captured.add(cell)
                if disc.is_volatile:
                    worklist.append(cell)
