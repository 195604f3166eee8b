"""Legal placement detection."""

from __future__ import annotations

from reversie.core.board import Board
from reversie.core.enums import PlayerSlot
from reversie.core.types import DIRECTIONS, Direction, Position


class MoveValidator:
    """Decides which empty cells capture at least one enemy disc.

    Immune discs are transparent to the ray scan: they neither stop it nor
    count as the enemy disc a capture needs.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, player: PlayerSlot) -> set[Position]:
        """All empty cells where *player* may place a disc."""
        return {
            pos
            for pos in self._board.empty_positions()
            if self._has_capture(pos, player)
        }

    def is_legal(self, pos: Position, player: PlayerSlot) -> bool:
        return self._board.is_empty(pos) and self._has_capture(pos, player)

    def is_capturing_ray(
        self, pos: Position, direction: Direction, player: PlayerSlot
    ) -> bool:
        """Whether the ray from *pos* along *direction* brackets an enemy disc."""
        board = self._board
        saw_opponent = False
        for cell in pos.ray(direction):
            disc = board[cell]
            if disc is None:
                return False
            if disc.owner == player:
                return saw_opponent
            if not disc.is_immune:
                saw_opponent = True
        return False

    # -- Internal -----------------------------------------------------------

    def _has_capture(self, pos: Position, player: PlayerSlot) -> bool:
        return any(
            self.is_capturing_ray(pos, direction, player) for direction in DIRECTIONS
        )
