"""High-level rules: game end and scoring."""

from __future__ import annotations

from reversie.core.board import Board
from reversie.core.enums import GameResult, PlayerSlot
from reversie.core.move_validator import MoveValidator


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy: the game ends as soon as the side to move has no legal
    # placement, even if the opponent still has one. There is no passing.

    @staticmethod
    def has_legal_move(board: Board, player: PlayerSlot) -> bool:
        return bool(MoveValidator(board).legal_moves(player))

    @staticmethod
    def is_game_over(board: Board, side_to_move: PlayerSlot) -> bool:
        return not Rules.has_legal_move(board, side_to_move)

    @staticmethod
    def disc_counts(board: Board) -> dict[PlayerSlot, int]:
        counts = {PlayerSlot.FIRST: 0, PlayerSlot.SECOND: 0}
        for _, disc in board.occupied():
            counts[disc.owner] += 1
        return counts

    @staticmethod
    def tally(board: Board) -> GameResult:
        """Result by disc majority; equal counts are a draw."""
        counts = Rules.disc_counts(board)
        first = counts[PlayerSlot.FIRST]
        second = counts[PlayerSlot.SECOND]
        if first > second:
            return GameResult.FIRST_WINS
        if second > first:
            return GameResult.SECOND_WINS
        return GameResult.DRAW

    @staticmethod
    def game_result(board: Board, side_to_move: PlayerSlot) -> GameResult:
        """Determine the current game result."""
        if not Rules.is_game_over(board, side_to_move):
            return GameResult.IN_PROGRESS
        return Rules.tally(board)

    @staticmethod
    def winner_of(result: GameResult) -> PlayerSlot | None:
        if result == GameResult.FIRST_WINS:
            return PlayerSlot.FIRST
        if result == GameResult.SECOND_WINS:
            return PlayerSlot.SECOND
        return None
