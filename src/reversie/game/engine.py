"""GameEngine: the rules facade shared by human and automated players.

Owns the board, the move history and the active-player field. Every
gameplay failure is reported as ``False``; nothing here raises for an
illegal request.
"""

from __future__ import annotations

import logging

from reversie.core.board import Board
from reversie.core.disc import Disc
from reversie.core.enums import DiscKind, GameResult, PlayerSlot
from reversie.core.flip_resolver import FlipResolver
from reversie.core.history import MoveHistory
from reversie.core.move import Move
from reversie.core.move_validator import MoveValidator
from reversie.core.notation import board_from_text
from reversie.core.rules import Rules
from reversie.core.types import Position
from reversie.game.interfaces import IPlayer

_LOGGER = logging.getLogger(__name__)


class GameEngine:
    """Validates, applies and undoes placements for one game.

    Discs refer to players by :class:`PlayerSlot`; the engine maps slots to
    the :class:`IPlayer` objects whose special-disc counters it adjusts.
    """

    __slots__ = (
        "_board",
        "_players",
        "_history",
        "_active",
        "_result",
        "_validator",
        "_resolver",
    )

    def __init__(self, first: IPlayer, second: IPlayer) -> None:
        if first.slot != PlayerSlot.FIRST or second.slot != PlayerSlot.SECOND:
            raise ValueError(
                f"Players must occupy FIRST and SECOND slots, got "
                f"{first.slot.name} and {second.slot.name}"
            )
        self._players: dict[PlayerSlot, IPlayer] = {
            PlayerSlot.FIRST: first,
            PlayerSlot.SECOND: second,
        }
        self._board = Board()
        self._history = MoveHistory()
        self._active = PlayerSlot.FIRST
        self._result = GameResult.IN_PROGRESS
        self._validator = MoveValidator(self._board)
        self._resolver = FlipResolver(self._board)
        self.reset()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def history(self) -> MoveHistory:
        return self._history

    @property
    def active(self) -> PlayerSlot:
        return self._active

    @property
    def current_player(self) -> IPlayer:
        return self._players[self._active]

    @property
    def ply_count(self) -> int:
        return len(self._history)

    def player(self, slot: PlayerSlot) -> IPlayer:
        return self._players[slot]

    @property
    def only_humans(self) -> bool:
        return all(p.is_human for p in self._players.values())

    # ── Setup ────────────────────────────────────────────────────────────

    def reset(self, layout: str | None = None) -> None:
        """Start a fresh game from the canonical centre or from *layout*."""
        start = board_from_text(layout) if layout is not None else Board.initial()
        self._board.clear()
        for pos, disc in start.occupied():
            self._board.place(pos, disc)
        for p in self._players.values():
            p.reset_allowances()
        self._history.clear()
        self._active = PlayerSlot.FIRST
        self._result = GameResult.IN_PROGRESS

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, slot: PlayerSlot | None = None) -> set[Position]:
        """Legal placements for *slot* (default: the active player)."""
        return self._validator.legal_moves(self._active if slot is None else slot)

    def captures_for(self, position: Position) -> frozenset[Position]:
        """Cells the active player would capture by placing at *position*."""
        return self._resolver.resolve(position, self._active)

    def capture_count(self, position: Position) -> int:
        return len(self.captures_for(position))

    def disc_count(self, slot: PlayerSlot) -> int:
        return self._board.count(slot)

    # ── Placement ────────────────────────────────────────────────────────

    def apply_move(self, position: Position, kind: DiscKind = DiscKind.PLAIN) -> bool:
        """Place a disc of *kind* for the active player.

        Returns False without touching any state if the cell is not a legal
        placement or the player has no disc of *kind* left.
        """
        if self._result != GameResult.IN_PROGRESS:
            _LOGGER.debug("Rejected %s at %s: game is over", kind.name, position)
            return False
        mover = self._active
        player = self._players[mover]
        if not self._validator.is_legal(position, mover):
            _LOGGER.debug(
                "Rejected %s at %s: illegal for %s", kind.name, position, mover
            )
            return False
        if not player.can_afford(kind):
            _LOGGER.debug(
                "Rejected %s at %s: %s has none left", kind.name, position, mover
            )
            return False

        player.consume(kind)
        disc = Disc(kind, mover)
        self._board.place(position, disc)
        _LOGGER.info("%s placed a %s in %s", player.name, disc.symbol, position)

        captured = self._resolver.resolve(position, mover)
        for pos in captured:
            target = self._board[pos]
            assert target is not None, f"capture set references empty cell {pos}"
            target.set_owner(mover)
            _LOGGER.info("%s flipped the %s in %s", player.name, target.symbol, pos)

        self._history.push(Move(disc=disc, position=position, captured=captured))
        self._active = mover.opposite
        return True

    def undo_last_move(self) -> bool:
        """Revert the most recent move. Only available between two humans."""
        if not self.only_humans:
            _LOGGER.debug("Undo ignored: a computer player is seated")
            return False
        if not self._history:
            _LOGGER.info("No previous move available to undo")
            return False

        move = self._history.pop()
        disc = move.disc
        self._players[disc.owner].restore(disc.kind)
        self._board.clear_cell(move.position)
        _LOGGER.info("Undo: removing %s from %s", disc.symbol, move.position)

        # The turn still belongs to the pre-move owner of every captured cell.
        for pos in move.captured:
            target = self._board[pos]
            assert target is not None, f"undo references empty cell {pos}"
            target.set_owner(self._active)
            _LOGGER.info("Undo: flipping back %s in %s", target.symbol, pos)

        self._active = self._active.opposite
        if self._result != GameResult.IN_PROGRESS:
            winner = Rules.winner_of(self._result)
            if winner is not None:
                self._players[winner].remove_win()
            self._result = GameResult.IN_PROGRESS
        return True

    # ── Game end ─────────────────────────────────────────────────────────

    def is_game_over(self) -> bool:
        """True once the active player has no legal placement.

        The opponent's options are not consulted: a stuck side to move ends
        the game rather than passing.
        """
        if self._result != GameResult.IN_PROGRESS:
            return True
        result = Rules.game_result(self._board, self._active)
        if result == GameResult.IN_PROGRESS:
            return False

        self._result = result
        counts = Rules.disc_counts(self._board)
        winner = Rules.winner_of(self._result)
        if winner is not None:
            self._players[winner].add_win()
        _LOGGER.info(
            "Game over: %s (first %d, second %d)",
            self._result.name,
            counts[PlayerSlot.FIRST],
            counts[PlayerSlot.SECOND],
        )
        return True

    def result(self) -> GameResult:
        self.is_game_over()
        return self._result

    def winner(self) -> PlayerSlot | None:
        """The slot with strictly more discs once the game is over, else None."""
        return Rules.winner_of(self.result())
