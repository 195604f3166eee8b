"""GameController — the central orchestrator of a game.

Coordinates: Players, GameEngine, phase FSM.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from reversie.core.enums import DiscKind, GameResult, PlayerSlot
from reversie.core.move import Move
from reversie.core.types import Position
from reversie.game.engine import GameEngine
from reversie.game.interfaces import GamePhase, IGameController, IPlayer

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameEngine], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: forwards placements to the engine,
    switches turns, prompts computer players, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). AI results arrive via ``submit_move``, which a
    ``StrategyWorker`` reaches through a queued signal/slot connection.
    """

    __slots__ = ("_engine", "_phase", "events")

    def __init__(self) -> None:
        self._engine: GameEngine | None = None
        self._phase = GamePhase.NOT_STARTED
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> GameEngine:
        if self._engine is None:
            raise RuntimeError("No game in progress; call new_game() first")
        return self._engine

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_player(self) -> IPlayer | None:
        if self._engine is None:
            return None
        return self._engine.current_player

    def player(self, slot: PlayerSlot) -> IPlayer | None:
        if self._engine is None:
            return None
        return self._engine.player(slot)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        first: IPlayer,
        second: IPlayer,
        layout: str | None = None,
    ) -> None:
        current = self.current_player
        if current is not None and not current.is_human:
            current.cancel()

        self._engine = GameEngine(first, second)
        if layout is not None:
            self._engine.reset(layout)

        self._set_phase(GamePhase.AWAITING_MOVE)
        if self._finish_if_over():
            return
        self._prompt_current_player()

    def submit_move(self, position: Position, kind: DiscKind = DiscKind.PLAIN) -> bool:
        if self._engine is None:
            return False
        if self._phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        if not self._engine.apply_move(position, kind):
            return False

        move = self._engine.history.peek()
        assert move is not None
        self._emit_move(move)

        if self._finish_if_over():
            return True

        self._prompt_current_player()
        return True

    def undo_move(self) -> bool:
        if self._engine is None or not self._engine.history:
            return False

        # Only two humans may undo; an AI keeps thinking.
        if not self._engine.only_humans:
            return False

        if not self._engine.undo_last_move():
            return False
        self._set_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish_if_over(self) -> bool:
        assert self._engine is not None
        if not self._engine.is_game_over():
            return False
        self._set_phase(GamePhase.GAME_OVER)
        result = self._engine.result()
        for cb in self.events.on_game_over:
            cb(result)
        return True

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
        else:
            self._set_phase(GamePhase.THINKING)
            cp.request_move(self.engine)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self.engine)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
