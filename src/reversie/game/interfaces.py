"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the engine and controller depend on these
ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from reversie.core.enums import DiscKind, PlayerSlot

if TYPE_CHECKING:
    from reversie.core.types import Position
    from reversie.game.engine import GameEngine


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is choosing
    GAME_OVER = auto()


# ── Special disc allowance presets ───────────────────────────────────────────


class DiscAllowance:
    """Immutable number of special discs each player starts a game with.

    Args:
        bombs: Volatile discs available per game.
        immune: Immune discs available per game.
    """

    __slots__ = ("bombs", "immune")

    def __init__(self, bombs: int, immune: int) -> None:
        if bombs < 0 or immune < 0:
            raise ValueError(f"Allowance must be non-negative: {bombs}, {immune}")
        self.bombs = bombs
        self.immune = immune

    @classmethod
    def standard(cls) -> DiscAllowance:
        """Three bombs and two immune discs."""
        return cls(3, 2)

    @classmethod
    def plain_only(cls) -> DiscAllowance:
        """Classic reversi: plain discs only."""
        return cls(0, 0)

    @classmethod
    def unlimited(cls) -> DiscAllowance:
        return cls(64, 64)

    def for_kind(self, kind: DiscKind) -> int:
        if kind == DiscKind.VOLATILE:
            return self.bombs
        if kind == DiscKind.IMMUNE:
            return self.immune
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscAllowance):
            return NotImplemented
        return (self.bombs, self.immune) == (other.bombs, other.immune)

    def __hash__(self) -> int:
        return hash((self.bombs, self.immune))

    def __repr__(self) -> str:
        return f"DiscAllowance(bombs={self.bombs}, immune={self.immune})"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI).

    The player stores its own special-disc counters; the engine is the only
    code that changes them during a game.
    """

    @property
    @abstractmethod
    def slot(self) -> PlayerSlot: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @property
    @abstractmethod
    def bombs_left(self) -> int: ...

    @property
    @abstractmethod
    def immune_left(self) -> int: ...

    @property
    @abstractmethod
    def wins(self) -> int: ...

    @abstractmethod
    def can_afford(self, kind: DiscKind) -> bool:
        """Whether at least one disc of *kind* is left. Plain discs always are."""

    @abstractmethod
    def consume(self, kind: DiscKind) -> None:
        """Spend one disc of *kind*. Plain discs are free."""

    @abstractmethod
    def restore(self, kind: DiscKind) -> None:
        """Give back one disc of *kind* after an undo."""

    @abstractmethod
    def reset_allowances(self) -> None:
        """Restore the full starting allowance."""

    @abstractmethod
    def add_win(self) -> None: ...

    @abstractmethod
    def remove_win(self) -> None: ...

    @abstractmethod
    def request_move(self, engine: GameEngine) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For AI this kicks off strategy evaluation.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        first: IPlayer,
        second: IPlayer,
        layout: str | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, position: Position, kind: DiscKind = DiscKind.PLAIN) -> bool:
        """Submit a placement. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
