"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from reversie.core.enums import DiscKind, PlayerSlot
from reversie.game.interfaces import DiscAllowance, IPlayer

if TYPE_CHECKING:
    from reversie.game.engine import GameEngine


class _BasePlayer(IPlayer):
    """Slot, name, special-disc counters and win tally shared by all players."""

    __slots__ = ("_slot", "_name", "_allowance", "_bombs", "_immune", "_wins")

    def __init__(
        self,
        slot: PlayerSlot,
        name: str,
        allowance: DiscAllowance | None = None,
    ) -> None:
        self._slot = slot
        self._name = name
        self._allowance = (
            allowance if allowance is not None else DiscAllowance.standard()
        )
        self._bombs = self._allowance.bombs
        self._immune = self._allowance.immune
        self._wins = 0

    @property
    def slot(self) -> PlayerSlot:
        return self._slot

    @property
    def name(self) -> str:
        return self._name

    @property
    def allowance(self) -> DiscAllowance:
        return self._allowance

    @property
    def bombs_left(self) -> int:
        return self._bombs

    @property
    def immune_left(self) -> int:
        return self._immune

    @property
    def wins(self) -> int:
        return self._wins

    def can_afford(self, kind: DiscKind) -> bool:
        if kind == DiscKind.VOLATILE:
            return self._bombs > 0
        if kind == DiscKind.IMMUNE:
            return self._immune > 0
        return True

    def consume(self, kind: DiscKind) -> None:
        if kind == DiscKind.VOLATILE:
            assert self._bombs > 0, f"{self._name} has no bombs left"
            self._bombs -= 1
        elif kind == DiscKind.IMMUNE:
            assert self._immune > 0, f"{self._name} has no immune discs left"
            self._immune -= 1

    def restore(self, kind: DiscKind) -> None:
        if kind == DiscKind.VOLATILE:
            self._bombs += 1
        elif kind == DiscKind.IMMUNE:
            self._immune += 1

    def reset_allowances(self) -> None:
        self._bombs = self._allowance.bombs
        self._immune = self._allowance.immune

    def add_win(self) -> None:
        self._wins += 1

    def remove_win(self) -> None:
        if self._wins > 0:
            self._wins -= 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._slot.name}, {self._name!r}, "
            f"bombs={self._bombs}, immune={self._immune})"
        )


class HumanPlayer(_BasePlayer):
    """A human participant — moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ()

    def __init__(
        self,
        slot: PlayerSlot,
        name: str = "",
        allowance: DiscAllowance | None = None,
    ) -> None:
        super().__init__(slot, name or f"Player ({slot})", allowance)

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, engine: GameEngine) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(_BasePlayer):
    """An AI participant that delegates move choice to a callback.

    ``AIPlayer`` only stores a reference to a *bridge* callable invoked on
    ``request_move``. In production this callable dispatches work to a
    ``StrategyWorker`` living in a ``QThread``; in tests it can call a
    strategy directly.

    Args:
        slot: Seat the AI plays.
        name: Display name.
        allowance: Special discs available per game.
        on_request_move: ``(GameEngine) -> None`` — called when the game
            controller asks the AI to start choosing.
        on_cancel: ``() -> None`` — called to abort a running choice.
    """

    __slots__ = ("_on_request_move", "_on_cancel")

    def __init__(
        self,
        slot: PlayerSlot,
        name: str = "Computer",
        allowance: DiscAllowance | None = None,
        on_request_move: Callable[[GameEngine], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(slot, name, allowance)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, engine: GameEngine) -> None:
        if self._on_request_move is not None:
            self._on_request_move(engine)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
