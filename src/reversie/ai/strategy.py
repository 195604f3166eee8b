"""Shared move-selection models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from reversie.core.enums import DiscKind

if TYPE_CHECKING:
    from reversie.core.types import Position
    from reversie.game.engine import GameEngine

CancelCheck = Callable[[], bool]


@dataclass(slots=True, frozen=True)
class StrategyLimits:
    """Knobs for a single move choice."""

    seed: int | None = None
    use_special_discs: bool = True


@dataclass(slots=True, frozen=True)
class MoveChoice:
    """A placement picked by a strategy, with its previewed capture count."""

    position: Position
    kind: DiscKind = DiscKind.PLAIN
    captures: int = 0


class IStrategy(Protocol):
    """Protocol for automated players.

    Implementations read the engine (legal moves, capture previews,
    allowances) and must never mutate it.
    """

    def choose(
        self,
        engine: GameEngine,
        limits: StrategyLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> MoveChoice | None: ...
