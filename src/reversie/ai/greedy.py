"""Greedy strategy: take the placement that captures the most discs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reversie.ai.strategy import CancelCheck, MoveChoice, StrategyLimits
from reversie.core.enums import DiscKind

if TYPE_CHECKING:
    from reversie.game.engine import GameEngine


class GreedyStrategy:
    """Maximises the immediate capture count with a plain disc.

    Ties go to the highest column, then the highest row.
    """

    __slots__ = ()

    def choose(
        self,
        engine: GameEngine,
        limits: StrategyLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> MoveChoice | None:
        best: MoveChoice | None = None
        best_key: tuple[int, int, int] | None = None
        for pos in engine.legal_moves():
            if is_cancelled is not None and is_cancelled():
                return best
            count = engine.capture_count(pos)
            key = (count, pos.col, pos.row)
            if best_key is None or key > best_key:
                best_key = key
                best = MoveChoice(position=pos, kind=DiscKind.PLAIN, captures=count)
        return best
