"""Random strategy: any legal cell, any disc kind the player can afford."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from reversie.ai.strategy import CancelCheck, MoveChoice, StrategyLimits
from reversie.core.enums import DiscKind

if TYPE_CHECKING:
    from reversie.game.engine import GameEngine


class RandomStrategy:
    """Uniform choice over legal placements and affordable disc kinds.

    A fixed ``StrategyLimits.seed`` makes the sequence of choices
    reproducible across runs.
    """

    __slots__ = ("_rng", "_seed")

    def __init__(self) -> None:
        self._rng = random.Random()
        self._seed: int | None = None

    def choose(
        self,
        engine: GameEngine,
        limits: StrategyLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> MoveChoice | None:
        if limits.seed is not None and limits.seed != self._seed:
            self._rng.seed(limits.seed)
            self._seed = limits.seed

        options = sorted(engine.legal_moves())
        if not options or (is_cancelled is not None and is_cancelled()):
            return None

        position = self._rng.choice(options)
        kinds = [DiscKind.PLAIN]
        if limits.use_special_discs:
            player = engine.current_player
            kinds += [
                kind
                for kind in (DiscKind.VOLATILE, DiscKind.IMMUNE)
                if player.can_afford(kind)
            ]
        kind = self._rng.choice(kinds)
        return MoveChoice(
            position=position,
            kind=kind,
            captures=engine.capture_count(position),
        )
