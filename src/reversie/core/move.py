"""Move value object: one applied placement and everything it captured."""

from __future__ import annotations

from dataclasses import dataclass, field

from reversie.core.disc import Disc
from reversie.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a placement, kept on the history stack for undo."""

    disc: Disc
    position: Position
    captured: frozenset[Position] = field(default_factory=frozenset)

    def __str__(self) -> str:
        return f"{self.disc.symbol} {self.position} x{len(self.captured)}"
