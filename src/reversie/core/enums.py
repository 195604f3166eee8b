"""Core enumerations for the reversie domain."""

from __future__ import annotations

from enum import IntEnum


class PlayerSlot(IntEnum):
    """Seat identity of a participant. Discs store this, never the player."""

    FIRST = 0
    SECOND = 1

    @property
    def opposite(self) -> PlayerSlot:
        return PlayerSlot(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class DiscKind(IntEnum):
    """The three disc kinds a player can place."""

    PLAIN = 0
    VOLATILE = 1  # captured → explodes into its neighbours
    IMMUNE = 2  # never captured, transparent to rays


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    FIRST_WINS = 1
    SECOND_WINS = 2
    DRAW = 3
