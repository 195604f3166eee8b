"""Disc: the piece a player places on the board."""

from __future__ import annotations

from reversie.core.enums import DiscKind, PlayerSlot

# Layout character ↔ (DiscKind, PlayerSlot)
_CHAR_MAP: dict[str, tuple[DiscKind, PlayerSlot]] = {
    "X": (DiscKind.PLAIN, PlayerSlot.FIRST),
    "O": (DiscKind.PLAIN, PlayerSlot.SECOND),
    "B": (DiscKind.VOLATILE, PlayerSlot.FIRST),
    "b": (DiscKind.VOLATILE, PlayerSlot.SECOND),
    "U": (DiscKind.IMMUNE, PlayerSlot.FIRST),
    "u": (DiscKind.IMMUNE, PlayerSlot.SECOND),
}

_LAYOUT_CHARS: dict[tuple[DiscKind, PlayerSlot], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

_SYMBOLS: dict[DiscKind, str] = {
    DiscKind.PLAIN: "⬤",
    DiscKind.VOLATILE: "💣",
    DiscKind.IMMUNE: "⭕",
}


class Disc:
    """A placed disc: a kind tag plus the slot that currently owns it.

    Ownership of Plain and Volatile discs changes when they are captured.
    An Immune disc keeps the owner it was created with; :meth:`set_owner`
    on it is silently ignored.
    """

    __slots__ = ("_kind", "_owner")

    def __init__(self, kind: DiscKind, owner: PlayerSlot) -> None:
        self._kind = kind
        self._owner = owner

    @classmethod
    def plain(cls, owner: PlayerSlot) -> Disc:
        return cls(DiscKind.PLAIN, owner)

    @classmethod
    def volatile(cls, owner: PlayerSlot) -> Disc:
        return cls(DiscKind.VOLATILE, owner)

    @classmethod
    def immune(cls, owner: PlayerSlot) -> Disc:
        return cls(DiscKind.IMMUNE, owner)

    @property
    def kind(self) -> DiscKind:
        return self._kind

    @property
    def owner(self) -> PlayerSlot:
        return self._owner

    @property
    def is_immune(self) -> bool:
        return self._kind == DiscKind.IMMUNE

    @property
    def is_volatile(self) -> bool:
        return self._kind == DiscKind.VOLATILE

    def set_owner(self, owner: PlayerSlot) -> None:
        if self._kind == DiscKind.IMMUNE:
            return
        self._owner = owner

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character, e.g. "b" for a second-player bomb."""
        return _LAYOUT_CHARS[(self._kind, self._owner)]

    @classmethod
    def from_char(cls, char: str) -> Disc:
        """Create a disc from its layout character, e.g. "U" → first-player immune."""
        try:
            kind, owner = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid disc character: {char!r}") from None
        return cls(kind, owner)

    @property
    def symbol(self) -> str:
        """Display glyph for the disc kind, e.g. 💣."""
        return _SYMBOLS[self._kind]

    def copy(self) -> Disc:
        return Disc(self._kind, self._owner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Disc):
            return NotImplemented
        return self._kind == other._kind and self._owner == other._owner

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Disc({self._kind.name}, {self._owner.name})"
