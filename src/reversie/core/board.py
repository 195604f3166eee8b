"""Board - disc placement on the 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from reversie.core.disc import Disc
from reversie.core.enums import PlayerSlot
from reversie.core.types import ALL_POSITIONS, BOARD_SIZE, Position

_CENTRE: tuple[tuple[Position, PlayerSlot], ...] = (
    (Position(3, 3), PlayerSlot.FIRST),
    (Position(3, 4), PlayerSlot.SECOND),
    (Position(4, 3), PlayerSlot.SECOND),
    (Position(4, 4), PlayerSlot.FIRST),
)


class Board:
    """Mutable 8x8 grid of optional discs.

    No legality checking happens here; the engine validates before it
    mutates.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Disc | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Disc | None:
        return self._cells[pos.row][pos.col]

    def __setitem__(self, pos: Position, disc: Disc | None) -> None:
        self._cells[pos.row][pos.col] = disc

    def cell_at(self, pos: Position) -> Disc | None:
        return self._cells[pos.row][pos.col]

    def place(self, pos: Position, disc: Disc) -> None:
        self._cells[pos.row][pos.col] = disc

    def clear_cell(self, pos: Position) -> None:
        self._cells[pos.row][pos.col] = None

    def is_empty(self, pos: Position) -> bool:
        return self._cells[pos.row][pos.col] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, Disc]]:
        """Yield ``(position, disc)`` for every occupied cell, row by row."""
        for pos in ALL_POSITIONS:
            disc = self._cells[pos.row][pos.col]
            if disc is not None:
                yield pos, disc

    def empty_positions(self) -> list[Position]:
        return [pos for pos in ALL_POSITIONS if self.is_empty(pos)]

    def count(self, owner: PlayerSlot) -> int:
        """Number of discs currently owned by *owner*."""
        return sum(1 for _, disc in self.occupied() if disc.owner == owner)

    def occupied_count(self) -> int:
        return sum(1 for _ in self.occupied())

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [
            [disc.copy() if disc is not None else None for disc in row]
            for row in self._cells
        ]
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Canonical start: two plain discs per player on the centre diagonals."""
        b = cls()
        for pos, owner in _CENTRE:
            b.place(pos, Disc.plain(owner))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
        for r, row in enumerate(self._cells):
            cells = []
            for disc in row:
                if disc is None:
                    cells.append(".")
                else:
                    cells.append(str(disc))
            rows.append(f"{r} {' '.join(cells)}")
        return "\n".join(rows)
