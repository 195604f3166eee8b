"""Board coordinates and geometry helpers.

Layout: row 0 is the top edge, column 0 the left edge; both run 0–7.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

BOARD_SIZE = 8

Direction: TypeAlias = tuple[int, int]  # (d_row, d_col)

DIRECTIONS: tuple[Direction, ...] = (
    (1, 1),
    (1, 0),
    (-1, 0),
    (-1, 1),
    (1, -1),
    (-1, -1),
    (0, 1),
    (0, -1),
)


def is_on_board(row: int, col: int) -> bool:
    """Check whether ``(row, col)`` lies inside the 8×8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable board coordinate with value equality."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.col):
            raise ValueError(f"Position off the board: ({self.row}, {self.col})")

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def ray(self, direction: Direction) -> tuple[Position, ...]:
        """Cells from (but excluding) this one to the edge along *direction*."""
        return _RAYS[self][direction]

    def neighbours(self) -> tuple[Position, ...]:
        """The up to eight cells at distance one."""
        return _NEIGHBOURS[self]


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> dict[Position, dict[Direction, tuple[Position, ...]]]:
    rays: dict[Position, dict[Direction, tuple[Position, ...]]] = {}
    for pos in ALL_POSITIONS:
        per_direction: dict[Direction, tuple[Position, ...]] = {}
        for d_row, d_col in DIRECTIONS:
            row = pos.row + d_row
            col = pos.col + d_col
            ray: list[Position] = []
            while is_on_board(row, col):
                ray.append(Position(row, col))
                row += d_row
                col += d_col
            per_direction[(d_row, d_col)] = tuple(ray)
        rays[pos] = per_direction
    return rays


def _build_neighbours(
    rays: dict[Position, dict[Direction, tuple[Position, ...]]],
) -> dict[Position, tuple[Position, ...]]:
    return {
        pos: tuple(ray[0] for ray in rays[pos].values() if ray)
        for pos in ALL_POSITIONS
    }


_RAYS = _build_rays()
_NEIGHBOURS = _build_neighbours(_RAYS)
