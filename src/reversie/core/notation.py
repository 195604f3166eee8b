"""Text layout parsing and serialization.

A layout is eight rows of eight characters, top row first, separated by
``/`` or newlines::

    ......../......../......../...XO.../...OX.../......../......../........

``.`` is an empty cell, ``X``/``O`` plain discs, ``B``/``b`` bombs and
``U``/``u`` immune discs (upper case = first player).
"""

from __future__ import annotations

from reversie.core.board import Board
from reversie.core.disc import Disc
from reversie.core.types import BOARD_SIZE, Position

EMPTY_CHAR = "."

STARTING_LAYOUT = "/".join(
    (
        "........",
        "........",
        "........",
        "...XO...",
        "...OX...",
        "........",
        "........",
        "........",
    )
)


def board_from_text(text: str) -> Board:
    """Parse a layout string into a :class:`Board`."""
    rows = [row.strip() for row in text.replace("\n", "/").split("/")]
    rows = [row for row in rows if row]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid layout (must contain {BOARD_SIZE} rows): {text!r}")

    board = Board()
    for r, row_text in enumerate(rows):
        if len(row_text) != BOARD_SIZE:
            raise ValueError(f"Invalid layout row width: {row_text!r}")
        for c, ch in enumerate(row_text):
            if ch == EMPTY_CHAR:
                continue
            board.place(Position(r, c), Disc.from_char(ch))
    return board


def board_to_text(board: Board) -> str:
    """Serialize *board* to a single-line layout string."""
    rows: list[str] = []
    for r in range(BOARD_SIZE):
        row = []
        for c in range(BOARD_SIZE):
            disc = board[Position(r, c)]
            row.append(str(disc) if disc is not None else EMPTY_CHAR)
        rows.append("".join(row))
    return "/".join(rows)
