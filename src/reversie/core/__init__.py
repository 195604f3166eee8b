"""Core domain layer — pure reversi rules with zero external dependencies.

Quick start::

    from reversie.core import Board, FlipResolver, MoveValidator, PlayerSlot

    board = Board.initial()
    for pos in MoveValidator(board).legal_moves(PlayerSlot.FIRST):
        print(pos, FlipResolver(board).resolve(pos, PlayerSlot.FIRST))
"""

from reversie.core.board import Board
from reversie.core.disc import Disc
from reversie.core.enums import DiscKind, GameResult, PlayerSlot
from reversie.core.flip_resolver import FlipResolver
from reversie.core.history import MoveHistory
from reversie.core.move import Move
from reversie.core.move_validator import MoveValidator
from reversie.core.notation import STARTING_LAYOUT, board_from_text, board_to_text
from reversie.core.rules import Rules
from reversie.core.types import (
    ALL_POSITIONS,
    BOARD_SIZE,
    DIRECTIONS,
    Direction,
    Position,
    is_on_board,
)

__all__ = [
    # Enums
    "DiscKind",
    "GameResult",
    "PlayerSlot",
    # Types / helpers
    "ALL_POSITIONS",
    "BOARD_SIZE",
    "DIRECTIONS",
    "Direction",
    "Position",
    "is_on_board",
    # Domain objects
    "Board",
    "Disc",
    "FlipResolver",
    "Move",
    "MoveHistory",
    "MoveValidator",
    "Rules",
    # Notation
    "STARTING_LAYOUT",
    "board_from_text",
    "board_to_text",
]
