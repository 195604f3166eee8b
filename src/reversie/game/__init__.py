"""Game management layer — engine facade, controller, players.

Quick start::

    from reversie.core import PlayerSlot, Position
    from reversie.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        first=HumanPlayer(PlayerSlot.FIRST, "Alice"),
        second=HumanPlayer(PlayerSlot.SECOND, "Bob"),
    )
    ctrl.submit_move(Position(2, 4))
"""

from reversie.game.controller import GameController, GameEvents
from reversie.game.engine import GameEngine
from reversie.game.interfaces import (
    DiscAllowance,
    GamePhase,
    IGameController,
    IPlayer,
)
from reversie.game.player import AIPlayer, HumanPlayer

__all__ = [
    # Interfaces
    "DiscAllowance",
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEngine",
    "GameEvents",
    "HumanPlayer",
]
