"""Automated players: move-selection strategies and Qt worker bridge."""

from reversie.ai.greedy import GreedyStrategy
from reversie.ai.qt_bridge import StrategyWorker
from reversie.ai.random_strategy import RandomStrategy
from reversie.ai.strategy import IStrategy, MoveChoice, StrategyLimits

__all__ = [
    "GreedyStrategy",
    "IStrategy",
    "MoveChoice",
    "RandomStrategy",
    "StrategyLimits",
    "StrategyWorker",
]
