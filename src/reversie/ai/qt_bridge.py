"""Qt bridge to run a move-selection strategy in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from reversie.ai.greedy import GreedyStrategy
from reversie.ai.strategy import IStrategy, StrategyLimits
from reversie.game.engine import GameEngine

_LOGGER = logging.getLogger(__name__)


class StrategyWorker(QObject):
    """Thread-affine worker that picks computer moves on demand.

    The worker only reads the engine. The chosen placement is emitted via
    ``move_ready`` and applied by the controller on its own thread.
    """

    move_ready = pyqtSignal(int, object, int, int)  # request, position, kind, captures
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_strategy", "_limits")

    def __init__(
        self,
        strategy: IStrategy | None = None,
        *,
        seed: int | None = None,
        use_special_discs: bool = True,
    ) -> None:
        super().__init__()
        self._strategy: IStrategy = (
            strategy if strategy is not None else GreedyStrategy()
        )
        self._limits = StrategyLimits(seed=seed, use_special_discs=use_special_discs)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, engine_obj: object, request_id: int) -> None:
        """Choose a move for the side to move in *engine_obj* and emit it."""
        if not isinstance(engine_obj, GameEngine):
            self.search_error.emit(request_id, "Strategy received invalid engine")
            return

        self._cancel_event.clear()
        try:
            choice = self._strategy.choose(
                engine_obj,
                self._limits,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            _LOGGER.exception("Strategy failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if choice is None:
            self.search_no_move.emit(request_id)
            return

        self.move_ready.emit(
            request_id,
            choice.position,
            int(choice.kind),
            choice.captures,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current choice."""
        self._cancel_event.set()

    @pyqtSlot(bool)
    def set_use_special_discs(self, enabled: bool) -> None:
        """Update the special-disc policy (takes effect on the next request)."""
        self._limits = StrategyLimits(seed=self._limits.seed, use_special_discs=enabled)
