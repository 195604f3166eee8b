"""Tests for the built-in move-selection strategies."""

from reversie.ai import GreedyStrategy, RandomStrategy, StrategyLimits
from reversie.core.enums import DiscKind, PlayerSlot
from reversie.core.notation import board_to_text
from reversie.core.types import Position
from reversie.game.engine import GameEngine
from reversie.game.player import HumanPlayer


def _layout(*rows: str) -> str:
    filled = [r or "........" for r in rows]
    filled += ["........"] * (8 - len(filled))
    return "/".join(filled)


def _engine(layout: str | None = None) -> GameEngine:
    engine = GameEngine(
        HumanPlayer(PlayerSlot.FIRST, "A"),
        HumanPlayer(PlayerSlot.SECOND, "B"),
    )
    if layout is not None:
        engine.reset(layout)
    return engine


class TestGreedyStrategy:
    def test_opening_tie_goes_to_highest_column(self) -> None:
        choice = GreedyStrategy().choose(_engine(), StrategyLimits())
        assert choice is not None
        assert choice.position == Position(3, 5)
        assert choice.kind == DiscKind.PLAIN
        assert choice.captures == 1

    def test_prefers_larger_capture(self) -> None:
        engine = _engine(_layout("XOO.....", "", "", "", "", "", "", "XO......"))
        choice = GreedyStrategy().choose(engine, StrategyLimits())
        assert choice is not None
        assert choice.position == Position(0, 3)
        assert choice.captures == 2

    def test_column_tie_goes_to_highest_row(self) -> None:
        engine = _engine(_layout("XO......", "", "", "", "", "", "", "XO......"))
        choice = GreedyStrategy().choose(engine, StrategyLimits())
        assert choice is not None
        assert choice.position == Position(7, 2)

    def test_limits_do_not_change_choice(self) -> None:
        engine = _engine()
        strategy = GreedyStrategy()
        default = strategy.choose(engine, StrategyLimits())
        tuned = strategy.choose(engine, StrategyLimits(seed=4, use_special_discs=False))
        assert default == tuned

    def test_no_legal_move_returns_none(self) -> None:
        engine = _engine(_layout("OX......"))
        assert GreedyStrategy().choose(engine, StrategyLimits()) is None

    def test_cancel_before_first_candidate(self) -> None:
        choice = GreedyStrategy().choose(
            _engine(), StrategyLimits(), is_cancelled=lambda: True
        )
        assert choice is None


class TestRandomStrategy:
    def test_choice_is_legal(self) -> None:
        engine = _engine()
        choice = RandomStrategy().choose(engine, StrategyLimits(seed=3))
        assert choice is not None
        assert choice.position in engine.legal_moves()
        assert choice.captures == engine.capture_count(choice.position)

    def test_same_seed_same_choices(self) -> None:
        engine = _engine()
        a, b = RandomStrategy(), RandomStrategy()
        limits = StrategyLimits(seed=1234)
        picks_a = [a.choose(engine, limits) for _ in range(5)]
        picks_b = [b.choose(engine, limits) for _ in range(5)]
        assert picks_a == picks_b

    def test_specials_disabled_gives_plain(self) -> None:
        engine = _engine()
        strategy = RandomStrategy()
        limits = StrategyLimits(seed=7, use_special_discs=False)
        for _ in range(20):
            choice = strategy.choose(engine, limits)
            assert choice is not None
            assert choice.kind == DiscKind.PLAIN

    def test_unaffordable_kinds_never_chosen(self, plain_engine: GameEngine) -> None:
        strategy = RandomStrategy()
        for _ in range(20):
            choice = strategy.choose(plain_engine, StrategyLimits(seed=11))
            assert choice is not None
            assert choice.kind == DiscKind.PLAIN

    def test_plays_a_full_game(self) -> None:
        engine = _engine()
        strategy = RandomStrategy()
        limits = StrategyLimits(seed=99)
        while not engine.is_game_over():
            choice = strategy.choose(engine, limits)
            assert choice is not None
            assert engine.apply_move(choice.position, choice.kind)
        assert engine.board.occupied_count() == 4 + engine.ply_count


class TestStrategiesAreReadOnly:
    def test_engine_untouched(self) -> None:
        engine = _engine()
        before = board_to_text(engine.board)
        for strategy in (GreedyStrategy(), RandomStrategy()):
            strategy.choose(engine, StrategyLimits(seed=5))
        assert board_to_text(engine.board) == before
        assert engine.active == PlayerSlot.FIRST
        assert engine.ply_count == 0
        assert engine.player(PlayerSlot.FIRST).bombs_left == 3
        assert engine.player(PlayerSlot.FIRST).immune_left == 2
