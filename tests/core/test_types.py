"""Tests for Position and board geometry."""

import pytest

from reversie.core.types import ALL_POSITIONS, DIRECTIONS, Position, is_on_board


class TestPosition:
    def test_value_equality_and_hash(self) -> None:
        assert Position(3, 4) == Position(3, 4)
        assert len({Position(3, 4), Position(3, 4), Position(4, 3)}) == 2

    def test_immutable(self) -> None:
        pos = Position(1, 2)
        with pytest.raises(AttributeError):
            pos.row = 5  # type: ignore[misc]

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_off_board_raises(self, row: int, col: int) -> None:
        with pytest.raises(ValueError, match="off the board"):
            Position(row, col)

    def test_str(self) -> None:
        assert str(Position(2, 5)) == "(2, 5)"

    def test_ordering_is_row_major(self) -> None:
        assert sorted([Position(1, 0), Position(0, 7)]) == [
            Position(0, 7),
            Position(1, 0),
        ]


class TestGeometry:
    def test_eight_unit_directions(self) -> None:
        assert len(set(DIRECTIONS)) == 8
        assert (0, 0) not in DIRECTIONS
        assert all(abs(dr) <= 1 and abs(dc) <= 1 for dr, dc in DIRECTIONS)

    def test_all_positions(self) -> None:
        assert len(ALL_POSITIONS) == 64
        assert len(set(ALL_POSITIONS)) == 64

    def test_is_on_board(self) -> None:
        assert is_on_board(0, 0)
        assert is_on_board(7, 7)
        assert not is_on_board(8, 7)

    def test_ray_runs_to_edge(self) -> None:
        assert Position(5, 5).ray((1, 1)) == (Position(6, 6), Position(7, 7))
        assert Position(0, 3).ray((-1, 0)) == ()

    def test_corner_has_three_neighbours(self) -> None:
        assert set(Position(0, 0).neighbours()) == {
            Position(0, 1),
            Position(1, 0),
            Position(1, 1),
        }

    def test_centre_has_eight_neighbours(self) -> None:
        assert len(Position(4, 4).neighbours()) == 8
