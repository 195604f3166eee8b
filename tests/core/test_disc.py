"""Tests for Disc."""

import pytest

from reversie.core.disc import Disc
from reversie.core.enums import DiscKind, PlayerSlot


class TestOwnership:
    def test_plain_owner_reassignable(self) -> None:
        disc = Disc.plain(PlayerSlot.FIRST)
        disc.set_owner(PlayerSlot.SECOND)
        assert disc.owner == PlayerSlot.SECOND

    def test_volatile_owner_reassignable(self) -> None:
        disc = Disc.volatile(PlayerSlot.SECOND)
        disc.set_owner(PlayerSlot.FIRST)
        assert disc.owner == PlayerSlot.FIRST

    def test_immune_owner_fixed(self) -> None:
        disc = Disc.immune(PlayerSlot.FIRST)
        disc.set_owner(PlayerSlot.SECOND)  # silently ignored
        assert disc.owner == PlayerSlot.FIRST


class TestKind:
    def test_flags(self) -> None:
        assert Disc.immune(PlayerSlot.FIRST).is_immune
        assert Disc.volatile(PlayerSlot.FIRST).is_volatile
        plain = Disc.plain(PlayerSlot.FIRST)
        assert plain.kind == DiscKind.PLAIN
        assert not plain.is_immune and not plain.is_volatile

    def test_symbols(self) -> None:
        assert Disc.plain(PlayerSlot.FIRST).symbol == "⬤"
        assert Disc.volatile(PlayerSlot.FIRST).symbol == "💣"
        assert Disc.immune(PlayerSlot.FIRST).symbol == "⭕"


class TestSerialisation:
    @pytest.mark.parametrize("char", ["X", "O", "B", "b", "U", "u"])
    def test_char_round_trip(self, char: str) -> None:
        assert str(Disc.from_char(char)) == char

    def test_from_char_case_selects_owner(self) -> None:
        assert Disc.from_char("B") == Disc.volatile(PlayerSlot.FIRST)
        assert Disc.from_char("u") == Disc.immune(PlayerSlot.SECOND)

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid disc character"):
            Disc.from_char("z")

    def test_copy_is_independent(self) -> None:
        disc = Disc.plain(PlayerSlot.FIRST)
        clone = disc.copy()
        clone.set_owner(PlayerSlot.SECOND)
        assert disc.owner == PlayerSlot.FIRST
