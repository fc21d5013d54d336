"""Tests for the game mode selector."""

import pytest

from tictactoe.mode import GameMode, ModeSelector


class TestModeSelector:

    def test_default_mode(self, selector):
        assert selector.mode is GameMode.VS_AI

    def test_accepts_value(self):
        assert ModeSelector("pvp").mode is GameMode.TWO_PLAYER

    def test_change_is_announced(self, selector):
        seen = []
        selector.mode_changed.connect(lambda mode: seen.append(mode))
        selector.set_mode(GameMode.TWO_PLAYER)
        assert seen == ["pvp"]

    def test_same_mode_is_silent(self, selector):
        seen = []
        selector.mode_changed.connect(lambda mode: seen.append(mode))
        selector.set_mode("ai")
        assert seen == []

    def test_toggle(self, selector):
        selector.toggle()
        assert selector.mode is GameMode.TWO_PLAYER
        selector.toggle()
        assert selector.mode is GameMode.VS_AI

    def test_unknown_mode(self, selector):
        with pytest.raises(ValueError):
            selector.set_mode("online")
