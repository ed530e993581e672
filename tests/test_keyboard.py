"""Tests for keyboard input parsing"""

import os

import pytest

from termsnake.core.direction import Direction
from termsnake.ui.keyboard import (
    QUIT_KEYS,
    RawKeyboard,
    key_to_direction,
    parse_keys,
    split_incomplete,
)


class TestParseKeys:
    """Test parse_keys function"""

    def test_arrow_keys(self):
        assert parse_keys("\x1b[A\x1b[B\x1b[C\x1b[D") == ["up", "down", "right", "left"]

    def test_application_mode_arrows(self):
        assert parse_keys("\x1bOA") == ["up"]

    def test_lone_escape(self):
        assert parse_keys("\x1b") == ["esc"]

    def test_printable_lowercased(self):
        assert parse_keys("WaQ") == ["w", "a", "q"]

    def test_ctrl_c(self):
        assert parse_keys("\x03") == ["ctrl-c"]

    def test_unknown_sequence_dropped(self):
        assert parse_keys("\x1b[Zx") == ["x"]

    def test_mixed(self):
        assert parse_keys("d\x1b[Aq") == ["d", "up", "q"]

    def test_cut_off_sequence_is_single_escape(self):
        assert parse_keys("\x1b[") == ["esc"]


class TestSplitIncomplete:
    """Test holding back a trailing escape sequence"""

    @pytest.mark.parametrize(
        "data,complete,tail",
        [
            ("wasd", "wasd", ""),
            ("d\x1b", "d", "\x1b"),
            ("d\x1b[", "d", "\x1b["),
            ("\x1bO", "", "\x1bO"),
            ("\x1b[A", "\x1b[A", ""),
            ("", "", ""),
        ],
    )
    def test_split(self, data, complete, tail):
        assert split_incomplete(data) == (complete, tail)


class TestKeyMapping:
    """Test key to direction mapping"""

    @pytest.mark.parametrize(
        "key,direction",
        [
            ("up", Direction.UP),
            ("w", Direction.UP),
            ("k", Direction.UP),
            ("down", Direction.DOWN),
            ("s", Direction.DOWN),
            ("left", Direction.LEFT),
            ("a", Direction.LEFT),
            ("right", Direction.RIGHT),
            ("l", Direction.RIGHT),
        ],
    )
    def test_direction_keys(self, key, direction):
        assert key_to_direction(key) is direction

    def test_other_keys(self):
        assert key_to_direction("x") is None
        assert key_to_direction("q") is None

    def test_quit_keys(self):
        assert "q" in QUIT_KEYS
        assert "esc" in QUIT_KEYS
        assert "ctrl-c" in QUIT_KEYS


class TestRawKeyboard:
    """Test RawKeyboard over a pipe"""

    def test_reads_from_pipe(self):
        read_fd, write_fd = os.pipe()
        try:
            with os.fdopen(read_fd, "r") as stream:
                os.write(write_fd, b"\x1b[Aq")
                with RawKeyboard(stream) as keyboard:
                    assert keyboard.read_key(0.5) == "up"
                    assert keyboard.read_key(0.0) == "q"
                    assert keyboard.read_key(0.0) is None
        finally:
            os.close(write_fd)

    def test_arrow_split_across_reads(self):
        """An escape byte arriving alone waits for the rest of the arrow sequence"""
        read_fd, write_fd = os.pipe()
        try:
            with os.fdopen(read_fd, "r") as stream:
                with RawKeyboard(stream) as keyboard:
                    os.write(write_fd, b"\x1b")
                    assert keyboard.read_key(0.5) is None

                    os.write(write_fd, b"[A")
                    assert keyboard.read_key(0.5) == "up"
                    assert keyboard.read_key(0.0) is None
        finally:
            os.close(write_fd)

    def test_lone_escape_after_timeout(self):
        read_fd, write_fd = os.pipe()
        try:
            with os.fdopen(read_fd, "r") as stream:
                with RawKeyboard(stream) as keyboard:
                    os.write(write_fd, b"\x1b")
                    assert keyboard.read_key(0.5) is None
                    assert keyboard.read_key(0.0) == "esc"
                    assert keyboard.read_key(0.0) is None
        finally:
            os.close(write_fd)
