"""Tests for vt.console.keys: decoding terminal input into key codes."""

from __future__ import annotations

import logging

import pytest

from vt.console.keys import (
    CSI_SEQUENCES,
    KEY_NAMES,
    Key,
    decode,
    key_name,
    parse_key,
)


# ---------------------------------------------------------------------------
# Key codes
# ---------------------------------------------------------------------------


class TestKeyCodes:
    def test_control_keys_are_their_bytes(self) -> None:
        assert Key.TAB == 9
        assert Key.ENTER == 13
        assert Key.ESCAPE == 27
        assert Key.BACKSPACE == 127

    def test_named_keys_in_private_use_area(self) -> None:
        named = [
            Key.UP, Key.DOWN, Key.RIGHT, Key.LEFT, Key.HOME, Key.END,
            Key.PAGE_UP, Key.PAGE_DOWN, Key.INSERT, Key.DELETE,
            Key.KP_HOME, Key.KP_END, Key.KP_PAGE_UP, Key.KP_PAGE_DOWN,
        ]
        assert all(0xE000 <= code <= 0xF8FF for code in named)
        assert len(set(named)) == len(named)

    def test_named_keys_are_consecutive(self) -> None:
        assert Key.UP == 0xE004
        assert Key.KP_PAGE_DOWN == Key.UP + 13

    def test_every_named_key_has_a_name(self) -> None:
        for attr in dir(Key):
            if attr.isupper():
                assert getattr(Key, attr) in KEY_NAMES


# ---------------------------------------------------------------------------
# Plain bytes
# ---------------------------------------------------------------------------


class TestPlainBytes:
    @pytest.mark.parametrize("byte", [b"a", b"Z", b"0", b" ", b"~", b"\t", b"\r", b"\x7f", b"\x01", b"\xff"])
    def test_single_byte_is_its_ordinal(self, byte: bytes) -> None:
        assert parse_key(byte) == byte[0]

    def test_trailing_bytes_ignored(self) -> None:
        assert parse_key(b"abc") == ord("a")
        assert parse_key(b"a\x1b[A") == ord("a")

    def test_named_control_bytes(self) -> None:
        assert parse_key(b"\t") == Key.TAB
        assert parse_key(b"\r") == Key.ENTER
        assert parse_key(b"\x7f") == Key.BACKSPACE

    def test_empty_is_unknown(self) -> None:
        assert parse_key(b"") == Key.UNKNOWN

    def test_every_non_escape_byte(self) -> None:
        for value in range(256):
            if value == 0x1B:
                continue
            assert parse_key(bytes([value, 0x41])) == value


# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------


class TestEscapeSequences:
    def test_lone_escape(self) -> None:
        assert parse_key(b"\x1b") == Key.ESCAPE

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"\x1b[A", Key.UP),
            (b"\x1b[B", Key.DOWN),
            (b"\x1b[C", Key.RIGHT),
            (b"\x1b[D", Key.LEFT),
            (b"\x1b[2~", Key.INSERT),
            (b"\x1b[3~", Key.DELETE),
            (b"\x1b[5~", Key.PAGE_UP),
            (b"\x1b[6~", Key.PAGE_DOWN),
            (b"\x1bOH", Key.HOME),
            (b"\x1bOF", Key.END),
        ],
    )
    def test_known_sequences(self, data: bytes, expected: int) -> None:
        assert parse_key(data) == expected

    @pytest.mark.parametrize(
        "data",
        [
            b"\x1b[",
            b"\x1b[Z",
            b"\x1b[AA",
            b"\x1b[2",
            b"\x1b[4~",
            b"\x1b[15~",
            b"\x1b[1;5A",
            b"\x1bO",
            b"\x1bOZ",
            b"\x1bOP",
            b"\x1bx",
            b"\x1b\x1b",
        ],
    )
    def test_unrecognized_sequences_are_unknown(self, data: bytes) -> None:
        assert parse_key(data) == Key.UNKNOWN

    def test_ss3_ignores_trailing_bytes(self) -> None:
        assert parse_key(b"\x1bOHxyz") == Key.HOME

    def test_csi_must_match_whole_remainder(self) -> None:
        for tail in CSI_SEQUENCES:
            assert parse_key(b"\x1b[" + tail + b"x") == Key.UNKNOWN

    def test_accepts_bytearray(self) -> None:
        assert parse_key(bytearray(b"\x1b[3~")) == Key.DELETE

    def test_decode_alias(self) -> None:
        assert decode is parse_key

    def test_unknown_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="vt.console.keys"):
            parse_key(b"\x1b[Z")
        assert "Unrecognized escape sequence" in caplog.text


# ---------------------------------------------------------------------------
# key_name
# ---------------------------------------------------------------------------


class TestKeyName:
    def test_named(self) -> None:
        assert key_name(Key.UP) == "up"
        assert key_name(Key.PAGE_DOWN) == "pageDown"
        assert key_name(Key.ENTER) == "enter"
        assert key_name(Key.UNKNOWN) == "unknown"
        assert key_name(32) == "space"

    def test_printable(self) -> None:
        assert key_name(ord("q")) == "q"
        assert key_name(ord("~")) == "~"

    def test_unnamed_control(self) -> None:
        assert key_name(1) == "0x01"
        assert key_name(0xFF) == "0xff"
