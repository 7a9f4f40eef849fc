from __future__ import annotations

import pytest

from src.rendering.colors import NamedColor, Rgb, parse_color_pair, parse_hex_color


def test_shorthand_hex_duplicates_nibbles() -> None:
    assert parse_hex_color("f0a") == Rgb(0xFF, 0x00, 0xAA)


def test_full_hex() -> None:
    assert parse_hex_color("1a2b3c") == Rgb(0x1A, 0x2B, 0x3C)
    assert parse_hex_color("1A2B3C") == Rgb(0x1A, 0x2B, 0x3C)


@pytest.mark.parametrize("token", ["zz", "12", "", "ffff", "12345", "1234567", "ggg", "#fff", "red"])
def test_invalid_tokens_yield_no_color(token: str) -> None:
    assert parse_hex_color(token) is None


def test_color_pair_is_background_then_foreground() -> None:
    bg, fg = parse_color_pair("f00~fff")

    assert bg == Rgb(0xFF, 0x00, 0x00)
    assert fg == Rgb(0xFF, 0xFF, 0xFF)


def test_color_pair_missing_or_broken_slots() -> None:
    assert parse_color_pair("") == (None, None)
    assert parse_color_pair("039") == (Rgb(0x00, 0x33, 0x99), None)
    assert parse_color_pair("~fff") == (None, Rgb(0xFF, 0xFF, 0xFF))
    assert parse_color_pair("xyz~fff") == (None, Rgb(0xFF, 0xFF, 0xFF))
    assert parse_color_pair("f00~fff~000") == (Rgb(0xFF, 0x00, 0x00), Rgb(0xFF, 0xFF, 0xFF))


def test_css_forms() -> None:
    assert Rgb(0x1A, 0x2B, 0x3C).css() == "#1a2b3c"
    assert NamedColor.WHITE.css() == "#fff"
    assert NamedColor.RED.ansi_index == 1
