"""Tests for the style and cursor code tables."""

import pytest

from sgrtok.codes import (
    CURSOR_CODES,
    STYLE_CODES,
    CursorCode,
    UnknownCodeError,
    cursor_code,
    cursor_sequence,
    style_code,
)


def test_style_names_are_unique() -> None:
    """Names and aliases never collide once lowercased."""
    names = [code.name.lower() for code in STYLE_CODES]
    names += [alias.lower() for code in STYLE_CODES for alias in code.aliases]
    names += [code.name.lower() for code in CURSOR_CODES]
    assert len(names) == len(set(names))


def test_style_sequence() -> None:
    """Style sequences are CSI <value> m."""
    assert style_code("bold").sequence() == "\x1b[1m"
    assert style_code("bgMagenta").sequence() == "\x1b[45m"
    assert style_code("reset").sequence() == "\x1b[0m"


def test_style_code_by_alias() -> None:
    """Aliases resolve to their canonical style code."""
    assert style_code("b") is style_code("bold")
    assert style_code("/") is style_code("reset")
    assert style_code("U") is style_code("underline")


def test_style_code_ignores_case() -> None:
    """Lookup by name is case insensitive."""
    assert style_code("BGRED").value == 41


def test_unknown_code() -> None:
    """Unknown names raise UnknownCodeError, a KeyError."""
    with pytest.raises(UnknownCodeError):
        style_code("purple")
    with pytest.raises(KeyError):
        cursor_code("goNowhere")


@pytest.mark.parametrize(
    ("name", "mods", "expected"),
    [
        ("goUp", (3,), "[3A"),
        ("goLeft", (), "[0D"),
        ("goRight", (-5,), "[0C"),
        ("goTo", (4, 12), "[4;12H"),
        ("goTo", (-1, 2), "[0;2H"),
        ("clearLine", (7, 8), "[2K"),
        ("trimRight", (), "[K"),
    ],
)
def test_cursor_render(
    name: str, mods: tuple[int, ...], expected: str
) -> None:
    """Templates are filled with values clamped to zero."""
    assert cursor_code(name).render(*mods) == expected


def test_cursor_render_without_fields() -> None:
    """A template without fields renders as is."""
    assert CursorCode("home", "[H").render(5, 5) == "[H"


def test_cursor_sequence() -> None:
    """cursor_sequence() prefixes the rendered template with ESC."""
    assert cursor_sequence("goTo", 3, 7) == "\x1b[3;7H"
    assert cursor_sequence("GODOWN", 2) == "\x1b[2B"
