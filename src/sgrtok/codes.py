"""Static tables of SGR style codes and cursor control codes."""

from dataclasses import dataclass

from sgrtok.ansi import ESC


class UnknownCodeError(KeyError):
    """Code name not found in the style or cursor tables."""


@dataclass(frozen=True)
class StyleCode:
    """SGR style or color, with optional short aliases."""

    name: str
    value: int
    aliases: tuple[str, ...] = ()

    def sequence(self) -> str:
        """Return the escape sequence selecting this style."""
        return f"{ESC}[{self.value}m"


@dataclass(frozen=True)
class CursorCode:
    """Cursor control command, the template holds up to two %d fields."""

    name: str
    template: str

    def render(self, mod1: int = 0, mod2: int = 0) -> str:
        """Substitute the template fields, negative values are clamped to 0."""
        fields = self.template.count("%d")
        args = (max(0, mod1), max(0, mod2))[:fields]
        return self.template % args


STYLE_CODES: tuple[StyleCode, ...] = (
    # Full reset
    StyleCode("reset", 0, ("/",)),
    # Reset foreground color
    StyleCode("reset2", 39),
    # Text styles
    StyleCode("bold", 1, ("b",)),
    StyleCode("dim", 2),
    StyleCode("italic", 3),
    StyleCode("underline", 4, ("u",)),
    StyleCode("blink", 5),
    StyleCode("blink2", 6),
    StyleCode("reverse", 7),
    StyleCode("hidden", 8),
    StyleCode("strike", 9),
    StyleCode("underline2", 21),
    StyleCode("overline", 53),
    # Foreground colors
    StyleCode("red", 31),
    StyleCode("red2", 91),
    StyleCode("green", 32),
    StyleCode("green2", 92),
    StyleCode("yellow", 33),
    StyleCode("yellow2", 93),
    StyleCode("blue", 34),
    StyleCode("blue2", 94),
    StyleCode("magenta", 35),
    StyleCode("magenta2", 95),
    StyleCode("cyan", 36),
    StyleCode("cyan2", 96),
    StyleCode("white", 37),
    StyleCode("white2", 97),
    StyleCode("black", 30),
    StyleCode("grey", 90),
    # Background colors
    StyleCode("bgRed", 41),
    StyleCode("bgRed2", 101),
    StyleCode("bgGreen", 42),
    StyleCode("bgGreen2", 102),
    StyleCode("bgYellow", 43),
    StyleCode("bgYellow2", 103),
    StyleCode("bgBlue", 44),
    StyleCode("bgBlue2", 104),
    StyleCode("bgMagenta", 45),
)

CURSOR_CODES: tuple[CursorCode, ...] = (
    CursorCode("goLeft", "[%dD"),
    CursorCode("goRight", "[%dC"),
    CursorCode("goUp", "[%dA"),
    CursorCode("goDown", "[%dB"),
    CursorCode("goTo", "[%d;%dH"),
    CursorCode("atLineStart", "[G"),
    CursorCode("clearLine", "[2K"),
    CursorCode("trimLeft", "[1K"),
    CursorCode("trimRight", "[K"),
    CursorCode("clearScreen", "[2J"),
    CursorCode("clearLeft", "[1J"),
    CursorCode("clearRight", "[J"),
)

# Registered with a magnitude of 1
DIRECTIONAL_CURSORS: frozenset[str] = frozenset(
    {"goUp", "goRight", "goDown", "goLeft"}
)

# Two fields with no sensible default, registered as a bare ESC
GOTO_CURSOR = "goTo"

_STYLES_BY_NAME = {code.name.lower(): code for code in STYLE_CODES}
_CURSORS_BY_NAME = {code.name.lower(): code for code in CURSOR_CODES}


def style_code(name: str) -> StyleCode:
    """Find a style code by name or alias, ignoring case."""
    key = name.lower()
    if key in _STYLES_BY_NAME:
        return _STYLES_BY_NAME[key]
    for code in STYLE_CODES:
        if key in (alias.lower() for alias in code.aliases):
            return code
    raise UnknownCodeError(name)


def cursor_code(name: str) -> CursorCode:
    """Find a cursor code by name, ignoring case."""
    try:
        return _CURSORS_BY_NAME[name.lower()]
    except KeyError:
        raise UnknownCodeError(name) from None


def cursor_sequence(name: str, mod1: int = 0, mod2: int = 0) -> str:
    """Return the escape sequence for a cursor command with explicit values.

    >>> cursor_sequence("goTo", 3, 7)
    '\\x1b[3;7H'
    """
    return ESC + cursor_code(name).render(mod1, mod2)
