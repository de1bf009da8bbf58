"""Token registry: builds and caches the token to escape sequence map."""

import re
import threading

from rich.markup import escape

from sgrtok.ansi import ESC
from sgrtok.codes import (
    CURSOR_CODES,
    DIRECTIONAL_CURSORS,
    GOTO_CURSOR,
    STYLE_CODES,
    CursorCode,
)
from sgrtok.console import print_event, print_verbose


class UnknownTokenError(KeyError):
    """Token not found in the registry."""

    def __init__(self, token: str) -> None:
        """Initialize with the requested token."""
        self.token = token
        super().__init__(f"Unknown token: {token!r}")

    def __rich__(self) -> str:
        """Rich formatted error message."""
        return f"Unknown token [bold]{escape(self.token)}[/]"


def _cursor_value(code: CursorCode) -> str:
    if code.name in DIRECTIONAL_CURSORS:
        return code.render(1)
    if code.name == GOTO_CURSOR:
        return ""
    return code.template


class Registry:
    """Lazily built map from braced tokens to escape sequences.

    The map is built once, on the first call that needs it, and stays
    unchanged until reset(). Building only reads the static code tables, so a
    rebuild after reset() gives identical content.
    """

    def __init__(self) -> None:
        """Create an empty, unbuilt registry."""
        self._lock = threading.Lock()
        self._built = False
        self._tokens: list[str] = []
        self._map: dict[str, str] = {}
        # Pattern and map, published together in one assignment
        self._compiled: tuple[re.Pattern[str], dict[str, str]] | None = None

    @property
    def is_built(self) -> bool:
        """Check whether the map has been built."""
        return self._built

    def build(self) -> None:
        """Build the token map, does nothing if already built."""
        if self._built:
            return
        with self._lock:
            if self._built:
                return

            codes: dict[str, str] = {}
            for style in STYLE_CODES:
                codes[style.name.lower()] = style.sequence()
                for alias in style.aliases:
                    codes[alias.lower()] = style.sequence()
            for cursor in CURSOR_CODES:
                codes[cursor.name.lower()] = ESC + _cursor_value(cursor)

            self._tokens = list(codes)
            self._map = {"{" + k + "}": v for k, v in codes.items()}
            pattern = re.compile(
                "|".join(
                    re.escape(key)
                    for key in sorted(self._map, key=len, reverse=True)
                )
            )
            self._compiled = (pattern, dict(self._map))
            self._built = True
        print_event(f"Token registry built: {len(self._tokens)} tokens")

    def reset(self) -> None:
        """Discard the cached map, the next build starts from scratch."""
        with self._lock:
            self._built = False
            self._tokens = []
            self._map = {}
            self._compiled = None
        print_verbose("Token registry reset")

    def tokens(self) -> list[str]:
        """Return the token names, empty before build."""
        return list(self._tokens)

    def inspect(self) -> dict[str, str]:
        """Return the braced token to sequence map, empty before build."""
        return dict(self._map)

    def lookup(self, token: str) -> str:
        """Return the escape sequence for a bare or braced token."""
        self.build()
        key = token.lower()
        if not key.startswith("{"):
            key = "{" + key + "}"
        try:
            return self._map[key]
        except KeyError:
            raise UnknownTokenError(token) from None

    def substitute(self, text: str) -> str:
        """Replace every known token in a single pass, others are kept."""
        self.build()
        compiled = self._compiled
        if compiled is None:
            return text
        pattern, mapping = compiled
        return pattern.sub(lambda m: mapping[m.group(0)], text)
