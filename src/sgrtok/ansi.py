"""ANSI escape sequence constants and token grammars."""

import re

ESC = "\x1b"

# Full reset, appended after parsed output
RESET = f"{ESC}[0m"

# Printable spelling of ESC used for exportable output
LITERAL_ESC = "\\x1b"

# Style token: {bold}, {/}, {///}, {name,1}, {name,12,34}
TOKEN_REGEX = re.compile(
    r"""
    \{
    (?:
        (
            [a-z]+            # Identifier
            (,?[1-9][0-9]?){0,2}  # Up to two values in 1-99, no leading zero
        )
        |
        /                     # Reset shorthand
    )+
    }
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

_SEQ_BODY = r"""
    \[            # CSI
    [0-9;]*       # Parameters
    (m|[A-Z])     # Final byte: m for styles, a letter for cursor commands
"""

# Escape sequences written out as text: \e[1m, \x1b[1m, \033[1m
LITERAL_SEQ_REGEX = re.compile(
    r"\\(e|x1b|033)" + _SEQ_BODY,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

# Escape sequences with an actual ESC character
ESCAPE_SEQ_REGEX = re.compile(
    r"\x1b" + _SEQ_BODY,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

# Either form
ANY_SEQ_REGEX = re.compile(
    r"(\x1b|\\(e|x1b|033))" + _SEQ_BODY,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def to_literal(text: str) -> str:
    r"""Replace every ESC character with its printable \x1b spelling."""
    return text.replace(ESC, LITERAL_ESC)
