"""Token and escape sequence string transforms."""

from sgrtok.ansi import (
    ANY_SEQ_REGEX,
    ESCAPE_SEQ_REGEX,
    LITERAL_SEQ_REGEX,
    RESET,
    TOKEN_REGEX,
    to_literal,
)
from sgrtok.registry import Registry


def clear_tokens(text: str) -> str:
    """Remove all token-shaped text, known to the registry or not.

    Values with a leading zero, like {name,01}, are not valid tokens and are
    kept.
    """
    return TOKEN_REGEX.sub("", text)


def clear_seq(
    text: str, *, literals: bool = False, escapes: bool = True
) -> str:
    r"""Remove escape sequences from text.

    Args:
        text: Input text
        literals: Remove sequences written out as text (\e[, \x1b[, \033[)
        escapes: Remove sequences using an actual ESC character

    Returns:
        The text without the selected sequences. With both flags off, the text
        is returned unchanged.
    """
    if literals and escapes:
        return ANY_SEQ_REGEX.sub("", text)
    if literals:
        return LITERAL_SEQ_REGEX.sub("", text)
    if escapes:
        return ESCAPE_SEQ_REGEX.sub("", text)
    return text


def parse(
    text: str,
    registry: Registry,
    *,
    suffix_reset: bool = True,
    literals: bool = False,
    strip: bool = False,
) -> str:
    """Replace tokens in text with escape sequences.

    Args:
        text: Input text with tokens like {bold} or {/}
        registry: Token registry, built on first use
        suffix_reset: Append a full reset sequence
        literals: Return printable (\\x1b) sequences instead of ESC characters
        strip: Remove tokens instead, all other flags are ignored

    Returns:
        The decorated text. Unknown tokens are kept as is.
    """
    if strip:
        return clear_tokens(text)

    parsed = registry.substitute(text)
    if suffix_reset:
        parsed += RESET
    return to_literal(parsed) if literals else parsed
