"""Style tokens to ANSI escape sequences, and back."""

from sgrtok.decorator import clear_seq, clear_tokens, parse
from sgrtok.registry import Registry, UnknownTokenError

__all__ = [
    "Registry",
    "UnknownTokenError",
    "clear_seq",
    "clear_tokens",
    "parse",
]
