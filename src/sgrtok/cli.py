"""Sgrtok command line interface.

Sgrtok turns style tokens like {bold} or {red} into ANSI escape sequences, and
strips tokens or escape sequences from text.
"""

import sys

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from sgrtok.ansi import to_literal
from sgrtok.console import (
    print_error,
    print_verbose,
    print_warning,
    set_verbose,
)
from sgrtok.decorator import clear_seq, clear_tokens, parse
from sgrtok.registry import Registry, UnknownTokenError

app = typer.Typer(no_args_is_help=True)

_stdout = Console(soft_wrap=True)

# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument

TEXT_HELP = "Text to process, read from stdin if omitted or '-'"


def _read_text(text: str | None) -> tuple[str, bool]:
    """Return the input text, and whether it came from the command line."""
    if text is None or text == "-":
        print_verbose("Reading text from stdin")
        return sys.stdin.read(), False
    return text, True


def _write(result: str, *, newline: bool) -> None:
    sys.stdout.write(result)
    if newline:
        sys.stdout.write("\n")


def _registry(ctx: typer.Context) -> Registry:
    return ctx.ensure_object(Registry)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        envvar="SGRTOK_VERBOSE",
        help="Show verbose output",
    ),
) -> None:
    """Sgrtok: style tokens to ANSI escape sequences."""
    if verbose:
        set_verbose()
    ctx.obj = Registry()


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    text: str | None = typer.Argument(None, help=TEXT_HELP),
    no_reset: bool = typer.Option(
        False,
        "--no-reset",
        envvar="SGRTOK_NO_RESET",
        help="Do not append a full reset sequence",
    ),
    literals: bool = typer.Option(
        False,
        "--literals",
        envvar="SGRTOK_LITERALS",
        help="Output printable \\x1b sequences",
    ),
    strip: bool = typer.Option(
        False, "--strip", help="Remove tokens instead of replacing them"
    ),
) -> None:
    """Replace tokens with escape sequences."""
    source, from_arg = _read_text(text)
    registry = _registry(ctx)
    result = parse(
        source,
        registry,
        suffix_reset=not no_reset,
        literals=literals,
        strip=strip,
    )
    _write(result, newline=from_arg)


@app.command("clear-tokens")
def clear_tokens_command(
    text: str | None = typer.Argument(None, help=TEXT_HELP),
) -> None:
    """Remove tokens, known or not."""
    source, from_arg = _read_text(text)
    _write(clear_tokens(source), newline=from_arg)


@app.command("clear-seq")
def clear_seq_command(
    text: str | None = typer.Argument(None, help=TEXT_HELP),
    literals: bool = typer.Option(
        False,
        "--literals/--no-literals",
        help="Remove sequences written as \\e[, \\x1b[ or \\033[",
    ),
    escapes: bool = typer.Option(
        True,
        "--escapes/--no-escapes",
        help="Remove sequences with an actual ESC character",
    ),
) -> None:
    """Remove escape sequences."""
    if not literals and not escapes:
        print_warning("Both --no-literals and --no-escapes: nothing to remove")
    source, from_arg = _read_text(text)
    _write(
        clear_seq(source, literals=literals, escapes=escapes),
        newline=from_arg,
    )


@app.command("tokens")
def tokens_command(ctx: typer.Context) -> None:
    """List known tokens."""
    registry = _registry(ctx)
    registry.build()
    for token in registry.tokens():
        _write(token, newline=True)


@app.command("inspect")
def inspect_command(ctx: typer.Context) -> None:
    """Show known tokens and their escape sequences."""
    table = Table("Token", "Sequence")
    registry = _registry(ctx)
    registry.build()
    for token, sequence in registry.inspect().items():
        table.add_row(Text(token), Text(to_literal(sequence)))
    _stdout.print(table)


@app.command("lookup")
def lookup_command(
    ctx: typer.Context,
    token: str = typer.Argument(..., help="Token, with or without braces"),
) -> None:
    """Show the escape sequence of a token."""
    try:
        sequence = _registry(ctx).lookup(token)
    except UnknownTokenError as error:
        print_error(None, error)
        raise typer.Exit(1) from error
    _write(to_literal(sequence), newline=True)
