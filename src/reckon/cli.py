"""
reckon command line interface.

Commands:

- eval: evaluate an expression and print the result
- tokens: show the token sequence for an expression
- tree: show the operand tree for an expression
"""

from __future__ import annotations

import json
import logging
import platform
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reckon._version import get_version
from reckon.core.config import (
    DEFAULT_CONFIG,
    InterpreterConfig,
    UnknownCharPolicy,
    find_config,
    load_config,
)
from reckon.core.errors import ReckonError
from reckon.core.lexer import tokenize
from reckon.core.parser import parse

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"reckon version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="reckon – evaluate left-to-right integer addition and subtraction",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            envvar="RECKON_LOG_LEVEL",
            help="Logging level (DEBUG, INFO, WARNING, ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """reckon CLI main callback for global options."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


# Shared command options
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to reckon.toml (default: nearest one found)"),
]
LenientOption = Annotated[
    bool, typer.Option("--lenient", help="Skip unknown characters instead of failing")
]
BitsOption = Annotated[
    int | None,
    typer.Option("--bits", "-b", min=0, help="Signed integer width; 0 means unbounded"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]


def _resolve_config(config_path: Path | None, lenient: bool, bits: int | None) -> InterpreterConfig:
    """Load file configuration, then apply command line overrides."""
    path = config_path or find_config()
    config = load_config(path) if path else DEFAULT_CONFIG
    if path:
        logger.debug("Loaded configuration from %s", path)

    if lenient:
        config = replace(config, unknown_characters=UnknownCharPolicy.SKIP)
    if bits is not None:
        config = replace(config, bits=bits)
    return config


def _fail(error: ReckonError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)
    return typer.Exit(code=1)


# =============================================================================
# Commands
# =============================================================================


@app.command(name="eval")
def eval_command(
    expression: Annotated[str, typer.Argument(help="Expression, e.g. '10 - 11 + 2'")],
    config_path: ConfigOption = None,
    lenient: LenientOption = False,
    bits: BitsOption = None,
    output_json: JsonOption = False,
) -> None:
    """Evaluate an expression and print the result."""
    try:
        config = _resolve_config(config_path, lenient, bits)
        value = parse(tokenize(expression, config), config).value()
    except ReckonError as e:
        raise _fail(e) from e

    if output_json:
        typer.echo(json.dumps({"expression": expression, "value": value}))
        return
    typer.echo(f"Result of {expression} is {value}")


@app.command(name="tokens")
def tokens_command(
    expression: Annotated[str, typer.Argument(help="Expression to tokenize")],
    config_path: ConfigOption = None,
    lenient: LenientOption = False,
    bits: BitsOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show the token sequence for an expression."""
    try:
        config = _resolve_config(config_path, lenient, bits)
        tokens = tokenize(expression, config)
    except ReckonError as e:
        raise _fail(e) from e

    if output_json:
        typer.echo(json.dumps([token.model_dump(mode="json") for token in tokens]))
        return

    if not tokens:
        console.print("[dim]No tokens[/dim]")
        return

    table = Table(title=f"Tokens for {escape(repr(expression))}")
    table.add_column("Kind", style="cyan")
    table.add_column("Text")
    table.add_column("Pos", justify="right")
    for token in tokens:
        table.add_row(token.kind.value, escape(token.text), str(token.pos))
    console.print(table)


@app.command(name="tree")
def tree_command(
    expression: Annotated[str, typer.Argument(help="Expression to parse")],
    config_path: ConfigOption = None,
    lenient: LenientOption = False,
    bits: BitsOption = None,
) -> None:
    """Show the operand tree for an expression."""
    try:
        config = _resolve_config(config_path, lenient, bits)
        root = parse(tokenize(expression, config), config)
    except ReckonError as e:
        raise _fail(e) from e

    typer.echo(str(root))


def main() -> None:
    app(standalone_mode=True)
