"""
arith CLI - interactive and one-shot expression evaluation.

Commands:
- repl: read expressions line by line and print their values
- eval: evaluate a single expression
- tokens: print the token stream of an expression
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import IntEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.style import Style
from rich.text import Text

from arith import __version__
from arith.config import load_config
from arith.errors import ConfigError, EvaluationError
from arith.evaluator import evaluate
from arith.syntax import SyntaxTree, render_diagnostic, render_tree

logger = logging.getLogger(__name__)

console = Console(highlight=False)

STYLES = {
    "result": Style(color="bright_white", bold=True),
    "error": Style(color="red", bold=True),
    "tree": Style(color="bright_black"),
    "muted": Style(color="bright_black"),
}


class ExitCode(IntEnum):
    OK = 0
    DIAGNOSTICS = 1
    EVALUATION_FAILED = 2


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"arith {__version__}")
        raise typer.Exit()


app = typer.Typer(
    help="arith – integer arithmetic expression evaluator",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """arith CLI main callback for global options."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def run_line(line: str, show_tree: bool = False) -> ExitCode:
    """Parse and evaluate one line, printing diagnostics or the result."""
    tree = SyntaxTree.parse(line)

    if show_tree:
        console.print(Text(render_tree(tree.root), style=STYLES["tree"]))

    if tree.diagnostics:
        for diagnostic in tree.diagnostics:
            console.print(Text(render_diagnostic(line, diagnostic), style=STYLES["error"]))
        return ExitCode.DIAGNOSTICS

    try:
        result = evaluate(tree.root)
    except EvaluationError as e:
        logger.debug("Evaluation of %r failed: %s", line, e)
        console.print(Text(f"error: {e}", style=STYLES["error"]))
        return ExitCode.EVALUATION_FAILED

    console.print(Text(str(result), style=STYLES["result"]))
    return ExitCode.OK


def _read_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


@app.command()
def repl(
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to arith.toml (default: ./arith.toml if present)",
    ),
) -> None:
    """
    Evaluate expressions read line by line.

    An empty line or end of input exits. ``#showTree`` toggles tree
    output and ``#cls`` clears the screen.
    """
    try:
        settings = load_config(config)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)

    show_tree = settings.show_tree
    for line in _read_lines(settings.prompt):
        if not line:
            break
        if line == "#showTree":
            show_tree = not show_tree
            state = "Showing" if show_tree else "Not showing"
            console.print(Text(f"{state} parse trees.", style=STYLES["muted"]))
            continue
        if line == "#cls":
            console.clear()
            continue
        run_line(line, show_tree)


@app.command(name="eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    tree: bool = typer.Option(False, "--tree", "-t", help="Print the parse tree first"),
) -> None:
    """Evaluate a single expression and print its value."""
    code = run_line(expression, show_tree=tree)
    if code != ExitCode.OK:
        raise typer.Exit(code=int(code))


@app.command()
def tokens(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Print the token stream of an expression."""
    for token in SyntaxTree.parse_tokens(expression):
        console.print(Text(str(token)))


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
