import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from compgraph._builders import create_input_with, mul, pow, sin, sum  # noqa: A004
from compgraph._config import EvaluatorConfig, find_pyproject_toml, get_config, load_config
from compgraph._context import use_graph
from compgraph._errors import CompGraphError
from compgraph._eval_engine import evaluate
from compgraph._ir import Graph
from compgraph._query import inputs
from compgraph._render import render

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Compgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _resolve_config(config_path: Path | None, max_depth: int | None) -> EvaluatorConfig:
    config = load_config(config_path) if config_path is not None else get_config()
    if max_depth is not None:
        config = config.model_copy(update={"max_depth": max_depth})
    return config


@app.command()
def demo(
    *,
    x1: Annotated[float, typer.Option(help="Value of input x1")] = 10.0,
    x2: Annotated[float, typer.Option(help="Value of input x2")] = 20.0,
    x3: Annotated[float, typer.Option(help="Value of input x3")] = 30.0,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", min=1, help="Override the traversal depth limit"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to a pyproject.toml with a [tool.compgraph] section"),
    ] = None,
) -> None:
    """Evaluate the reference expression x1 + x2 * sin(x2 + x3^3)."""
    try:
        config = _resolve_config(config_path, max_depth)
    except CompGraphError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    with use_graph(Graph(config)):
        h1 = create_input_with("x1", x1)
        h2 = create_input_with("x2", x2)
        h3 = create_input_with("x3", x3)
        expr = sum(h1, mul(h2, sin(sum(h2, pow(h3, 3)))))

    try:
        err_console.print(f"[cyan]Expression:[/cyan] {escape(render(expr))}")
        result = evaluate(expr)
    except CompGraphError as e:
        err_console.print(f"[red]✗ Evaluation failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Input", style="bold")
    table.add_column("Value", justify="right")
    for handle in inputs(expr):
        table.add_row(escape(handle.name or ""), repr(handle.value))
    err_console.print(Panel(table, title="[bold]Inputs[/bold]", border_style="cyan"))

    logger.debug("Evaluated %d operator nodes", result.evaluations)
    out_console.print(repr(result.value))


@app.command("config")
def show_config(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to a pyproject.toml with a [tool.compgraph] section"),
    ] = None,
) -> None:
    """Show the evaluator configuration in effect."""
    source = config_path if config_path is not None else find_pyproject_toml()
    try:
        config = _resolve_config(config_path, None)
    except CompGraphError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    err_console.print(f"[cyan]Source:[/cyan] {escape(str(source)) if source else '(defaults)'}")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="bold")
    table.add_column("Value", justify="right", style="yellow")
    for name, value in config.model_dump().items():
        table.add_row(name, str(value))
    out_console.print(table)
