from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .compiler import compile_graph
from .config import LOG_LEVEL
from .errors import CyclicDependencyError, GraphLoadError
from .io import load_graph
from .logger import log_error, log_info, setup_logger
from .nodes import CATEGORIES, DEFAULT_CATALOG
from .planner.plan import ascii_plan
from .planner.validator import lint_graph

app = typer.Typer(no_args_is_help=True, help="Shader Nodes CLI: node graphs → WGSL fragment shaders")


@app.callback()
def main(log_level: str = typer.Option(LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING, ...)")):
    setup_logger(log_level)


def _load(file: Path):
    try:
        return load_graph(file)
    except GraphLoadError as e:
        log_error(str(e))
        rprint(f"[bold red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)


@app.command("compile")
def compile_(file: Path,
             output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write WGSL here instead of stdout")):
    """Compile a graph file (.json / .yaml) to WGSL."""
    graph = _load(file)
    result = compile_graph(graph)
    if not result.ok:
        log_error(f"{file}: {result.error}")
        rprint(f"[bold red]Error:[/] {escape(result.error)}")
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(result.code)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.code + "\n", encoding="utf-8")
    log_info(f"Compiled {file} -> {output}")
    rprint(Panel.fit(f"Compiled [bold]{escape(graph.name)}[/] to [cyan]{output}[/]"))


@app.command()
def validate(file: Path):
    """Lint a graph file (ids, ports, types, output node, cycles)."""
    graph = _load(file)
    ok, messages = lint_graph(graph)
    table = Table(title="Validation Report", show_lines=True)
    table.add_column("Status", justify="center", style="bold")
    table.add_column("Message")
    for m in messages:
        status, _, text = m.partition(": ")
        table.add_row(status, escape(text))
    rprint(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def nodes(category: Optional[str] = typer.Option(None, help="Only list this category")):
    """List the node catalog."""
    known = [c for c, _ in CATEGORIES]
    if category is not None and category not in known:
        rprint(f"[bold red]Unknown category[/] '{escape(category)}' (expected one of: {', '.join(known)})")
        raise typer.Exit(code=1)

    table = Table(title="Shader Nodes")
    table.add_column("Kind", style="cyan")
    table.add_column("Category")
    table.add_column("Inputs")
    table.add_column("Outputs")
    table.add_column("Params")
    for cat, _label in CATEGORIES:
        if category is not None and cat != category:
            continue
        for d in DEFAULT_CATALOG.by_category(cat):
            inputs = ", ".join(f"{p.id}: {p.data_type.value}" for p in d.inputs)
            outputs = ", ".join(f"{p.id}: {p.data_type.value}" for p in d.outputs)
            params = ", ".join(d.params.model_fields) if d.params is not None else ""
            table.add_row(d.kind.value, cat, inputs, outputs, params)
    rprint(table)


@app.command()
def explain(file: Path):
    """Print the evaluation order of a graph."""
    graph = _load(file)
    try:
        typer.echo(ascii_plan(graph))
    except CyclicDependencyError as e:
        rprint(f"[bold red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
