"""
gocfg CLI

Usage:
    gocfg blocks main.go
    gocfg summary main.go util.go
    gocfg --log-level DEBUG blocks main.go
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .bblock import BasicBlock, blocks_from_file, render_blocks
from .config import get_settings
from .exceptions import GoCfgError
from .observability import setup_logging

app = typer.Typer(name="gocfg", help="Basic blocks and control-flow graphs for Go source", add_completion=False)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override GOCFG_LOG__LEVEL"),
    log_format: str | None = typer.Option(None, "--log-format", help="console or json"),
):
    """Configure logging before any command runs."""
    settings = get_settings()
    setup_logging(
        level=log_level or settings.log.level,
        format=log_format or settings.log.format,
    )


def _analyze(files: list[Path]) -> list[tuple[Path, list[BasicBlock]]]:
    """Build every file, reporting failures once each; exit 1 if any failed."""
    results = []
    failed = False

    for file_path in files:
        try:
            results.append((file_path, blocks_from_file(file_path)))
        except (GoCfgError, OSError) as e:
            err_console.print(f"[red]❌ {file_path}: {e}[/red]")
            failed = True

    if failed:
        raise typer.Exit(1)
    return results


@app.command()
def blocks(
    files: list[Path] = typer.Argument(..., help="Go source files"),
):
    """
    Print basic blocks and their successors.

    Examples:
        gocfg blocks main.go
    """
    for file_path, file_blocks in _analyze(files):
        if len(files) > 1:
            typer.echo(f"# {file_path}")
        for line in render_blocks(file_blocks):
            typer.echo(line)


@app.command()
def summary(
    files: list[Path] = typer.Argument(..., help="Go source files"),
):
    """
    Print one table of blocks per file.

    Examples:
        gocfg summary main.go util.go
    """
    for file_path, file_blocks in _analyze(files):
        table = Table(title=str(file_path))
        table.add_column("#", justify="right")
        table.add_column("Kind")
        table.add_column("EndLine", justify="right")
        table.add_column("Function")
        table.add_column("Successors")

        for block in file_blocks:
            table.add_row(
                str(block.number),
                str(block.kind),
                str(block.end_line),
                block.function_name,
                ", ".join(str(s.number) for s in block.successors),
            )

        console.print(table)


if __name__ == "__main__":
    app()
