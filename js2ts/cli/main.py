"""
js2ts CLI

Command-line interface for converting JavaScript files to TypeScript.

Usage:
    js2ts convert ./src --recursive
    js2ts annotate ./src/app.js
"""

from pathlib import Path

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from js2ts.common.exceptions import Js2TsError
from js2ts.common.observability import setup_logging
from js2ts.config.groups import ConversionConfig, ObservabilityConfig
from js2ts.config.settings import get_settings
from js2ts.converter import ConversionReport, FileStatus, TypeScriptConverter

app = typer.Typer(
    name="js2ts",
    help="Convert JavaScript files to TypeScript with inferred type annotations",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

_STATUS_STYLES = {
    FileStatus.CONVERTED: "green",
    FileStatus.SKIPPED: "yellow",
    FileStatus.FAILED: "red",
}


def _build_config(**overrides) -> ConversionConfig:
    """Settings from the environment with CLI options layered on top."""
    try:
        values = get_settings().conversion.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ConversionConfig(**values)
    except PydanticValidationError as e:
        err_console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2)


def _init_logging(log_level: str | None, log_format: str | None) -> None:
    try:
        values = get_settings().observability.model_dump()
        if log_level is not None:
            values["log_level"] = log_level
        if log_format is not None:
            values["log_format"] = log_format
        observability = ObservabilityConfig(**values)
    except PydanticValidationError as e:
        err_console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2)
    setup_logging(level=observability.log_level, format=observability.log_format)


@app.command()
def convert(
    directory: Path = typer.Argument(..., help="Directory containing JavaScript files"),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Descend into subdirectories"),
    no_overwrite: bool = typer.Option(False, "--no-overwrite", help="Skip files whose target already exists"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop at the first file that fails"),
    source_suffix: str | None = typer.Option(None, "--source-suffix", help="Input file suffix (default .js)"),
    target_suffix: str | None = typer.Option(None, "--target-suffix", help="Output file suffix (default .ts)"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level"),
    log_format: str | None = typer.Option(None, "--log-format", help="console or json"),
):
    """
    Convert every JavaScript file in a directory.

    Each `name.js` gets a sibling `name.ts` with inferred annotations.
    """
    _init_logging(log_level, log_format)
    config = _build_config(
        recursive=True if recursive else None,
        overwrite=False if no_overwrite else None,
        continue_on_error=False if fail_fast else None,
        source_suffix=source_suffix,
        target_suffix=target_suffix,
    )

    converter = TypeScriptConverter(config)
    try:
        report = converter.convert_directory(directory)
    except Js2TsError as e:
        err_console.print(f"[bold red]Conversion failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    _display_report(report)

    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def annotate(
    file: Path = typer.Argument(..., help="JavaScript file to annotate"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level"),
):
    """
    Print the TypeScript version of one file without writing anything.
    """
    _init_logging(log_level, None)
    config = _build_config()
    converter = TypeScriptConverter(config)

    try:
        output = converter.convert_path(file)
    except Js2TsError as e:
        err_console.print(f"[bold red]Conversion failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    typer.echo(output.code, nl=False)


def _display_report(report: ConversionReport) -> None:
    """Display conversion results"""
    if not report.results:
        console.print(f"[yellow]No source files found in {escape(str(report.directory))}[/yellow]")
        return

    table = Table(title=f"js2ts: {escape(str(report.directory))}")
    table.add_column("Source", style="cyan")
    table.add_column("Target")
    table.add_column("Status")
    table.add_column("Annotations", justify="right")
    table.add_column("Error", style="red")

    for result in report.results:
        style = _STATUS_STYLES[result.status]
        table.add_row(
            escape(str(result.source)),
            escape(str(result.target)),
            f"[{style}]{result.status.value}[/{style}]",
            str(result.annotation_count),
            escape(result.error or ""),
        )

    console.print(table)
    console.print(
        f"[bold]Converted:[/bold] {len(report.converted)}  "
        f"[bold]Skipped:[/bold] {len(report.skipped)}  "
        f"[bold]Failed:[/bold] {len(report.failed)}"
    )


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
