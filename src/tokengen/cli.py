"""
tokengen CLI.

Commands:
- generate: Write constant.js and the type declarations
- inspect: Show the names extracted from the token document
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from tokengen._version import get_version
from tokengen.core.errors import TokenGenError
from tokengen.core.extractors import extract_all
from tokengen.core.manifest import ProjectManifest, find_manifest, load_manifest, parse_layout
from tokengen.core.tokens import load_token_tree
from tokengen.pipeline import DirectorySink, run_pipeline

console = Console()

app = typer.Typer(
    help="tokengen – generate constants and TypeScript types from design tokens",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"tokengen version {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
) -> None:
    """tokengen CLI main callback for global options."""
    pass


def _load_project(config: str | None, tokens: str | None) -> ProjectManifest:
    manifest = load_manifest(Path(config)) if config else find_manifest()
    if tokens:
        manifest.tokens.source = str(Path(tokens).resolve())
    return manifest


@app.command("generate")
def generate_command(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to tokengen.toml (default: ./tokengen.toml)"
    ),
    tokens: str | None = typer.Option(None, "--tokens", "-t", help="Token document path"),
    constants: str | None = typer.Option(None, "--constants", help="constant.js output path"),
    out_dir: str | None = typer.Option(
        None, "--out-dir", "-o", help="Directory for type declarations"
    ),
    layout: str | None = typer.Option(
        None, "--layout", "-l", help="Declaration layout (combined/split)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show extractor debug output"),
) -> None:
    """
    Generate constant.js and TypeScript declarations from design tokens.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    try:
        manifest = _load_project(config, tokens)
        if constants:
            manifest.output.constants = str(Path(constants).resolve())
        if out_dir:
            manifest.output.types_dir = str(Path(out_dir).resolve())
        if layout:
            manifest.output.layout = parse_layout(layout)

        sink = DirectorySink(manifest.types_dir)
        result = run_pipeline(manifest, sink)
    except TokenGenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Wrote {result.constants_path}")
    for path in sink.written:
        typer.echo(f"Wrote {path}")


@app.command("inspect")
def inspect_command(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to tokengen.toml (default: ./tokengen.toml)"
    ),
    tokens: str | None = typer.Option(None, "--tokens", "-t", help="Token document path"),
) -> None:
    """
    Show the names extracted from the token document without writing files.
    """
    try:
        manifest = _load_project(config, tokens)
        extraction = extract_all(load_token_tree(manifest.tokens_path))
    except TokenGenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    table = Table(title=str(manifest.tokens_path), box=box.SIMPLE)
    table.add_column("Category", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Values")
    for label, values in extraction.summary():
        table.add_row(label, str(len(values)), ", ".join(values) or "-")
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main()
