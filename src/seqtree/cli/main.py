"""
Main CLI entry point for seqtree.

Provides subcommands:
- tree: Build phylogenetic trees and distance matrices from FASTA input
"""

from __future__ import annotations

import typer
from rich import print as rprint
from rich.console import Console

from seqtree import __version__

app = typer.Typer(
    name="seqtree",
    help="Build phylogenetic trees from named sequences",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        rprint(f"seqtree version {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Seqtree: phylogenetic trees from named sequences.

    Builds neighbor-joining or heuristic likelihood trees from FASTA
    input and writes them in Newick format.
    """


# Import subcommands
from seqtree.cli import tree

# Register subcommands
app.add_typer(tree.app, name="tree")


if __name__ == "__main__":
    app()
