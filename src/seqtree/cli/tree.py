"""
Tree command for building phylogenetic trees.

Provides subcommands:
- build: Build a phylogenetic tree from a FASTA file
- distances: Write the pairwise Hamming distance matrix
"""
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from seqtree.cli.utils import QuietConsole, configure_logging, spinner_progress
from seqtree.core.exceptions import SeqtreeError

app = typer.Typer(
    name="tree",
    help="Build phylogenetic trees from sequences",
    no_args_is_help=True,
)

console = Console()


def _print_error(error: SeqtreeError) -> None:
    console.print(f"\n[red]Error: {escape(error.message)}[/red]")
    if error.suggestion:
        console.print(f"\n[dim]{escape(error.suggestion)}[/dim]")


@app.command(name="build")
def build(
    model: str = typer.Option(
        ...,
        "--model",
        "-m",
        help="Tree building model: NJ (neighbor-joining) or ML (heuristic likelihood)",
    ),
    fasta: Path = typer.Option(
        ...,
        "--fasta",
        "-f",
        help="Input FASTA file",
        exists=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Output Newick tree file",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML configuration file",
        exists=True,
        dir_okay=False,
    ),
    substitution_rate: float | None = typer.Option(
        None,
        "--substitution-rate",
        "-r",
        help="Substitution rate for the ML likelihood score (overrides config)",
    ),
    iterations: int | None = typer.Option(
        None,
        "--iterations",
        "-n",
        help="Local-search iterations for the ML model (overrides config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
) -> None:
    """
    Build a phylogenetic tree.

    Supports two models:

    - NJ: Neighbor-joining on the pairwise Hamming distance matrix

    - ML: Greedy caterpillar tree refined by a heuristic likelihood search

    Examples:

        # Neighbor-joining tree
        seqtree tree build --model NJ --fasta seqs.fa --output tree.nwk

        # Heuristic likelihood tree with a custom substitution rate
        seqtree tree build --model ML --fasta seqs.fa --output tree.nwk -r 0.05
    """
    from pydantic import ValidationError

    from seqtree.core.parsers import read_fasta_taxa
    from seqtree.core.phylogeny.tree_builder import TreeMethod, build_tree
    from seqtree.models.config import TreeConfig

    out = QuietConsole(console, quiet=quiet)
    configure_logging(verbose, console)

    try:
        method = TreeMethod.from_selector(model)
        config = TreeConfig.from_yaml(config_file) if config_file else TreeConfig()
        overrides = {}
        if substitution_rate is not None:
            overrides["substitution_rate"] = substitution_rate
        if iterations is not None:
            overrides["optimization_iterations"] = iterations
        if overrides:
            config = TreeConfig(**{**config.model_dump(), **overrides})
    except SeqtreeError as e:
        _print_error(e)
        raise typer.Exit(code=1) from None
    except ValidationError as e:
        console.print(f"[red]Error: Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from None

    out.print("\n[bold blue]Seqtree Tree Builder[/bold blue]\n")
    out.print(f"[bold]Model:[/bold] {method.value}")
    out.print(f"[bold]FASTA:[/bold] {fasta}")
    if verbose and method == TreeMethod.ML:
        out.print(
            f"[dim]Substitution rate: {config.substitution_rate}, "
            f"iterations: {config.optimization_iterations}[/dim]"
        )

    try:
        taxa = read_fasta_taxa(fasta)
        out.print(f"[bold]Sequences:[/bold] {len(taxa)}")

        with spinner_progress(
            f"Building {method.value} tree from {len(taxa)} sequences...",
            console,
            quiet,
        ):
            newick = build_tree(method, taxa, config)
    except SeqtreeError as e:
        _print_error(e)
        raise typer.Exit(code=1) from None

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(newick + "\n")

    out.print("\n[bold green]Tree built successfully![/bold green]")
    out.print(f"[bold]Output:[/bold] {output}")
    out.print()


@app.command(name="distances")
def distances(
    fasta: Path = typer.Option(
        ...,
        "--fasta",
        "-f",
        help="Input FASTA file",
        exists=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Output CSV file for the distance matrix",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
) -> None:
    """
    Write the pairwise Hamming distance matrix as CSV.

    The first column holds the sequence identifiers, followed by one
    column per sequence in file order.

    Example:

        seqtree tree distances --fasta seqs.fa --output distances.csv
    """
    from seqtree.core.distance import distance_matrix_frame
    from seqtree.core.parsers import read_fasta_taxa
    from seqtree.core.phylogeny.tree_builder import validate_taxa

    out = QuietConsole(console, quiet=quiet)

    try:
        taxa = read_fasta_taxa(fasta)
        validate_taxa(taxa)
    except SeqtreeError as e:
        _print_error(e)
        raise typer.Exit(code=1) from None

    with spinner_progress(
        f"Computing distances for {len(taxa)} sequences...",
        console,
        quiet,
    ):
        frame = distance_matrix_frame(
            [taxon.identifier for taxon in taxa],
            [taxon.sequence for taxon in taxa],
        )

    output.parent.mkdir(parents=True, exist_ok=True)
    frame.write_csv(output)

    out.print(f"[bold green]Distance matrix written:[/bold green] {output}")
