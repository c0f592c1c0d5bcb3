"""
Test data factories for seqtree tests.

Generates synthetic taxa and FASTA content with controlled
characteristics. All data generation is seeded for reproducibility.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from seqtree.models.taxa import Taxon

NUCLEOTIDES = np.array(list("ACGT"))


def random_taxa(n: int, length: int = 40, seed: int = 42) -> list[Taxon]:
    """Reproducible random nucleotide taxa named T0..T{n-1}."""
    rng = np.random.default_rng(seed + n)
    return [
        Taxon(identifier=f"T{i}", sequence="".join(rng.choice(NUCLEOTIDES, size=length)))
        for i in range(n)
    ]


def write_fasta(path: Path, taxa: list[Taxon], line_width: int = 60) -> Path:
    """Write taxa to a FASTA file, wrapping sequence lines."""
    lines: list[str] = []
    for taxon in taxa:
        lines.append(f">{taxon.identifier}")
        for start in range(0, len(taxon.sequence), line_width):
            lines.append(taxon.sequence[start:start + line_width])
    path.write_text("\n".join(lines) + "\n")
    return path
