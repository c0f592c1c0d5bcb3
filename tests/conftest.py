"""
Shared pytest fixtures for seqtree tests.

Provides reusable taxa, distance matrices, and FASTA files
for unit and integration testing.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from seqtree.models.taxa import Taxon


# =============================================================================
# Taxa Fixtures
# =============================================================================


@pytest.fixture
def three_taxa() -> list[Taxon]:
    """Three taxa where S1 and S2 are close and S3 is distant.

    Hamming distances: S1-S2 = 1, S1-S3 = 4, S2-S3 = 3.
    """
    return [
        Taxon(identifier="S1", sequence="AAAA"),
        Taxon(identifier="S2", sequence="AAAT"),
        Taxon(identifier="S3", sequence="TTTT"),
    ]


@pytest.fixture
def identical_pair() -> list[Taxon]:
    """Two taxa with identical sequences."""
    return [
        Taxon(identifier="A", sequence="ACGTACGT"),
        Taxon(identifier="B", sequence="ACGTACGT"),
    ]


@pytest.fixture
def five_taxa() -> list[Taxon]:
    """Five taxa forming two clear clades (A,B) and (C,D,E)."""
    return [
        Taxon(identifier="A", sequence="ACGTACGTACGTACGTACGT"),
        Taxon(identifier="B", sequence="ACGTACGTACGTACGTACGA"),
        Taxon(identifier="C", sequence="TTGTACGAACCTAGGTACGT"),
        Taxon(identifier="D", sequence="TTGTACGAACCTAGGTACTT"),
        Taxon(identifier="E", sequence="TTGTACGAACCTAGCTACTT"),
    ]


# =============================================================================
# Distance Matrix Fixtures
# =============================================================================


@pytest.fixture
def three_taxa_matrix() -> np.ndarray:
    """Hamming distance matrix for the three_taxa fixture."""
    return np.array(
        [
            [0.0, 1.0, 4.0],
            [1.0, 0.0, 3.0],
            [4.0, 3.0, 0.0],
        ]
    )


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def fasta_file(tmp_path: Path) -> Path:
    """FASTA file with the three_taxa sequences."""
    path = tmp_path / "sequences.fa"
    path.write_text(">S1 first sample\nAAAA\n>S2\nAAAT\n>S3\nTT\nTT\n")
    return path


@pytest.fixture
def single_record_fasta(tmp_path: Path) -> Path:
    """FASTA file with one record."""
    path = tmp_path / "single.fa"
    path.write_text(">only\nACGT\n")
    return path
