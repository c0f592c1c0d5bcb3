"""
Pairwise sequence distances and distance matrices.

Two distance measures are provided:
- Hamming distance: raw mismatch count, used by neighbor-joining
- Jukes-Cantor distance: mismatch proportion corrected for multiple
  substitutions, used by the heuristic likelihood builder

Sequences are compared position by position over the shorter of the
two lengths; no alignment or length check is performed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
import polars as pl

from seqtree.core.constants import JC_COEFFICIENT, JC_SATURATION_PROPORTION

logger = logging.getLogger(__name__)


def hamming_distance(seq1: str, seq2: str) -> int:
    """Count positions where two sequences differ.

    Comparison stops at the end of the shorter sequence.

    Example:
        >>> hamming_distance("AAAA", "AAAT")
        1
        >>> hamming_distance("ACGT", "AC")
        0
    """
    return sum(1 for a, b in zip(seq1, seq2) if a != b)


def jukes_cantor_distance(seq1: str, seq2: str) -> float:
    """Jukes-Cantor corrected evolutionary distance.

    The mismatch proportion is taken relative to the length of ``seq1``.
    At or above the saturation proportion (0.75) the distance is
    unbounded and ``math.inf`` is returned instead of raising.

    Args:
        seq1: First sequence (its length is the denominator).
        seq2: Second sequence.

    Returns:
        -0.75 * ln(1 - 4p/3), or infinity when p >= 0.75. An empty
        ``seq1`` has no observed sites and yields 0.0.
    """
    if not seq1:
        return 0.0

    p = hamming_distance(seq1, seq2) / len(seq1)
    if p >= JC_SATURATION_PROPORTION:
        logger.warning(
            f"Jukes-Cantor distance saturated (p = {p:.3f} >= {JC_SATURATION_PROPORTION})"
        )
        return math.inf

    return -JC_COEFFICIENT * math.log(1.0 - p / JC_COEFFICIENT)


def compute_distance_matrix(sequences: Sequence[str]) -> np.ndarray:
    """Build the symmetric Hamming distance matrix for a sequence set.

    Each unordered pair is computed once and mirrored into both
    triangles. The diagonal is zero.

    Args:
        sequences: Sequences in taxon order.

    Returns:
        Square float64 array of shape (n, n).
    """
    n = len(sequences)
    matrix = np.zeros((n, n), dtype=np.float64)

    for i in range(n):
        for j in range(i + 1, n):
            distance = float(hamming_distance(sequences[i], sequences[j]))
            matrix[i, j] = distance
            matrix[j, i] = distance

    logger.debug(f"Computed {n}x{n} Hamming distance matrix")
    return matrix


def distance_matrix_frame(names: Sequence[str], sequences: Sequence[str]) -> pl.DataFrame:
    """Hamming distance matrix as a labelled DataFrame.

    The first column ``taxon`` holds the row identifiers, followed by
    one column per identifier in input order.

    Args:
        names: Taxon identifiers.
        sequences: Sequences in the same order as ``names``.

    Returns:
        DataFrame with n rows and n + 1 columns.
    """
    matrix = compute_distance_matrix(sequences)
    data: dict[str, list] = {"taxon": list(names)}
    for idx, name in enumerate(names):
        data[name] = matrix[:, idx].tolist()
    return pl.DataFrame(data)
