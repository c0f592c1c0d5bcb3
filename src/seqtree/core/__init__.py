"""
Core algorithms for phylogenetic tree building.

This module contains the distance model and supporting components;
tree construction and serialization live in the phylogeny subpackage.
"""

from seqtree.core.distance import (
    compute_distance_matrix,
    hamming_distance,
    jukes_cantor_distance,
)

__all__ = [
    "compute_distance_matrix",
    "hamming_distance",
    "jukes_cantor_distance",
]
