"""
Seqtree: phylogenetic trees from named sequences.

Builds evolutionary trees from nucleotide sequences by neighbor-joining
on Hamming distances or by a greedy heuristic likelihood search, and
renders them in Newick format.
"""

__version__ = "0.1.0"
__author__ = "Seqtree Team"

from seqtree.core.phylogeny.tree_builder import TreeMethod, build_tree, construct_tree
from seqtree.models.config import TreeConfig
from seqtree.models.taxa import Taxon

__all__ = [
    "Taxon",
    "TreeConfig",
    "TreeMethod",
    "build_tree",
    "construct_tree",
    "__version__",
]
