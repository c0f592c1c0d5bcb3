"""Phylogeny module for tree building and Newick serialization.

Provides neighbor-joining and heuristic likelihood tree builders over a
shared binary tree node type, plus a Newick-style serializer.
"""

from seqtree.core.phylogeny.likelihood import (
    build_likelihood_tree,
    calculate_likelihood,
)
from seqtree.core.phylogeny.neighbor_joining import ClusterState, neighbor_joining
from seqtree.core.phylogeny.newick import tree_to_newick
from seqtree.core.phylogeny.tree import TreeNode
from seqtree.core.phylogeny.tree_builder import (
    TreeMethod,
    build_tree,
    construct_tree,
)

__all__ = [
    "ClusterState",
    "TreeMethod",
    "TreeNode",
    "build_likelihood_tree",
    "build_tree",
    "calculate_likelihood",
    "construct_tree",
    "neighbor_joining",
    "tree_to_newick",
]
