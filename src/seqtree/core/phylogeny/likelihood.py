"""
Heuristic likelihood tree construction.

Builds a tree from raw sequences in two phases:

1. Greedy caterpillar insertion: taxa are attached one at a time in input
   order. Each new taxon becomes the right child of a node whose left child
   is the tree built so far; the node's branch distance is the Jukes-Cantor
   distance between the previously attached taxon and the new one.

2. Local search: for a fixed number of iterations, swap the root's two
   children and keep the candidate only if its likelihood strictly improves.

The likelihood is a simplified score, not a statistical likelihood:

    L(leaf) = 1
    L(node) = L(left) * L(right) * exp(-rate * node.distance)

Note:
    Only the root's children are ever swapped. Because the score is a
    product it is invariant under that swap, so the search never changes
    the tree built in phase 1. This is a known simplification of the
    method and is kept as-is.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from seqtree.core.constants import (
    DEFAULT_OPTIMIZATION_ITERATIONS,
    DEFAULT_SUBSTITUTION_RATE,
)
from seqtree.core.distance import jukes_cantor_distance
from seqtree.core.exceptions import InsufficientTaxaError
from seqtree.core.phylogeny.tree import TreeNode
from seqtree.models.taxa import Taxon

logger = logging.getLogger(__name__)


def build_initial_tree(taxa: Sequence[Taxon]) -> TreeNode:
    """Build a caterpillar tree by sequential insertion.

    Args:
        taxa: Taxa in insertion order (at least one).

    Returns:
        Root of a maximally unbalanced tree with len(taxa) - 1 internal nodes.
    """
    if not taxa:
        raise InsufficientTaxaError(0)

    current = TreeNode(name=taxa[0].identifier)
    last_attached = taxa[0]

    for taxon in taxa[1:]:
        distance = jukes_cantor_distance(last_attached.sequence, taxon.sequence)
        current = TreeNode.join(current, TreeNode(name=taxon.identifier), distance=distance)
        last_attached = taxon

    return current


def calculate_likelihood(node: TreeNode, substitution_rate: float) -> float:
    """Heuristic likelihood of a tree, evaluated bottom-up.

    Infinite branch distances contribute a factor of 0, so a saturated
    branch zeroes the score rather than producing NaN.

    Args:
        node: Root of the (sub)tree to score.
        substitution_rate: Positive rate in the exp(-rate * distance) term.

    Returns:
        Score in [0, 1].
    """
    scores: dict[int, float] = {}
    for current in node.iter_postorder():
        if current.is_leaf:
            scores[id(current)] = 1.0
            continue
        transition = math.exp(-substitution_rate * current.distance)
        scores[id(current)] = scores[id(current.left)] * scores[id(current.right)] * transition
    return scores[id(node)]


def swap_root_children(tree: TreeNode) -> TreeNode:
    """Candidate tree with the root's two children exchanged.

    The returned root takes over both subtrees; no deeper node is
    touched. A leaf is returned unchanged.
    """
    if tree.is_leaf:
        return tree
    return TreeNode(
        name=tree.name,
        left=tree.right,
        right=tree.left,
        distance=tree.distance,
    )


def optimize_tree(
    tree: TreeNode,
    substitution_rate: float = DEFAULT_SUBSTITUTION_RATE,
    iterations: int = DEFAULT_OPTIMIZATION_ITERATIONS,
) -> TreeNode:
    """Fixed-budget local search over root child swaps.

    A candidate is adopted only when its likelihood strictly exceeds the
    best seen so far. All iterations run; there is no early exit.

    Args:
        tree: Starting tree.
        substitution_rate: Rate for the likelihood score.
        iterations: Number of swap attempts.

    Returns:
        The best tree found (the input tree if nothing improved).
    """
    best_likelihood = calculate_likelihood(tree, substitution_rate)

    for iteration in range(iterations):
        candidate = swap_root_children(tree)
        likelihood = calculate_likelihood(candidate, substitution_rate)
        if likelihood > best_likelihood:
            logger.debug(
                f"Iteration {iteration}: likelihood improved {best_likelihood:g} -> {likelihood:g}"
            )
            tree = candidate
            best_likelihood = likelihood

    logger.debug(f"Local search finished after {iterations} iterations, likelihood {best_likelihood:g}")
    return tree


def build_likelihood_tree(
    taxa: Sequence[Taxon],
    substitution_rate: float = DEFAULT_SUBSTITUTION_RATE,
    iterations: int = DEFAULT_OPTIMIZATION_ITERATIONS,
) -> TreeNode:
    """Build a tree with greedy insertion followed by local search.

    Args:
        taxa: Taxa in insertion order.
        substitution_rate: Rate for the likelihood score.
        iterations: Number of local-search iterations.

    Returns:
        Root of the optimized tree.
    """
    tree = build_initial_tree(taxa)
    tree = optimize_tree(tree, substitution_rate, iterations)
    logger.info(f"Heuristic likelihood tree built from {len(taxa)} taxa")
    return tree
