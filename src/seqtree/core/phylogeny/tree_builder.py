"""Build phylogenetic trees from named sequences.

This module dispatches a set of taxa to one of two tree builders and
serializes the result in Newick format:

- NJ: neighbor-joining on the Hamming distance matrix
- ML: greedy caterpillar tree refined by a heuristic likelihood search
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from enum import Enum

from seqtree.core.constants import (
    MIN_TAXA,
    MODEL_MAXIMUM_LIKELIHOOD,
    MODEL_NEIGHBOR_JOINING,
)
from seqtree.core.distance import compute_distance_matrix
from seqtree.core.exceptions import (
    DuplicateTaxonError,
    EmptySequenceError,
    InsufficientTaxaError,
    UnsupportedModelError,
)
from seqtree.core.phylogeny.likelihood import build_likelihood_tree
from seqtree.core.phylogeny.neighbor_joining import neighbor_joining
from seqtree.core.phylogeny.newick import tree_to_newick
from seqtree.core.phylogeny.tree import TreeNode
from seqtree.models.config import TreeConfig
from seqtree.models.taxa import Taxon, coerce_taxa

logger = logging.getLogger(__name__)


class TreeMethod(str, Enum):
    """Phylogenetic tree building method."""

    NJ = MODEL_NEIGHBOR_JOINING
    ML = MODEL_MAXIMUM_LIKELIHOOD

    @classmethod
    def from_selector(cls, selector: str | TreeMethod) -> TreeMethod:
        """Resolve a model name, case-insensitively.

        Raises:
            UnsupportedModelError: If the name matches no method.
        """
        if isinstance(selector, cls):
            return selector
        normalized = str(selector).strip().upper()
        for method in cls:
            if method.value == normalized:
                return method
        raise UnsupportedModelError(str(selector))


def validate_taxa(taxa: list[Taxon]) -> None:
    """Check that taxa can be built into a tree.

    Raises:
        InsufficientTaxaError: Fewer than 2 taxa.
        DuplicateTaxonError: Repeated identifiers.
        EmptySequenceError: A taxon without sequence symbols.
    """
    if len(taxa) < MIN_TAXA:
        raise InsufficientTaxaError(len(taxa))

    counts = Counter(taxon.identifier for taxon in taxa)
    duplicates = [identifier for identifier, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateTaxonError(duplicates)

    for taxon in taxa:
        if not taxon.sequence:
            raise EmptySequenceError(taxon.identifier)


def construct_tree(
    method: TreeMethod | str,
    taxa: Iterable[Taxon | tuple[str, str]],
    config: TreeConfig | None = None,
) -> TreeNode:
    """Build a tree with the selected method.

    Args:
        method: TreeMethod or model name ("NJ" or "ML").
        taxa: Taxon objects or (identifier, sequence) pairs, in input order.
        config: Tree configuration. Defaults to TreeConfig().

    Returns:
        Root of the constructed tree.

    Raises:
        UnsupportedModelError: If the model name is not recognised.
        InsufficientTaxaError: If fewer than 2 taxa are given.
        DuplicateTaxonError: If identifiers repeat.
        EmptySequenceError: If a sequence is empty.
    """
    method = TreeMethod.from_selector(method)
    config = config or TreeConfig()
    taxa = coerce_taxa(taxa)
    validate_taxa(taxa)

    logger.info(f"Building {method.value} tree from {len(taxa)} taxa")

    if method == TreeMethod.NJ:
        names = [taxon.identifier for taxon in taxa]
        distances = compute_distance_matrix([taxon.sequence for taxon in taxa])
        return neighbor_joining(distances, names)

    return build_likelihood_tree(
        taxa,
        substitution_rate=config.substitution_rate,
        iterations=config.optimization_iterations,
    )


def build_tree(
    method: TreeMethod | str,
    taxa: Iterable[Taxon | tuple[str, str]],
    config: TreeConfig | None = None,
) -> str:
    """Build a tree and serialize it in Newick format.

    Example:
        >>> build_tree("NJ", [("S1", "AAAA"), ("S2", "AAAT"), ("S3", "TTTT")])
        '(S3:0,(S1:0.5,S2:0.5):0)'

    Returns:
        Newick-like string without a terminating semicolon. Nothing is
        returned if any validation step fails.
    """
    root = construct_tree(method, taxa, config)
    return tree_to_newick(root)
