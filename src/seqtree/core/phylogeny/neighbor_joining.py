"""
Neighbor-joining tree construction.

Agglomerative clustering over a shrinking distance matrix. Each step
merges the pair of active nodes with the lowest Q-criterion

    Q(i, j) = (n - 2) * d(i, j) - R(i) - R(j)

where R(i) is the row sum of node i over all active nodes. The merged
node replaces the pair, and distances to it are

    d(new, k) = (d(i, k) + d(j, k) - d(i, j)) / 2

Clustering stops when two nodes remain; they are joined under a root
with branch distance 0.

Reference:
    Saitou & Nei 1987, Molecular Biology and Evolution 4(4):406-425
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

import numpy as np

from seqtree.core.constants import MIN_TAXA
from seqtree.core.exceptions import (
    DistanceMatrixError,
    DuplicateTaxonError,
    InsufficientTaxaError,
)
from seqtree.core.phylogeny.tree import TreeNode

logger = logging.getLogger(__name__)


class ClusterState:
    """
    Working set of the neighbor-joining builder.

    Holds the live distance matrix, the live ordered list of node names,
    and the name -> TreeNode map. All three shrink together: each merge
    removes two entries and appends one, so their sizes are always equal.
    """

    __slots__ = ("_distances", "_names", "_nodes")

    def __init__(self, distance_matrix: np.ndarray, names: Sequence[str]) -> None:
        """
        Initialize cluster state with one leaf per taxon.

        Args:
            distance_matrix: Square symmetric matrix in the order of ``names``.
            names: Unique taxon identifiers.
        """
        self._distances: np.ndarray = np.array(distance_matrix, dtype=np.float64, copy=True)
        self._names: list[str] = list(names)
        self._nodes: dict[str, TreeNode] = {name: TreeNode(name=name) for name in self._names}
        self._check_invariants()

    @property
    def size(self) -> int:
        return len(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    @property
    def distances(self) -> np.ndarray:
        """Read-only view of the live distance matrix."""
        view = self._distances.view()
        view.flags.writeable = False
        return view

    def q_matrix(self) -> np.ndarray:
        """Q-criterion for every active pair.

        Only the strict upper triangle is meaningful; the diagonal and
        lower triangle are set to +inf so they never win the minimum.
        """
        n = self.size
        row_sums = self._distances.sum(axis=1)
        q = (n - 2) * self._distances - row_sums[:, np.newaxis] - row_sums[np.newaxis, :]
        q[np.tril_indices(n)] = np.inf
        return q

    def select_pair(self) -> tuple[int, int]:
        """Index pair with the globally minimum Q.

        Ties go to the first (i, j) in row-major order with i < j, which
        is the order ``np.argmin`` scans the flattened matrix.
        """
        q = self.q_matrix()
        flat_idx = int(np.argmin(q))
        i, j = divmod(flat_idx, self.size)
        return i, j

    def merge(self, i: int, j: int) -> TreeNode:
        """Replace nodes ``i`` and ``j`` (i < j) with their joined parent.

        The new node's branch distance is d(i, j) / 2. Surviving rows keep
        their relative order and the new node is appended last.

        Returns:
            The newly created internal node.
        """
        assert 0 <= i < j < self.size, f"Invalid merge indices ({i}, {j})"

        d = self._distances
        d_ij = d[i, j]
        parent = TreeNode.join(
            self._nodes.pop(self._names[i]),
            self._nodes.pop(self._names[j]),
            distance=d_ij / 2.0,
        )

        keep = [k for k in range(self.size) if k not in (i, j)]
        new_row = (d[i, keep] + d[j, keep] - d_ij) / 2.0

        reduced = d[np.ix_(keep, keep)]
        m = len(keep)
        grown = np.zeros((m + 1, m + 1), dtype=np.float64)
        grown[:m, :m] = reduced
        grown[m, :m] = new_row
        grown[:m, m] = new_row
        self._distances = grown

        self._names = [self._names[k] for k in keep]
        self._names.append(parent.name)
        self._nodes[parent.name] = parent

        self._check_invariants()
        return parent

    def finish(self) -> TreeNode:
        """Join the last two nodes under a root with branch distance 0."""
        assert self.size == 2, f"Cannot finish with {self.size} active nodes"
        root = TreeNode.join(
            self._nodes.pop(self._names[0]),
            self._nodes.pop(self._names[1]),
            distance=0.0,
        )
        self._names.clear()
        self._distances = np.zeros((0, 0), dtype=np.float64)
        return root

    def _check_invariants(self) -> None:
        n = len(self._names)
        assert self._distances.shape == (n, n), (
            f"Matrix shape {self._distances.shape} does not match {n} names"
        )
        assert len(self._nodes) == n, f"{len(self._nodes)} live nodes for {n} names"


def neighbor_joining(distance_matrix: np.ndarray, names: Sequence[str]) -> TreeNode:
    """
    Build a rooted binary tree from a distance matrix by neighbor joining.

    Args:
        distance_matrix: Square symmetric distance matrix with zero diagonal.
        names: Taxon identifiers in matrix order.

    Returns:
        Root of a tree with len(names) leaves and len(names) - 1 internal nodes.

    Raises:
        InsufficientTaxaError: If fewer than 2 names are given.
        DistanceMatrixError: If the matrix shape does not match the names.
        DuplicateTaxonError: If names are not unique.

    Example:
        >>> import numpy as np
        >>> d = np.array([[0.0, 1.0, 4.0], [1.0, 0.0, 3.0], [4.0, 3.0, 0.0]])
        >>> neighbor_joining(d, ["S1", "S2", "S3"]).name
        '(S3,(S1,S2))'
    """
    matrix = np.asarray(distance_matrix, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.shape[0] != len(names):
        rows = matrix.shape[0] if matrix.ndim >= 1 else 0
        cols = matrix.shape[1] if matrix.ndim >= 2 else 0
        raise DistanceMatrixError(rows, cols, len(names))

    if len(names) < MIN_TAXA:
        raise InsufficientTaxaError(len(names))

    duplicates = [name for name, count in Counter(names).items() if count > 1]
    if duplicates:
        raise DuplicateTaxonError(duplicates)

    state = ClusterState(matrix, names)
    while state.size > 2:
        i, j = state.select_pair()
        parent = state.merge(i, j)
        logger.debug(
            f"NJ merge {parent.left.name} + {parent.right.name} "
            f"(branch distance {parent.distance:g}, {state.size} active)"
        )

    root = state.finish()
    logger.info(f"Neighbor-joining tree built from {len(names)} taxa")
    return root
