"""Binary tree node shared by the tree builders and the Newick serializer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class TreeNode:
    """Node of a strictly binary rooted tree.

    A node is either a leaf (no children) or has exactly two children.
    Leaves carry the taxon identifier as ``name``; internal nodes carry
    a composite name built from their children.

    Attributes:
        name: Taxon identifier or composite internal name.
        left: Left subtree, owned exclusively by this node.
        right: Right subtree, owned exclusively by this node.
        distance: Branch distance separating this node from its children.
    """

    name: str
    left: TreeNode | None = None
    right: TreeNode | None = None
    distance: float = 0.0

    def __post_init__(self) -> None:
        if (self.left is None) != (self.right is None):
            msg = f"Node '{self.name}' must have either zero or two children"
            raise ValueError(msg)

    @classmethod
    def join(cls, left: TreeNode, right: TreeNode, distance: float = 0.0) -> TreeNode:
        """Create an internal node named ``(left,right)`` over two subtrees."""
        return cls(
            name=f"({left.name},{right.name})",
            left=left,
            right=right,
            distance=distance,
        )

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def iter_postorder(self) -> Iterator[TreeNode]:
        """Yield nodes children-first (left, right, parent).

        Uses an explicit stack, so deep caterpillar trees are safe.
        """
        stack: list[tuple[TreeNode, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if node.is_leaf or expanded:
                yield node
                continue
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))

    def leaves(self) -> list[TreeNode]:
        """Leaf nodes in left-to-right order."""
        return [node for node in self.iter_postorder() if node.is_leaf]

    def leaf_names(self) -> list[str]:
        return [leaf.name for leaf in self.leaves()]

    def count_internal(self) -> int:
        return sum(1 for node in self.iter_postorder() if not node.is_leaf)

    def depth(self) -> int:
        """Number of internal nodes on the longest root-to-leaf path."""
        depths: dict[int, int] = {}
        for node in self.iter_postorder():
            if node.is_leaf:
                depths[id(node)] = 0
            else:
                depths[id(node)] = 1 + max(depths[id(node.left)], depths[id(node.right)])
        return depths[id(self)]
