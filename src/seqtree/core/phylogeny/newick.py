"""
Newick-style serialization of binary trees.

A leaf renders as its bare name. An internal node renders as

    (<left>:<distance>,<right>:<distance>)

where <distance> is the internal node's own branch distance. Both children
carry the parent's distance; canonical Newick would use each child's own
length, so this layout is likely a defect and is kept as-is. No trailing
semicolon is written.
"""

from __future__ import annotations

from seqtree.core.phylogeny.tree import TreeNode


def format_branch_length(value: float) -> str:
    """Render a branch length.

    Integral values drop the decimal part and infinity renders as ``inf``.

    Example:
        >>> format_branch_length(1.0)
        '1'
        >>> format_branch_length(0.5)
        '0.5'
        >>> format_branch_length(float("inf"))
        'inf'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def tree_to_newick(node: TreeNode) -> str:
    """Serialize a tree rooted at ``node``.

    Traversal is depth-first post-order; an explicit stack replaces
    recursion so arbitrarily deep trees serialize.

    Args:
        node: Root of the tree.

    Returns:
        Newick-like string without a terminating semicolon.
    """
    rendered: dict[int, str] = {}
    for current in node.iter_postorder():
        if current.is_leaf:
            rendered[id(current)] = current.name
            continue
        length = format_branch_length(float(current.distance))
        left = rendered.pop(id(current.left))
        right = rendered.pop(id(current.right))
        rendered[id(current)] = f"({left}:{length},{right}:{length})"
    return rendered[id(node)]
