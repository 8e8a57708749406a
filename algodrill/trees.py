"""Binary tree algorithms: traversals, construction, shape and search-tree checks."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import islice


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    pending = [(p, q)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.right, b.right))
        pending.append((a.left, b.left))
    return True


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the node values level by level, each level from left to right."""
    levels: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        levels.append(level)
    return levels


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    if not preorder or not inorder:
        return None
    positions = {value: index for index, value in enumerate(inorder)}
    values = iter(preorder)

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        value = next(values)
        middle = positions[value]
        node = TreeNode(value)
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        return node

    return build(0, len(inorder) - 1)


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return len(level_order(root))


def _height(node: TreeNode | None) -> tuple[int, bool, int]:
    """Return the height, whether the subtree is balanced, and its diameter."""
    if node is None:
        return 0, True, 0
    left_height, left_balanced, left_diameter = _height(node.left)
    right_height, right_balanced, right_diameter = _height(node.right)
    balanced = left_balanced and right_balanced and abs(left_height - right_height) <= 1
    diameter = max(left_diameter, right_diameter, left_height + right_height)
    return 1 + max(left_height, right_height), balanced, diameter


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _height(root)[1]


def good_nodes(root: TreeNode | None) -> int:
    """Count nodes whose value is at least every value on their path from the root."""
    if root is None:
        return 0
    count = 0
    pending = [(root, root.val)]
    while pending:
        node, highest = pending.pop()
        if node.val >= highest:
            count += 1
        highest = max(highest, node.val)
        pending.extend((child, highest) for child in (node.left, node.right) if child is not None)
    return count


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of each level, from the top down."""
    return [level[-1] for level in level_order(root)]


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        node.left, node.right = node.right, node.left
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return root


def _inorder(root: TreeNode | None) -> Iterator[int]:
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.val
        node = node.right


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the ``k``-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError("k must be positive")
    found = next(islice(_inorder(root), k - 1, None), None)
    if found is None:
        raise ValueError(f"tree holds fewer than {k} values")
    return found


def lowest_common_ancestor(root: TreeNode, p: TreeNode, q: TreeNode) -> TreeNode:
    """Return the lowest common ancestor of ``p`` and ``q`` in a binary search tree."""
    node = root
    while True:
        if node.val > p.val and node.val > q.val:
            node = node.left
        elif node.val < p.val and node.val < q.val:
            node = node.right
        else:
            return node


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    return _height(root)[2]


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Tell whether ``sub_root`` equals some subtree of ``root``."""
    if sub_root is None:
        return True
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        if is_same_tree(node, sub_root):
            return True
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return False


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether the tree is a binary search tree with strictly ordered values."""
    pending: list[tuple[TreeNode | None, float, float]] = [(root, -math.inf, math.inf)]
    while pending:
        node, low, high = pending.pop()
        if node is None:
            continue
        if not low < node.val < high:
            return False
        pending.append((node.left, low, node.val))
        pending.append((node.right, node.val, high))
    return True