from collections import deque

import pytest

from algodrill.trees import (
    TreeNode,
    build_tree,
    diameter_of_binary_tree,
    good_nodes,
    invert_tree,
    is_balanced,
    is_same_tree,
    is_subtree,
    is_valid_bst,
    kth_smallest,
    level_order,
    lowest_common_ancestor,
    max_depth,
    right_side_view,
)


def from_level(values):
    """Build a tree from a level-order list where None marks a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def bst_from_sorted(values):
    if not values:
        return None
    middle = len(values) // 2
    return TreeNode(
        values[middle],
        bst_from_sorted(values[:middle]),
        bst_from_sorted(values[middle + 1:]),
    )


def preorder(node):
    return [] if node is None else [node.val] + preorder(node.left) + preorder(node.right)


def inorder(node):
    return [] if node is None else inorder(node.left) + [node.val] + inorder(node.right)


def find(node, value):
    while node is not None and node.val != value:
        node = node.left if value < node.val else node.right
    return node


def test_same_tree_identical_copies():
    assert is_same_tree(from_level([1, 2, 3]), from_level([1, 2, 3])) is True


def test_same_tree_differences():
    assert is_same_tree(from_level([1, 2]), from_level([1, None, 2])) is False
    assert is_same_tree(from_level([1, 2, 1]), from_level([1, 1, 2])) is False
    assert is_same_tree(None, TreeNode(1)) is False


def test_same_tree_both_empty():
    assert is_same_tree(None, None) is True


def test_level_order_complete_tree():
    root = from_level([1, 2, 3, 4, 5, 6, 7])
    assert level_order(root) == [[1], [2, 3], [4, 5, 6, 7]]


def test_level_order_empty():
    assert level_order(None) == []


def test_level_order_flattens_to_input():
    values = [3, 9, 20, 15, 7]
    root = from_level([3, 9, 20, None, None, 15, 7])
    assert [v for level in level_order(root) for v in level] == values


@pytest.mark.parametrize(
    "preorder_values, inorder_values",
    [
        ([3, 9, 20, 15, 7], [9, 3, 15, 20, 7]),
        ([1], [1]),
        ([1, 2, 3], [3, 2, 1]),
        ([1, 2, 3], [1, 2, 3]),
    ],
)
def test_build_tree_round_trip(preorder_values, inorder_values):
    root = build_tree(preorder_values, inorder_values)
    assert preorder(root) == preorder_values
    assert inorder(root) == inorder_values


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_max_depth_chain():
    assert max_depth(chain([1, 2, 3, 4, 5])) == 5


def test_max_depth_empty():
    assert max_depth(None) == 0


def test_max_depth_matches_level_count():
    root = from_level([3, 9, 20, None, None, 15, 7])
    assert max_depth(root) == len(level_order(root))


def test_is_balanced():
    assert is_balanced(from_level([1, 2, 3, 4, 5, 6, 7])) is True
    assert is_balanced(None) is True
    assert is_balanced(chain([1, 2, 3])) is False


def test_is_balanced_deep_imbalance_below_root():
    root = TreeNode(1, chain([2, 3, 4]), chain([5, 6, 7]))
    assert is_balanced(root) is False


def test_good_nodes_increasing_chain():
    assert good_nodes(chain([1, 2, 3, 4])) == 4


def test_good_nodes_only_root_when_children_smaller():
    assert good_nodes(from_level([5, 1, 2])) == 1


def test_good_nodes_empty():
    assert good_nodes(None) == 0


def test_right_side_view_matches_last_of_levels():
    root = from_level([1, 2, 3, None, 5, None, 4])
    assert right_side_view(root) == [level[-1] for level in level_order(root)]


def test_right_side_view_complete_tree():
    assert right_side_view(from_level([1, 2, 3, 4, 5, 6, 7])) == [1, 3, 7]


def test_right_side_view_empty():
    assert right_side_view(None) == []


def test_invert_reverses_each_level():
    root = from_level([4, 2, 7, 1, 3, 6, 9])
    before = level_order(root)
    result = invert_tree(root)
    assert result is root
    assert level_order(result) == [level[::-1] for level in before]


def test_invert_twice_restores_tree():
    root = from_level([1, 2, 3, None, 5, None, 4])
    original = from_level([1, 2, 3, None, 5, None, 4])
    invert_tree(invert_tree(root))
    assert is_same_tree(root, original) is True


def test_invert_empty():
    assert invert_tree(None) is None


def test_kth_smallest_every_rank():
    values = [1, 4, 6, 9, 12, 15, 20]
    root = bst_from_sorted(values)
    assert [kth_smallest(root, k) for k in range(1, len(values) + 1)] == values


@pytest.mark.parametrize("k", [0, 4])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(bst_from_sorted([1, 2, 3]), k)


def test_lowest_common_ancestor():
    root = from_level([6, 2, 8, 0, 4, 7, 9, None, None, 3, 5])
    two, eight, four = find(root, 2), find(root, 8), find(root, 4)
    assert lowest_common_ancestor(root, two, eight) is root
    assert lowest_common_ancestor(root, two, four) is two
    assert lowest_common_ancestor(root, find(root, 3), find(root, 5)) is four


def test_diameter_chain():
    assert diameter_of_binary_tree(chain([1, 2, 3, 4, 5])) == 4


def test_diameter_single_and_empty():
    assert diameter_of_binary_tree(TreeNode(1)) == 0
    assert diameter_of_binary_tree(None) == 0


def test_diameter_not_through_root():
    inner = TreeNode(2, chain([3, 4, 5]), chain([6, 7, 8]))
    root = TreeNode(1, inner)
    assert diameter_of_binary_tree(root) == 6


def test_is_subtree_of_own_node():
    root = from_level([3, 4, 5, 1, 2])
    assert is_subtree(root, from_level([4, 1, 2])) is True


def test_is_subtree_rejects_extended_copy():
    root = from_level([3, 4, 5, 1, 2, None, None, None, None, 0])
    assert is_subtree(root, from_level([4, 1, 2])) is False


def test_is_subtree_empty_cases():
    assert is_subtree(TreeNode(1), None) is True
    assert is_subtree(None, None) is True
    assert is_subtree(None, TreeNode(1)) is False


def test_valid_bst_from_sorted():
    assert is_valid_bst(bst_from_sorted(list(range(15)))) is True
    assert is_valid_bst(None) is True


def test_invalid_bst_deep_violation():
    assert is_valid_bst(from_level([5, 1, 4, None, None, 3, 6])) is False
    assert is_valid_bst(from_level([5, 4, 6, None, None, 3, 7])) is False


def test_bst_rejects_equal_values():
    assert is_valid_bst(from_level([2, 2, 2])) is False


def test_bst_accepts_extreme_values():
    root = TreeNode(2**31 - 1, TreeNode(-(2**31)))
    assert is_valid_bst(root) is True