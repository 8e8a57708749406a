# algodrill

A collection of well-known algorithm exercises, a least-recently-used cache, a
minimum-tracking stack and a small in-memory file system, written as an
ordinary Python library with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrill.sliding_window` | `max_profit`, `max_sliding_window`, `length_of_longest_substring`, `check_inclusion`, `min_window` |
| `algodrill.stack` | `eval_rpn`, `MinStack`, `is_valid`, `generate_parenthesis`, `daily_temperatures`, `car_fleet` |
| `algodrill.graphs` | `GraphNode`, `clone_graph`, `num_islands`, `islands_and_treasure`, `count_components`, `max_area_of_island`, `oranges_rotting` |
| `algodrill.linked_lists` | `ListNode`, `RandomNode`, `list_from_values`, `list_to_values`, `copy_random_list`, `has_cycle`, `reorder_list`, `LRUCache`, `remove_nth_from_end`, `reverse_list`, `merge_two_lists`, `find_duplicate`, `add_two_numbers` |
| `algodrill.trees` | `TreeNode`, `is_same_tree`, `level_order`, `build_tree`, `max_depth`, `is_balanced`, `good_nodes`, `right_side_view`, `invert_tree`, `kth_smallest`, `lowest_common_ancestor`, `diameter_of_binary_tree`, `is_subtree`, `is_valid_bst` |
| `algodrill.filesystem` | `Entry`, `Directory`, `File` |

## Examples

```python
from algodrill.sliding_window import min_window
from algodrill.stack import eval_rpn, MinStack
from algodrill.linked_lists import LRUCache, list_from_values, list_to_values, reverse_list

min_window("ADOBECODEBANC", "ABC")       # "BANC"
eval_rpn(["2", "1", "+", "3", "*"])      # 9

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()                          # -3

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                             # 1
cache.put(3, 3)                          # evicts key 2
cache.get(2)                             # -1

list_to_values(reverse_list(list_from_values([1, 2, 3])))   # [3, 2, 1]
```

Trees are built from `TreeNode` values or rebuilt from traversals:

```python
from algodrill.trees import build_tree, level_order, max_depth

root = build_tree([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
level_order(root)    # [[3], [9, 20], [15, 7]]
max_depth(root)      # 3
```

A small file system:

```python
from algodrill.filesystem import Directory, File

root = Directory("root")
docs = Directory("docs", root)
root.add_entry(docs)
notes = File("notes.txt", docs, 120)
docs.add_entry(notes)

notes.full_path()    # "root/docs/notes.txt"
root.size()          # 120
notes.delete()       # True
```

## What it does not do

The package is a library only: it installs no command-line program. It has no
binary search or two-pointer routines, no dynamic array or insertion sort
helpers, no design-pattern examples and no game inventory model. The file
system lives in memory and is never written to disk.