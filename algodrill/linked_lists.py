"""Singly linked list algorithms and a least-recently-used cache."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


@dataclass(eq=False)
class RandomNode:
    """A list node that also points to an arbitrary node of its list."""

    val: int = 0
    next: RandomNode | None = None
    random: RandomNode | None = None


def _iterate(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def list_from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic linked list from head to tail."""
    return [node.val for node in _iterate(head)]


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Return a deep copy of a list whose nodes carry random pointers."""
    copies: dict[RandomNode | None, RandomNode | None] = {None: None}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next
    node = head
    while node is not None:
        duplicate = copies[node]
        duplicate.next = copies[node.next]
        duplicate.random = copies[node.random]
        node = node.next
    return copies[head]


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    if head is None:
        return False
    slow: ListNode | None = head
    fast = head.next
    while fast is not None and fast.next is not None:
        if fast is slow:
            return True
        slow = slow.next
        fast = fast.next.next
    return False


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reorder_list(head: ListNode | None) -> None:
    """Reorder the list in place to first, last, second, second last, ..."""
    if head is None:
        return
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    second = reverse_list(slow.next)
    slow.next = None
    first: ListNode | None = head
    while second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


class LRUCache:
    """A fixed-capacity map that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for ``key``, or -1 if it is not cached."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        self._entries.pop(key, None)
        self._entries[key] = value
        if len(self._entries) > self._capacity:
            self._entries.popitem(last=False)


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node from the end and return the head.

    When ``n`` does not name a node of the list, None is returned.
    """
    nodes = list(_iterate(head))
    position = len(nodes) - n
    if not 0 <= position < len(nodes):
        return None
    removed = nodes[position]
    if position == 0:
        return removed.next
    nodes[position - 1].next = removed.next
    removed.next = None
    return head


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties favour ``list1``."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val > list2.val:
            tail.next, list2 = list2, list2.next
        else:
            tail.next, list1 = list1, list1.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in ``nums`` whose values lie in 1..len-1."""
    slow = fast = 0
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    finder = 0
    while True:
        finder = nums[finder]
        slow = nums[slow]
        if slow == finder:
            return slow


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists and return the sum likewise."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next