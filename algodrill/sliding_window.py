"""Sliding-window techniques over sequences and strings."""

from collections import Counter, deque
from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        return 0
    buy = prices[0]
    best = 0
    for price in prices[1:]:
        if buy < price:
            best = max(best, price - buy)
        else:
            buy = price
    return best


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of each window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError("window size must be positive")
    window: deque[int] = deque()
    output: list[int] = []
    for right, value in enumerate(nums):
        while window and value > nums[window[-1]]:
            window.pop()
        window.append(right)
        if window[0] <= right - k:
            window.popleft()
        if right + 1 >= k:
            output.append(nums[window[0]])
    return output


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    seen: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in seen:
            seen.remove(s[left])
            left += 1
        seen.add(char)
        best = max(best, right - left + 1)
    return best


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of non-empty ``s1`` is a substring of ``s2``."""
    if not s1 or len(s1) > len(s2):
        return False
    window = len(s1)
    target = Counter(s1)
    current = Counter(s2[:window])
    if current == target:
        return True
    for added, removed in zip(s2[window:], s2):
        current[added] += 1
        current[removed] -= 1
        if current[removed] == 0:
            del current[removed]
        if current == target:
            return True
    return False


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing every character of
    ``t`` with multiplicity, the leftmost on ties, or "" if there is none."""
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    begin = 0
    best: tuple[int, int] | None = None
    for end, char in enumerate(s, start=1):
        if need[char] > 0:
            missing -= 1
        need[char] -= 1
        while missing == 0:
            if best is None or end - begin < best[1] - best[0]:
                best = (begin, end)
            left_char = s[begin]
            need[left_char] += 1
            if need[left_char] > 0:
                missing += 1
            begin += 1
    if best is None:
        return ""
    return s[best[0]:best[1]]