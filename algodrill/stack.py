"""Stack-based algorithms and a stack that tracks its minimum."""

import operator
from collections.abc import Iterable, Iterator, Sequence


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_divide,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    return stack[-1]


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        current_min = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, current_min))

    def pop(self) -> None:
        self._entries.pop()

    def top(self) -> int:
        return self._entries[-1][0]

    def get_min(self) -> int:
        return self._entries[-1][1]


_CLOSERS = {"}": "{", ")": "(", "]": "["}


def is_valid(s: str) -> bool:
    """Tell whether every closing bracket in ``s`` matches its opener."""
    stack: list[str] = []
    for char in s:
        opener = _CLOSERS.get(char)
        if opener is None:
            stack.append(char)
        elif not stack or stack.pop() != opener:
            return False
    return not stack


def _generate(n: int, opened: int, closed: int, prefix: str) -> Iterator[str]:
    if opened >= n and closed >= n:
        yield prefix
        return
    if opened < n:
        yield from _generate(n, opened + 1, closed, prefix + "(")
    if closed < opened:
        yield from _generate(n, opened, closed + 1, prefix + ")")


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` bracket pairs."""
    return list(_generate(n, 0, 0, ""))


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none."""
    result = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > temperatures[pending[-1]]:
            earlier = pending.pop()
            result[earlier] = day - earlier
        pending.append(day)
    return result


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars arrive at ``target``."""
    cars = sorted(zip(position, speed, strict=True), reverse=True)
    arrivals: list[float] = []
    for pos, spd in cars:
        time = (target - pos) / spd
        if arrivals and time <= arrivals[-1]:
            continue
        arrivals.append(time)
    return len(arrivals)