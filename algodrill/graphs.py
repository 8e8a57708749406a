"""Graph traversals: cloning, grid flood fills and breadth-first spreading."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

INF = 2**31 - 1
"""Marker for an unvisited land cell in :func:`islands_and_treasure`."""


@dataclass(eq=False)
class GraphNode:
    """A node of an undirected graph holding an integer value."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list)


def clone_graph(node: GraphNode | None) -> GraphNode | None:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    pending = [node]
    while pending:
        current = pending.pop()
        for neighbor in current.neighbors:
            if neighbor not in copies:
                copies[neighbor] = GraphNode(neighbor.val)
                pending.append(neighbor)
            copies[current].neighbors.append(copies[neighbor])
    return copies[node]


def _neighbours(i: int, j: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for di, dj in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        r, c = i + di, j + dj
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _flood(
    start: tuple[int, int],
    grid: Sequence[Sequence[object]],
    land: object,
    seen: set[tuple[int, int]],
) -> int:
    rows, cols = len(grid), len(grid[0])
    seen.add(start)
    pending = [start]
    area = 0
    while pending:
        i, j = pending.pop()
        area += 1
        for cell in _neighbours(i, j, rows, cols):
            r, c = cell
            if cell not in seen and grid[r][c] == land:
                seen.add(cell)
                pending.append(cell)
    return area


def _island_areas(grid: Sequence[Sequence[object]], land: object) -> Iterator[int]:
    seen: set[tuple[int, int]] = set()
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == land and (i, j) not in seen:
                yield _flood((i, j), grid, land, seen)


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the four-connected islands of ``"1"`` cells in ``grid``."""
    return sum(1 for _ in _island_areas(grid, "1"))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest four-connected island of ``1`` cells."""
    return max(_island_areas(grid, 1), default=0)


def islands_and_treasure(grid: list[list[int]]) -> None:
    """Fill each land cell (``INF``) in place with its distance to the
    nearest treasure (``0``); water (``-1``) and unreachable land stay put."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    queue = deque(
        (i, j) for i, row in enumerate(grid) for j, value in enumerate(row) if value == 0
    )
    while queue:
        i, j = queue.popleft()
        for r, c in _neighbours(i, j, rows, cols):
            if grid[r][c] == INF:
                grid[r][c] = grid[i][j] + 1
                queue.append((r, c))


def count_components(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Count the connected components of an undirected graph on ``n`` nodes."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    visited = [False] * n
    components = 0
    for start in range(n):
        if visited[start]:
            continue
        components += 1
        visited[start] = True
        pending = [start]
        while pending:
            node = pending.pop()
            for other in adjacency[node]:
                if not visited[other]:
                    visited[other] = True
                    pending.append(other)
    return components


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange (``1``) is left next to a
    rotten one (``2``), or -1 if some fresh orange can never rot."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    fresh: set[tuple[int, int]] = set()
    rotten: deque[tuple[int, int]] = deque()
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == 1:
                fresh.add((i, j))
            elif value == 2:
                rotten.append((i, j))
    minutes = 0
    while fresh and rotten:
        for _ in range(len(rotten)):
            i, j = rotten.popleft()
            for cell in _neighbours(i, j, rows, cols):
                if cell in fresh:
                    fresh.remove(cell)
                    rotten.append(cell)
        minutes += 1
    return -1 if fresh else minutes