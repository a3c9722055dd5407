"""Graph puzzles: connectivity, bipartition and shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

__all__ = [
    "DisjointSet",
    "new_roads",
    "build_teams",
    "count_rooms",
    "labyrinth_path",
    "message_route",
]

_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))


class DisjointSet:
    """Union-find over the elements 0..n with union by size and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return whether they were separate."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self._size[px] < self._size[py]:
            px, py = py, px
        self._parent[py] = px
        self._size[px] += self._size[py]
        return True


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{n}")
        adj[a].append(b)
        adj[b].append(a)
    return adj


def new_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Fewest new roads that connect cities 1..n, as pairs of cities."""
    dsu = DisjointSet(n)
    for a, b in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) names a city outside 1..{n}")
        dsu.union(a, b)
    roots = [city for city in range(1, n + 1) if dsu.find(city) == city]
    return list(zip(roots, roots[1:]))


def build_teams(n: int, friendships: Iterable[tuple[int, int]]) -> list[int] | None:
    """Team (1 or 2) of each pupil 1..n so no friends share a team, or None if impossible."""
    adj = _adjacency(n, friendships)
    team = [-1] * (n + 1)
    possible = True
    for start in range(1, n + 1):
        if team[start] != -1:
            continue
        team[start] = 1
        queue = deque([start])
        while queue and possible:
            node = queue.popleft()
            for neighbour in adj[node]:
                if team[neighbour] == -1:
                    team[neighbour] = 1 - team[node]
                    queue.append(neighbour)
                elif team[neighbour] == team[node]:
                    possible = False
                    break
    if not possible:
        return None
    return [t + 1 for t in team[1:]]


def count_rooms(grid: Sequence[str]) -> int:
    """Number of connected regions of ``.`` cells in the grid."""
    rows = len(grid)
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != "." or (i, j) in seen:
                continue
            rooms += 1
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                r, c = stack.pop()
                for _, dr, dc in _MOVES:
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == "."
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def _locate(grid: Sequence[str], mark: str) -> tuple[int, int]:
    found = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == mark:
                found = (i, j)
    if found is None:
        raise ValueError(f"grid has no {mark!r} cell")
    return found


def labyrinth_path(grid: Sequence[str]) -> str | None:
    """Shortest route from ``A`` to ``B`` as a string of U/D/L/R moves, or None."""
    start = _locate(grid, "A")
    end = _locate(grid, "B")
    rows = len(grid)
    came_from: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    visited = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            path: list[str] = []
            while cell != start:
                cell, move = came_from[cell]
                path.append(move)
            return "".join(reversed(path))
        r, c = cell
        for move, dr, dc in _MOVES:
            nxt = (r + dr, c + dc)
            nr, nc = nxt
            if (
                0 <= nr < rows
                and 0 <= nc < len(grid[nr])
                and nxt not in visited
                and grid[nr][nc] != "#"
            ):
                visited.add(nxt)
                came_from[nxt] = (cell, move)
                queue.append(nxt)
    return None


def message_route(n: int, links: Iterable[tuple[int, int]]) -> list[int] | None:
    """Shortest chain of computers from 1 to ``n``, or None when unreachable."""
    if n < 1:
        raise ValueError("n must be at least 1")
    adj = _adjacency(n, links)
    parent = [0] * (n + 1)
    visited = [False] * (n + 1)
    visited[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        if node == n:
            path = [node]
            while path[-1] != 1:
                path.append(parent[path[-1]])
            path.reverse()
            return path
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                parent[neighbour] = node
                queue.append(neighbour)
    return None