"""
Reachability checks over a generated grid.

Two graphs are of interest: the classifier's "open" relation (adjacent and
both assigned) and the passages the builder actually carved.
"""

from collections import deque
from typing import Iterable, Set, Tuple

from .grid import EMPTY, Grid

Coord2D = Tuple[int, int]
DIRS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def flood_open(grid: Grid, start: Coord2D) -> Set[Coord2D]:
    if grid.get(*start) == EMPTY:
        return set()
    seen = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in DIRS:
            n = (cx + dx, cy + dy)
            if n in seen or not grid.in_bounds(*n) or grid.get(*n) == EMPTY:
                continue
            seen.add(n)
            q.append(n)
    return seen


def count_components(grid: Grid) -> int:
    """Connected components of assigned cells under the open relation."""
    seen: Set[Coord2D] = set()
    count = 0
    for xy in grid.coords():
        if xy in seen or grid.get(*xy) == EMPTY:
            continue
        seen |= flood_open(grid, xy)
        count += 1
    return count


def flood_passages(
    width: int, height: int, passages: Iterable[frozenset], start: Coord2D = (0, 0)
) -> Set[Coord2D]:
    """Cells reachable from `start` through carved passages only."""
    adj = {}
    for p in passages:
        a, b = tuple(p)
        adj.setdefault(a, []).append(b)
        adj.setdefault(b, []).append(a)
    seen = {start}
    q = deque([start])
    while q:
        c = q.popleft()
        for n in adj.get(c, ()):
            nx, ny = n
            if n not in seen and 0 <= nx < width and 0 <= ny < height:
                seen.add(n)
                q.append(n)
    return seen
