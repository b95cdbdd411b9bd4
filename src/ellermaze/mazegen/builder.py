# src/ellermaze/mazegen/builder.py
# Row-by-row set-merging maze generation (Eller's algorithm).
# Rows run bottom (y=0) to top; the top row is closed unconditionally.

import logging
import random
from typing import FrozenSet, Iterator, Optional, Protocol, Set, Tuple

from ..config import MazeConfig
from ..difficulty import wall_remove_chance
from ..grid import EMPTY, Grid
from ..rng import PMRandom
from .sets import SetRegistry

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Passage = FrozenSet[Cell]


class RandomStream(Protocol):
    def random(self) -> float: ...


def passage(a: Cell, b: Cell) -> Passage:
    return frozenset((a, b))


class MazeBuilder:
    """
    Builds a connectivity grid of set IDs.

    Invariant held throughout generation: two cells with the same set ID
    are joined by removed walls. Every removed wall is also recorded in
    `passages` for the most recent generate() call.
    """

    def __init__(self):
        self.grid: Optional[Grid] = None
        self.passages: Set[Passage] = set()
        self._next_id = 1

    def _fresh_id(self) -> int:
        sid = self._next_id
        self._next_id += 1
        return sid

    def generate(self, width: int, height: int, difficulty, rng: RandomStream) -> Grid:
        for _ in self.build_rows(width, height, difficulty, rng):
            pass
        return self.grid

    def build_rows(self, width: int, height: int, difficulty, rng: RandomStream) -> Iterator[int]:
        """
        Generate step by step, yielding y once row y is final (its merges
        done and row y+1 seeded). `grid` and `passages` are live between
        yields; the last yield is the closed top row.
        """
        chance = wall_remove_chance(difficulty)

        grid = Grid.empty(width, height)
        self.grid = grid
        self.passages = set()
        self._next_id = 1

        # Row 0: every column starts in its own set.
        sets = SetRegistry(grid, 0)
        for x in range(width):
            sid = self._fresh_id()
            grid.set(x, 0, sid)
            sets.register(sid, x)

        for y in range(height - 1):
            self._join_horizontal(sets, y, chance, rng)
            self._extend_vertical(y, chance, rng)
            sets = self._seed_row(y + 1)
            logger.debug("row %d: %d sets carried into row %d", y, len(sets), y + 1)
            yield y

        self._close_top_row(sets, height - 1)
        logger.debug(
            "generated %dx%d maze (difficulty=%r, p=%.1f): %d sets allocated, %d passages",
            width, height, difficulty, chance, self._next_id - 1, len(self.passages),
        )
        yield height - 1

    def _join_horizontal(self, sets: SetRegistry, y: int, chance: float, rng: RandomStream) -> None:
        grid = self.grid
        for x in range(grid.width - 1):
            # one draw per pair, before looking at the sets
            roll = rng.random()
            left, right = grid.get(x, y), grid.get(x + 1, y)
            if roll < chance and left != right:
                sets.merge(left, right)
                self.passages.add(passage((x, y), (x + 1, y)))

    def _extend_vertical(self, y: int, chance: float, rng: RandomStream) -> None:
        # Every set in row y gets at least one cell carried into row y+1:
        # the first column seen for a set always goes through.
        grid = self.grid
        connected = {}
        for x in range(grid.width):
            sid = grid.get(x, y)
            connected.setdefault(sid, False)
            roll = rng.random()
            if roll < chance or not connected[sid]:
                grid.set(x, y + 1, sid)
                connected[sid] = True
                self.passages.add(passage((x, y), (x, y + 1)))

    def _seed_row(self, y: int) -> SetRegistry:
        grid = self.grid
        sets = SetRegistry(grid, y)
        for x in range(grid.width):
            sid = grid.get(x, y)
            if sid == EMPTY:
                sid = self._fresh_id()
                grid.set(x, y, sid)
            sets.register(sid, x)
        return sets

    def _close_top_row(self, sets: SetRegistry, y: int) -> None:
        grid = self.grid
        for x in range(grid.width - 1):
            left, right = grid.get(x, y), grid.get(x + 1, y)
            if left != right:
                sets.merge(left, right)
                self.passages.add(passage((x, y), (x + 1, y)))


def generate_maze(width: int, height: int, difficulty, rng: RandomStream) -> Grid:
    return MazeBuilder().generate(width, height, difficulty, rng)


def rng_for_seed(seed: Optional[int]) -> PMRandom:
    if seed is None:
        seed = random.SystemRandom().randrange(1, 0x7FFFFFFF)
    return PMRandom(seed)


def generate_from_config(cfg: MazeConfig) -> Grid:
    return generate_maze(cfg.width, cfg.height, cfg.difficulty, rng_for_seed(cfg.seed))
