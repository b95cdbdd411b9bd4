# src/ellermaze/layout.py
# Collaborator side of the grid: which asset goes where.

import logging
from typing import Iterator, Tuple

from .grid import Grid
from .tiles import classify, tile_index

logger = logging.getLogger(__name__)


def tile_placements(grid: Grid, asset_count: int) -> Iterator[Tuple[int, int, int]]:
    """
    Yield (x, y, asset_index) for every cell, x-major. Indices the asset
    table cannot serve are skipped, not raised.
    """
    if asset_count < 0:
        raise ValueError("asset_count must be >= 0")
    for x, y in grid.coords():
        i = tile_index(classify(grid, x, y))
        if 0 <= i < asset_count:
            yield x, y, i
        else:
            logger.debug("no asset for index %d at (%d, %d); skipped", i, x, y)
