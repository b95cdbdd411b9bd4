# Wall bitmask per cell. Bit order: up, left, down, right (bit3..bit0).
# A side is blocked when the neighbor is off-grid or unassigned (0).

from typing import List
from .grid import EMPTY, Grid

UP    = 0b1000
LEFT  = 0b0100
DOWN  = 0b0010
RIGHT = 0b0001

TILE_COUNT = 16  # masks 0..15; a full asset table has 15 usable variants

_SIDES = (
    (UP,    0,  1, "up"),
    (LEFT, -1,  0, "left"),
    (DOWN,  0, -1, "down"),
    (RIGHT, 1,  0, "right"),
)

def _blocked(grid: Grid, x: int, y: int) -> bool:
    return not grid.in_bounds(x, y) or grid.get(x, y) == EMPTY

def classify(grid: Grid, x: int, y: int) -> int:
    """
    Wall status of (x, y) as a 4-bit mask. Two assigned neighbors always
    read as open to each other, whatever their set IDs.
    """
    if not grid.in_bounds(x, y):
        raise IndexError(f"({x}, {y}) outside {grid.width}x{grid.height} grid")
    mask = 0
    for bit, dx, dy, _ in _SIDES:
        if _blocked(grid, x + dx, y + dy):
            mask |= bit
    return mask

def tile_index(mask: int) -> int:
    # The mask is the asset index as-is.
    return mask

def classify_grid(grid: Grid) -> List[List[int]]:
    """Masks for every cell, indexed [y][x] like Grid.as_matrix()."""
    return [[classify(grid, x, y) for x in range(grid.width)] for y in range(grid.height)]

def describe(mask: int) -> str:
    if not (0 <= mask < TILE_COUNT):
        raise ValueError("mask must be 0..15")
    names = [name for bit, _, _, name in _SIDES if mask & bit]
    if not names:
        return "open"
    return "blocked: " + ", ".join(names)
