# src/ellermaze/render/image.py
# Draw a generated maze with Pillow: one square per cell, walls as lines.
# Debug/preview output only; placing real assets is the caller's job.

from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from ..grid import Grid
from ..tiles import UP, LEFT, DOWN, RIGHT, classify

FLOOR = (220, 220, 220, 255)
WALL = (40, 40, 40, 255)


def _set_color(set_id: int) -> Tuple[int, int, int, int]:
    # Stable pseudo-random pastel per set ID
    h = (set_id * 2654435761) & 0xFFFFFF
    r, g, b = (h >> 16) & 0xFF, (h >> 8) & 0xFF, h & 0xFF
    return (128 + r // 2, 128 + g // 2, 128 + b // 2, 255)


def render_maze(
    grid: Grid,
    tile_size: int = 16,
    margin: int = 0,
    color_sets: bool = False,
    passages: Optional[Iterable[frozenset]] = None,
) -> Image.Image:
    """
    Return an RGBA image of the grid, top row at the top of the image.
    With `passages`, walls between adjacent cells are drawn wherever no
    passage was carved; otherwise only the tile-mask walls are drawn.
    """
    if tile_size < 2:
        raise ValueError("tile_size must be >= 2")
    w = grid.width * tile_size + 2 * margin
    h = grid.height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    carved = set(passages) if passages is not None else None

    for x, y in grid.coords():
        x0 = margin + x * tile_size
        y0 = margin + (grid.height - 1 - y) * tile_size  # flip: y=0 is the bottom row
        x1, y1 = x0 + tile_size - 1, y0 + tile_size - 1
        fill = _set_color(grid.get(x, y)) if color_sets else FLOOR
        draw.rectangle((x0, y0, x1, y1), fill=fill)

        mask = classify(grid, x, y)
        if carved is not None:
            for bit, n in ((UP, (x, y + 1)), (LEFT, (x - 1, y)), (DOWN, (x, y - 1)), (RIGHT, (x + 1, y))):
                if grid.in_bounds(*n) and frozenset(((x, y), n)) not in carved:
                    mask |= bit
        if mask & UP:
            draw.line((x0, y0, x1, y0), fill=WALL)
        if mask & DOWN:
            draw.line((x0, y1, x1, y1), fill=WALL)
        if mask & LEFT:
            draw.line((x0, y0, x0, y1), fill=WALL)
        if mask & RIGHT:
            draw.line((x1, y0, x1, y1), fill=WALL)
    return canvas
