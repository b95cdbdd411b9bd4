from dataclasses import dataclass
from typing import Iterator, List, Tuple

EMPTY = 0  # unassigned cell; reads as wall/void to the classifier


class InvalidDimension(ValueError):
    """Width or height was not a positive integer."""


def check_dimensions(width: int, height: int) -> None:
    for name, v in (("width", width), ("height", height)):
        if not isinstance(v, int) or isinstance(v, bool) or v <= 0:
            raise InvalidDimension(f"{name} must be a positive int, got {v!r}")


@dataclass
class Grid:
    """
    width × height set-ID grid, addressed [x, y] with y = 0 the bottom row.
    Backed by a flat row-major list.
    """
    width: int
    height: int
    buf: List[int]

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        check_dimensions(width, height)
        return cls(width=width, height=height, buf=[EMPTY] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def __getitem__(self, xy: Tuple[int, int]) -> int:
        return self.get(*xy)

    def __setitem__(self, xy: Tuple[int, int], v: int) -> None:
        self.set(xy[0], xy[1], v)

    def row(self, y: int) -> List[int]:
        start = self.idx(0, y)
        return self.buf[start:start + self.width]

    def coords(self) -> Iterator[Tuple[int, int]]:
        # x-major, the order the renderer walks the grid in
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def as_matrix(self, top_first: bool = False) -> List[List[int]]:
        """Rows as lists indexed [y][x]; top_first flips to screen order."""
        rows = [self.row(y) for y in range(self.height)]
        if top_first:
            rows.reverse()
        return rows
