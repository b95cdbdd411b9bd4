# src/ellermaze/mazegen/sets.py
# Per-row set membership: set ID -> ordered list of columns in one row.

from typing import Dict, List
from ..grid import Grid


class SetRegistry:
    """
    Membership of the sets present in a single grid row.

    The registry is bound to (grid, row) so a merge can retag the absorbed
    columns in place. A fresh registry is built for each row; only the
    set IDs carried up through vertical passages survive the transition.
    """

    def __init__(self, grid: Grid, row: int):
        self.grid = grid
        self.row = row
        self._members: Dict[int, List[int]] = {}

    def register(self, set_id: int, x: int) -> None:
        if set_id <= 0:
            raise ValueError(f"set IDs are positive, got {set_id}")
        self._members.setdefault(set_id, []).append(x)

    def merge(self, keep: int, absorb: int) -> None:
        """Fold `absorb` into `keep`: retag its cells, drop its entry."""
        if keep == absorb:
            return
        if keep not in self._members:
            raise KeyError(keep)
        moved = self._members.pop(absorb)
        for x in moved:
            self.grid.set(x, self.row, keep)
        self._members[keep].extend(moved)

    def members(self, set_id: int) -> List[int]:
        return list(self._members[set_id])

    def set_ids(self) -> List[int]:
        return list(self._members)

    def __contains__(self, set_id: int) -> bool:
        return set_id in self._members

    def __len__(self) -> int:
        return len(self._members)
