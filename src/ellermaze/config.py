from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class MazeConfig:
    # Designer defaults carried over from the scene setup.
    width: int = 30
    height: int = 30
    difficulty: int = 1
    seed: Optional[int] = None   # None → seeded from the OS

DEFAULTS = MazeConfig()
