# src/ellermaze/difficulty.py
import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class Difficulty(IntEnum):
    EASY = 1     # most walls removed, closest to an open field
    NORMAL = 2
    HARD = 3     # most walls kept, most maze-like


WALL_REMOVE_CHANCE = {
    Difficulty.EASY: 0.7,
    Difficulty.NORMAL: 0.5,
    Difficulty.HARD: 0.3,
}
FALLBACK_CHANCE = WALL_REMOVE_CHANCE[Difficulty.NORMAL]


def wall_remove_chance(difficulty) -> float:
    """
    Per-edge probability of opening a passage. Unknown levels (including
    non-int values) fall back to NORMAL's 0.5 and never raise.
    """
    try:
        return WALL_REMOVE_CHANCE[Difficulty(difficulty)]
    except (ValueError, TypeError):
        logger.debug("unrecognized difficulty %r, using %.1f", difficulty, FALLBACK_CHANCE)
        return FALLBACK_CHANCE
