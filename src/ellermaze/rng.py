# src/ellermaze/rng.py
# Injected random streams. The builder only ever calls .random(), so
# random.Random works too; these two exist for reproducible runs.

from dataclasses import dataclass
from typing import Sequence

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def normalize_seed(seed: int) -> int:
    """Fold any int into the valid Park–Miller state range 1..M-1."""
    s = seed % M
    return s if s != 0 else 1


@dataclass
class PMRandom:
    """
    Park–Miller minimal-standard generator (advance-then-return).
    random() maps the new state into [0, 1).
    """
    state: int

    def __post_init__(self):
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # state is 1..M-1, so (state-1)/(M-1) never reaches 1.0
        return (self.next32() - 1) / (M - 1)


@dataclass
class SequenceRandom:
    """Replays a fixed list of samples, cycling when exhausted."""
    samples: Sequence[float]
    drawn: int = 0

    def __post_init__(self):
        if not self.samples:
            raise ValueError("SequenceRandom needs at least one sample")
        for s in self.samples:
            if not (0.0 <= s < 1.0):
                raise ValueError(f"sample {s!r} outside [0, 1)")

    def random(self) -> float:
        v = self.samples[self.drawn % len(self.samples)]
        self.drawn += 1
        return v
