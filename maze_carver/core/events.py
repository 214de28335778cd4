from dataclasses import dataclass
from typing import Tuple

# Event Types
EVT_START = "start"
EVT_CARVE = "carve"
EVT_BACKTRACK = "backtrack"
EVT_DONE = "done"

@dataclass(frozen=True)
class StepEvent:
    """
    Snapshot emitted by a generator after each step.
    cell is the current cell once the step has been applied.
    """
    kind: str
    cell: Tuple[int, int]
    visited: int
    depth: int
    solved: bool

    def __str__(self):
        return f"{self.kind} {self.cell} visited={self.visited} depth={self.depth}"
