from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional
from maze_carver.core.grid import Grid
from maze_carver.core.events import StepEvent

StepCallback = Callable[[StepEvent], None]

class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None, on_step: Optional[StepCallback] = None):
        self.grid = grid
        self.seed = seed
        self.on_step = on_step
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[StepEvent]:
        """
        Yields one StepEvent per step.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def emit(self, event: StepEvent) -> StepEvent:
        if self.on_step:
            self.on_step(event)
        return event

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
