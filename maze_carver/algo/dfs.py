import logging
import random
from typing import Iterator, List
from maze_carver.core.grid import Grid, Cell
from maze_carver.core.events import StepEvent, EVT_START, EVT_CARVE, EVT_BACKTRACK, EVT_DONE
from maze_carver.algo.base import Generator
from maze_carver.algo.solution import SolutionTracker, overlay_solution

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    """
    Randomized iterative depth-first carver. The solution is recorded
    on the way by a SolutionTracker mirroring the backtrack stack.
    """
    def __init__(self, grid: Grid, seed: int = None, on_step=None):
        super().__init__(grid, seed=seed, on_step=on_step)
        self.solution = SolutionTracker(grid.goal_cell)
        self.solution_path: List[Cell] = []
        self.visited_count = 0
        self.started = False
        self.finished = False

    def run(self) -> Iterator[StepEvent]:
        if self.started:
            raise RuntimeError("Generator has already run; create a new one with a fresh grid")
        self.started = True

        rng = random.Random(self.seed)
        grid = self.grid
        total = grid.total_cells
        logger.debug(f"Carving {grid.width}x{grid.height} maze (seed={self.seed})")

        current = grid.start_cell
        grid.mark_visited(current)
        self.visited_count = 1
        self.solution.latch(grid)

        stack: List[Cell] = []

        yield self.emit(StepEvent(EVT_START, current, self.visited_count, 0, self.solution.solved))

        while self.visited_count < total:
            neighbors = grid.unvisited_neighbors(current)

            if neighbors:
                stack.append(current)
                self.solution.push(current)

                chosen = rng.choice(neighbors)
                grid.open_wall_between(current, chosen)
                current = chosen
                self.visited_count += 1
                kind = EVT_CARVE
            elif stack:
                current = stack.pop()
                self.solution.pop()
                kind = EVT_BACKTRACK
            else:
                # Only reachable on a disconnected grid
                break

            self.step_count += 1
            if not self.solution.solved and self.solution.latch(grid):
                logger.debug(f"Goal {grid.goal_cell} reached after {self.step_count} steps")

            yield self.emit(StepEvent(kind, current, self.visited_count, len(stack), self.solution.solved))

        if not self.solution.solved:
            raise RuntimeError(f"Goal {grid.goal_cell} was never reached")
        # Goal first, popped off the frozen stack
        popped = self.solution.drain()
        overlay_solution(grid, popped)
        self.solution_path = popped[::-1]
        self.finished = True
        logger.debug(f"Done: {self.step_count} steps, solution length {len(self.solution_path)}")

        yield self.emit(StepEvent(EVT_DONE, current, self.visited_count, 0, True))
