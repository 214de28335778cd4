from typing import List, Sequence
from maze_carver.core.grid import Grid, Cell

class SolutionTracker:
    """
    Shadow of the generator's backtrack stack. Pushes and pops follow the
    backtrack stack until the goal cell is first visited; the goal is then
    pushed and the stack freezes, holding the entrance -> goal path.
    """
    def __init__(self, goal: Cell):
        self.goal = goal
        self.stack: List[Cell] = []
        self.solved = False

    def push(self, cell: Cell):
        if not self.solved:
            self.stack.append(cell)

    def pop(self):
        if not self.solved and self.stack:
            self.stack.pop()

    def latch(self, grid: Grid) -> bool:
        if not self.solved and grid.is_visited(self.goal):
            self.stack.append(self.goal)
            self.solved = True
        return self.solved

    def path(self) -> List[Cell]:
        """Entrance-first copy of the frozen stack."""
        if not self.solved:
            raise RuntimeError("Goal cell has not been reached yet")
        return list(self.stack)

    def drain(self) -> List[Cell]:
        """Pops the whole stack, goal first."""
        popped = []
        while self.stack:
            popped.append(self.stack.pop())
        return popped


def overlay_solution(grid: Grid, path: Sequence[Cell]):
    """
    Replaces visited markers with open cells and paints the path.
    Only logical cells are touched, so walls and borders keep their state.
    """
    grid.clear_visited()
    for cell in path:
        grid.mark_solution(cell)
    # Anchor the path next to the exit
    grid.mark_solution(grid.goal_cell)
