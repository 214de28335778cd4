import sys
from typing import TextIO
from maze_carver import config
from maze_carver.core.grid import Grid
from maze_carver.core.events import StepEvent, EVT_START, EVT_DONE

MARKERS = {
    Grid.WALL: config.CHAR_WALL,
    Grid.OPEN: config.CHAR_OPEN,
    Grid.VISITED: config.CHAR_VISITED,
    Grid.SOLUTION: config.CHAR_SOLUTION,
}

def render_rows(grid: Grid):
    """Each grid row as a string of markers separated by spaces."""
    rows = []
    for row in range(grid.rows):
        start = row * grid.cols
        line = grid.cells[start:start + grid.cols]
        rows.append(" ".join(MARKERS[state] for state in line) + " ")
    return rows

def render_text(grid: Grid) -> str:
    return "\n".join(render_rows(grid)) + "\n\n"

def display(grid: Grid, stream: TextIO = None):
    stream = stream or sys.stdout
    stream.write(render_text(grid))
    stream.flush()


class ConsoleTracer:
    """
    on_step callback that redraws the whole grid after every carve or
    backtrack step. Start and final events are skipped; callers display
    the finished maze themselves.
    """
    def __init__(self, grid: Grid, stream: TextIO = None):
        self.grid = grid
        self.stream = stream
        self.frames = 0

    def __call__(self, event: StepEvent):
        if event.kind in (EVT_START, EVT_DONE):
            return
        display(self.grid, self.stream)
        self.frames += 1
