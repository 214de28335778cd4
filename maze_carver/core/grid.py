from array import array
from typing import Iterator, List, Tuple

Cell = Tuple[int, int]

class Grid:
    """
    Maze stored on doubled coordinates: a (2h+1) x (2w+1) array where
    odd/odd positions are logical cells and the positions between them
    are wall segments. Borders and corners are always walls.
    """
    # Cell States
    WALL     = 0
    OPEN     = 1
    VISITED  = 2
    SOLUTION = 3

    # Candidate order: left, right, up, down
    DIRECTIONS = ((0, -2), (0, 2), (-2, 0), (2, 0))

    __slots__ = ('width', 'height', 'rows', 'cols', 'cells')

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Maze {name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"Maze {name} must be at least 1, got {value}")

        self.width = width
        self.height = height
        self.rows = height * 2 + 1
        self.cols = width * 2 + 1
        # 'B' (unsigned char) -> 1 byte per grid position
        self.cells = array('B', [self.WALL] * (self.rows * self.cols))
        self.initialize_shell()

    def initialize_shell(self):
        """
        Resets every position to wall, opens every logical cell and punches
        the entrance (top-left) and exit (bottom-right) through the border.
        """
        for i in range(len(self.cells)):
            self.cells[i] = self.WALL

        for row in range(1, self.rows, 2):
            for col in range(1, self.cols, 2):
                self.cells[row * self.cols + col] = self.OPEN

        self.set(self.entrance, self.OPEN)
        self.set(self.exit, self.OPEN)

    @property
    def entrance(self) -> Cell:
        return (0, 1)

    @property
    def exit(self) -> Cell:
        return (self.height * 2, self.width * 2 - 1)

    @property
    def start_cell(self) -> Cell:
        return (1, 1)

    @property
    def goal_cell(self) -> Cell:
        # Logical cell right above the exit
        return (self.height * 2 - 1, self.width * 2 - 1)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get(self, cell: Cell) -> int:
        return self.cells[self.get_index(*cell)]

    def set(self, cell: Cell, state: int):
        self.cells[self.get_index(*cell)] = state

    def is_legal(self, cell: Cell) -> bool:
        """Strictly inside the outer frame."""
        row, col = cell
        return 1 <= row < self.height * 2 and 1 <= col < self.width * 2

    def is_open_or_visited(self, cell: Cell) -> bool:
        return self.get(cell) != self.WALL

    def is_visited(self, cell: Cell) -> bool:
        return self.get(cell) == self.VISITED

    def mark_visited(self, cell: Cell):
        self.set(cell, self.VISITED)

    def mark_solution(self, cell: Cell):
        self.set(cell, self.SOLUTION)

    def open_wall_between(self, a: Cell, b: Cell):
        """
        Opens the wall segment separating adjacent logical cells a and b,
        and marks b (the cell being carved into) as visited.
        """
        dr, dc = b[0] - a[0], b[1] - a[1]
        if (abs(dr), abs(dc)) not in ((2, 0), (0, 2)):
            raise ValueError(f"Cells {a} and {b} are not adjacent")

        self.set((a[0] + dr // 2, a[1] + dc // 2), self.OPEN)
        self.mark_visited(b)

    def unvisited_neighbors(self, cell: Cell) -> List[Cell]:
        """
        Legal logical neighbors that have not been visited yet,
        in left, right, up, down order.
        """
        row, col = cell
        result = []
        for dr, dc in self.DIRECTIONS:
            neighbor = (row + dr, col + dc)
            if self.is_legal(neighbor) and not self.is_visited(neighbor):
                result.append(neighbor)
        return result

    def passages(self, cell: Cell) -> Iterator[Cell]:
        """
        Yields logical neighbors connected to cell through an open wall segment.
        """
        row, col = cell
        for dr, dc in self.DIRECTIONS:
            neighbor = (row + dr, col + dc)
            if not self.is_legal(neighbor):
                continue
            if self.get((row + dr // 2, col + dc // 2)) != self.WALL:
                yield neighbor

    def logical_cells(self) -> Iterator[Cell]:
        for row in range(1, self.rows, 2):
            for col in range(1, self.cols, 2):
                yield (row, col)

    def clear_visited(self):
        """Turns construction-time visited markers back into open cells."""
        for i, state in enumerate(self.cells):
            if state == self.VISITED:
                self.cells[i] = self.OPEN
