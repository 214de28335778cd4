import unittest
import sys
import os
from collections import deque

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.core.events import EVT_START, EVT_CARVE, EVT_BACKTRACK, EVT_DONE
from maze_carver.algo.dfs import RecursiveBacktracker

def count_open_segments(grid):
    """Internal wall segments that were carved (entrance/exit excluded)."""
    count = 0
    for row in range(1, grid.rows - 1):
        for col in range(1, grid.cols - 1):
            if (row + col) % 2 == 1 and grid.get((row, col)) != Grid.WALL:
                count += 1
    return count

def tree_path(grid, start, goal):
    """BFS over open passages; returns start -> goal path and reached count."""
    parents = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nxt in grid.passages(cell):
            if nxt not in parents:
                parents[nxt] = cell
                queue.append(nxt)

    path = []
    cell = goal if goal in parents else None
    while cell is not None:
        path.append(cell)
        cell = parents[cell]
    path.reverse()
    return path, len(parents)

class TestGenerators(unittest.TestCase):
    def assertPerfectMaze(self, grid, solution_path):
        total = grid.total_cells

        # Spanning tree: V - 1 edges and everything reachable
        self.assertEqual(count_open_segments(grid), total - 1)
        path, reached = tree_path(grid, grid.start_cell, grid.goal_cell)
        self.assertEqual(reached, total, "Every cell should be reachable")

        # Entrance and exit always open
        self.assertEqual(grid.get(grid.entrance), Grid.OPEN)
        self.assertEqual(grid.get(grid.exit), Grid.OPEN)

        # No construction markers left behind
        self.assertNotIn(Grid.VISITED, grid.cells)

        # Solution is the unique tree path
        self.assertEqual(solution_path, path)
        for a, b in zip(solution_path, solution_path[1:]):
            self.assertIn(b, list(grid.passages(a)))
        for cell in solution_path:
            self.assertEqual(grid.get(cell), Grid.SOLUTION)

    def test_dfs_coverage(self):
        w, h = 20, 20
        grid = Grid(w, h)
        algo = RecursiveBacktracker(grid, seed=42)
        algo.run_all()

        self.assertEqual(algo.visited_count, w * h, "DFS should visit every cell")
        self.assertPerfectMaze(grid, algo.solution_path)

    def test_various_shapes(self):
        for w, h in [(1, 1), (1, 7), (7, 1), (2, 3), (5, 5), (13, 4)]:
            grid = Grid(w, h)
            algo = RecursiveBacktracker(grid, seed=w * 100 + h)
            algo.run_all()
            self.assertPerfectMaze(grid, algo.solution_path)

    def test_single_cell(self):
        grid = Grid(1, 1)
        events = []
        algo = RecursiveBacktracker(grid, seed=0, on_step=events.append)
        algo.run_all()

        self.assertEqual(algo.step_count, 0, "Loop body should never run")
        self.assertEqual([e.kind for e in events], [EVT_START, EVT_DONE])
        self.assertEqual(algo.solution_path, [(1, 1)])
        self.assertEqual(grid.get((1, 1)), Grid.SOLUTION)
        self.assertEqual(count_open_segments(grid), 0)

    def test_two_by_one(self):
        grid = Grid(2, 1)
        algo = RecursiveBacktracker(grid, seed=7)
        algo.run_all()

        self.assertEqual((grid.rows, grid.cols), (3, 5))
        self.assertEqual(count_open_segments(grid), 1)
        self.assertEqual(grid.get((1, 2)), Grid.OPEN)
        self.assertEqual(algo.solution_path, [(1, 1), (1, 3)])

    def test_step_events(self):
        grid = Grid(6, 4)
        events = []
        algo = RecursiveBacktracker(grid, seed=3, on_step=events.append)
        yielded = list(algo.run())

        self.assertEqual(yielded, events)
        self.assertEqual(events[0].kind, EVT_START)
        self.assertEqual(events[-1].kind, EVT_DONE)

        carves = [e for e in events if e.kind == EVT_CARVE]
        backtracks = [e for e in events if e.kind == EVT_BACKTRACK]
        self.assertEqual(len(carves), grid.total_cells - 1)
        self.assertEqual(len(carves) + len(backtracks), algo.step_count)

        # Each carve lands on a cell never seen before
        carved = [e.cell for e in carves]
        self.assertEqual(len(set(carved)), len(carved))
        self.assertNotIn(grid.start_cell, carved)

        # Once solved, always solved
        first_solved = next(i for i, e in enumerate(events) if e.solved)
        self.assertTrue(all(e.solved for e in events[first_solved:]))
        self.assertEqual(events[first_solved].cell, grid.goal_cell)

    def test_backtrack_depth(self):
        grid = Grid(8, 8)
        events = []
        RecursiveBacktracker(grid, seed=11, on_step=events.append).run_all()

        for prev, cur in zip(events[1:-1], events[2:-1]):
            if cur.kind == EVT_CARVE:
                self.assertEqual(cur.depth, prev.depth + 1)
            else:
                self.assertEqual(cur.depth, prev.depth - 1)

    def test_determinism(self):
        w, h = 10, 10
        grid1 = Grid(w, h)
        algo1 = RecursiveBacktracker(grid1, seed=12345)
        algo1.run_all()

        grid2 = Grid(w, h)
        algo2 = RecursiveBacktracker(grid2, seed=12345)
        for _ in algo2.run(): pass

        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())
        self.assertEqual(algo1.solution_path, algo2.solution_path)

    def test_seeds_change_layout(self):
        layouts = set()
        for seed in range(10):
            grid = Grid(10, 10)
            RecursiveBacktracker(grid, seed=seed).run_all()
            layouts.add(grid.cells.tobytes())
        self.assertGreater(len(layouts), 1)

    def test_randomized_trials(self):
        for seed in range(1000):
            grid = Grid(10, 10)
            algo = RecursiveBacktracker(grid, seed=seed)
            algo.run_all()
            self.assertEqual(count_open_segments(grid), 99)
            path, reached = tree_path(grid, grid.start_cell, grid.goal_cell)
            self.assertEqual(reached, 100)
            self.assertEqual(algo.solution_path, path)

    def test_cannot_run_twice(self):
        grid = Grid(3, 3)
        algo = RecursiveBacktracker(grid, seed=1)
        algo.run_all()
        with self.assertRaises(RuntimeError):
            algo.run_all()

    def test_cannot_restart_while_running(self):
        grid = Grid(4, 4)
        algo = RecursiveBacktracker(grid, seed=1)
        gen_iter = algo.run()
        for _ in range(5):
            next(gen_iter)

        with self.assertRaises(RuntimeError):
            algo.run_all()
        self.assertFalse(algo.finished)

        # The first run is unaffected and still completes
        for _ in gen_iter: pass
        self.assertTrue(algo.finished)
        self.assertEqual(algo.visited_count, 16)
        self.assertPerfectMaze(grid, algo.solution_path)

    def test_solution_stack_drained(self):
        grid = Grid(6, 5)
        algo = RecursiveBacktracker(grid, seed=17)
        algo.run_all()

        self.assertEqual(algo.solution.stack, [])
        self.assertEqual(algo.solution_path[0], grid.start_cell)
        self.assertEqual(algo.solution_path[-1], grid.goal_cell)

if __name__ == '__main__':
    unittest.main()
