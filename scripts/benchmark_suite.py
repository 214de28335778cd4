import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.algo.dfs import RecursiveBacktracker
from maze_carver.core.complexity import MazePostProcessor

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")

    start_time = time.time()
    grid = Grid(width, height)
    print(f"Grid Init: {time.time() - start_time:.4f}s ({len(grid.cells) / (1024 * 1024):.2f} MB)")

    algo = RecursiveBacktracker(grid, seed=42)
    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s ({algo.step_count:,} steps)")
    print(f"Speed: {(width*height)/gen_time:,.0f} cells/sec")

    stats = MazePostProcessor.calculate_stats(grid, algo.solution_path)
    print(f"Solution: {stats['solution_length']:,} cells, dead ends: {stats['dead_end_percent']:.1f}%")

def run_suite():
    sizes = [
        (10, 10),
        (100, 100),
        (500, 500),
        (1000, 1000),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
