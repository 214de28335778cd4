from typing import Sequence
from maze_carver.core.grid import Grid, Cell

class MazePostProcessor:
    @staticmethod
    def count_passages(grid: Grid, cell: Cell) -> int:
        return sum(1 for _ in grid.passages(cell))

    @staticmethod
    def calculate_stats(grid: Grid, solution_path: Sequence[Cell] = None):
        """
        Shape statistics over the logical cells.
        Entrance and exit openings are not counted as passages.
        """
        dead_ends = 0
        corridors = 0 # 2 passages
        junctions = 0 # 3+ passages
        degree_sum = 0

        for cell in grid.logical_cells():
            passages = MazePostProcessor.count_passages(grid, cell)
            degree_sum += passages
            if passages == 1: dead_ends += 1
            elif passages == 2: corridors += 1
            elif passages >= 3: junctions += 1

        total = grid.total_cells
        return {
            "cells": total,
            # every passage is seen from both sides
            "passages": degree_sum // 2,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "solution_length": len(solution_path) if solution_path is not None else None,
        }
