import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.dfs import RecursiveBacktracker
from maze_stepper.core.analysis import MazeAnalyzer
from maze_stepper.core.grid import Cell, Grid

class TestAnalysis(unittest.TestCase):
    def test_fresh_grid(self):
        grid = Grid(3, 3)
        self.assertEqual(MazeAnalyzer.passages(grid), [])
        self.assertEqual(MazeAnalyzer.reachable(grid), {Cell(0, 0)})
        self.assertFalse(MazeAnalyzer.is_perfect(grid))
        self.assertTrue(MazeAnalyzer.is_symmetric(grid))

    def test_cycle_is_not_perfect(self):
        grid = Grid(2, 2)
        # Ring around all four cells: 4 passages, all reachable, one cycle
        grid.remove_wall_between(Cell(0, 0), Cell(0, 1))
        grid.remove_wall_between(Cell(0, 1), Cell(1, 1))
        grid.remove_wall_between(Cell(1, 1), Cell(1, 0))
        grid.remove_wall_between(Cell(1, 0), Cell(0, 0))
        self.assertEqual(len(MazeAnalyzer.reachable(grid)), 4)
        self.assertFalse(MazeAnalyzer.is_perfect(grid))

    def test_disconnected_is_not_perfect(self):
        grid = Grid(1, 4)
        grid.remove_wall_between(Cell(0, 0), Cell(0, 1))
        grid.remove_wall_between(Cell(0, 2), Cell(0, 3))
        self.assertEqual(len(MazeAnalyzer.passages(grid)), 2)
        self.assertFalse(MazeAnalyzer.is_perfect(grid))

    def test_asymmetric_wall_detected(self):
        grid = Grid(2, 2)
        # Clear one side only, bypassing remove_wall_between
        grid.cells[grid.get_index(Cell(0, 0))] &= ~Grid.RIGHT
        self.assertFalse(MazeAnalyzer.is_symmetric(grid))

    def test_stats_count_every_cell(self):
        grid = Grid(2, 2)
        self.assertEqual(MazeAnalyzer.calculate_stats(grid)["isolated"], 4)

        grid = Grid(1, 1)
        RecursiveBacktracker(grid, seed=0).run_all()
        stats = MazeAnalyzer.calculate_stats(grid)
        self.assertEqual(stats["isolated"], 1)
        self.assertEqual(stats["isolated"] + stats["dead_ends"] + stats["corridors"] + stats["intersections"], 1)

    def test_stats(self):
        rows, cols = 12, 12
        grid = Grid(rows, cols)
        RecursiveBacktracker(grid, seed=42).run_all()

        stats = MazeAnalyzer.calculate_stats(grid)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["intersections"], rows * cols)
        self.assertEqual(stats["isolated"], 0)
        self.assertEqual(stats["passages"], rows * cols - 1)
        self.assertAlmostEqual(stats["dead_end_percent"], stats["dead_ends"] / (rows * cols) * 100)

if __name__ == '__main__':
    unittest.main()
