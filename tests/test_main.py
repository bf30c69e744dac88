import unittest
import logging
import io
import sys
import os
from contextlib import redirect_stdout
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper import main as cli
from maze_stepper.algo.dfs import RecursiveBacktracker
from maze_stepper.core.grid import Grid
from maze_stepper.viz.replay import ReplayGenerator
from maze_stepper.viz.text import render_ascii

class TestCLI(unittest.TestCase):
    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(list(argv))
        return code, out.getvalue()

    def test_headless_ascii(self):
        with self.assertLogs("maze_stepper", level=logging.INFO) as logs:
            code, out = self.run_cli("generate", "--rows", "3", "--cols", "4", "--seed", "1", "--ascii", "--stats")
        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 2 * 3 + 1)
        self.assertEqual(len(lines[0]), 4 * 4 + 1)
        self.assertIn("G", out)
        self.assertTrue(any("23 steps" in line for line in logs.output))

    def test_size_shorthand(self):
        args = cli.build_parser().parse_args(["generate", "--size", "7"])
        self.assertEqual(cli.resolve_dimensions(args), (7, 7))
        args = cli.build_parser().parse_args(["generate", "--size", "7", "--cols", "3"])
        self.assertEqual(cli.resolve_dimensions(args), (7, 3))
        args = cli.build_parser().parse_args(["generate"])
        self.assertEqual(cli.resolve_dimensions(args), (20, 20))

    def test_replay_animates_recorded_run(self):
        try:
            import maze_stepper.viz.renderer
        except ImportError as e:
            self.skipTest(f"Rendering stack unavailable: {e}")

        windows = []

        class HeadlessRenderer:
            def __init__(self, grid, generator=None, **kwargs):
                self.grid = grid
                self.generator = generator
                self.kwargs = kwargs
                self.recorder = mock.Mock(output_file=None)
                windows.append(self)

            def init_window(self):
                pass

            def run_loop(self):
                self.generator.run_all()

        with mock.patch("maze_stepper.viz.renderer.Renderer", HeadlessRenderer):
            with self.assertLogs("maze_stepper", level=logging.INFO):
                code, out = self.run_cli("generate", "--size", "5", "--seed", "3", "--replay", "--ascii")
        self.assertEqual(code, 0)

        self.assertEqual(len(windows), 1)
        replay = windows[0].generator
        self.assertIsInstance(replay, ReplayGenerator)
        self.assertTrue(replay.done)
        self.assertEqual(replay.step_count, 2 * 25 - 1)
        self.assertEqual(windows[0].kwargs["record_prefix"], "replay_dfs_5x5")

        # The replayed grid matches a direct run with the same seed
        direct = Grid(5, 5)
        RecursiveBacktracker(direct, seed=3).run_all()
        self.assertEqual(windows[0].grid.snapshot(), direct.snapshot())
        self.assertEqual(out.strip(), render_ascii(direct))

    def test_rejects_bad_size(self):
        for bad in (["--size", "51"], ["--rows", "0"], ["--cols", ""], ["--rows", "x"]):
            with self.assertLogs("maze_stepper", level=logging.ERROR):
                code, out = self.run_cli("generate", *bad)
            self.assertEqual(code, 2)
            self.assertEqual(out, "")

if __name__ == '__main__':
    unittest.main()
