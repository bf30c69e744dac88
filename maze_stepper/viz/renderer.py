import logging

import pygame

from maze_stepper.algo.base import Generator
from maze_stepper.core.grid import Cell, Grid
from maze_stepper.viz.recorder import VideoRecorder

logger = logging.getLogger(__name__)


class Renderer:
    COLOR_BG = (0, 0, 0)
    COLOR_WALL = (255, 255, 255)
    COLOR_VISITED = (0, 31, 46)
    COLOR_GOAL = (209, 100, 0)
    COLOR_CURRENT = (128, 0, 128)

    def __init__(self, grid: Grid, generator: Generator = None, width=720, height=720,
                 fps=60, steps_per_frame=1, record=False, close_when_done=False,
                 record_prefix="maze_gen"):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.fps = fps
        self.steps_per_frame = max(1, steps_per_frame)
        self.close_when_done = close_when_done

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0

        self.recorder = VideoRecorder(active=record, fps=fps, prefix=record_prefix)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None or generator.done
        self.last_event = None

    def fit_to_screen(self):
        """Auto-adjust cell size and offset to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = max(1.0, min(available_w / self.grid.cols, available_h / self.grid.rows))

        # Center
        total_maze_w = self.grid.cols * self.cell_size
        total_maze_h = self.grid.rows * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Generator - {self.grid.rows}x{self.grid.cols}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def cell_to_screen(self, cell: Cell):
        sx = cell.col * self.cell_size + self.offset_x
        sy = cell.row * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

    def advance(self):
        """Steps the generator up to steps_per_frame times. Never steps past completion."""
        if self.generator is None or self.gen_finished:
            return
        for _ in range(self.steps_per_frame):
            self.last_event = self.generator.step()
            if self.last_event.is_complete:
                self.gen_finished = True
                logger.info("Generation finished after %d steps", self.generator.step_count)
                break

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size)

        # 1. Cell fills (visited, goal)
        for cell in self.grid.iter_cells():
            px, py = self.cell_to_screen(cell)
            rect = (int(px) + 1, int(py) + 1, size - 2, size - 2)
            if self.grid.is_goal(cell):
                pygame.draw.rect(self.surface, self.COLOR_GOAL, rect)
            elif self.grid.is_visited(cell):
                pygame.draw.rect(self.surface, self.COLOR_VISITED, rect)

        # 2. Current cell highlight while generating
        current = getattr(self.generator, "current", None)
        if current is not None and not self.gen_finished:
            px, py = self.cell_to_screen(current)
            pygame.draw.rect(self.surface, self.COLOR_CURRENT, (int(px) + 1, int(py) + 1, size - 3, size - 3))

        # 3. Walls. Each cell owns its RIGHT and BOTTOM, edges add TOP and LEFT
        for cell in self.grid.iter_cells():
            px, py = self.cell_to_screen(cell)
            px, py = int(px), int(py)

            if self.grid.has_wall(cell, Grid.BOTTOM):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 2)
            if self.grid.has_wall(cell, Grid.RIGHT):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 2)
            if cell.row == 0 and self.grid.has_wall(cell, Grid.TOP):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), 2)
            if cell.col == 0 and self.grid.has_wall(cell, Grid.LEFT):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), 2)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        steps = self.generator.step_count if self.generator else 0
        rec_status = "REC" if self.recorder.active else ""
        status = "Done" if self.gen_finished else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.rows}x{self.grid.cols}",
            f"Steps: {steps}",
            f"Status: {status}",
            rec_status
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def render_frame(self):
        self.draw_grid()
        self.draw_hud()
        pygame.display.flip()

        if self.recorder.active:
            self.recorder.capture_frame(self.surface)

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.advance()
            self.render_frame()

            if self.gen_finished and self.close_when_done:
                self.running = False

            self.clock.tick(self.fps)

        self.recorder.stop()
        pygame.quit()
