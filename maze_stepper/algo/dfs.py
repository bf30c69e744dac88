import logging
from typing import List, Optional, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.core.events import EVT_ADVANCE, EVT_BACKTRACK, EVT_COMPLETE, EventLog, StepEvent
from maze_stepper.core.grid import Cell, Grid

logger = logging.getLogger(__name__)

RUNNING = "RUNNING"
DONE = "DONE"


class RecursiveBacktracker(Generator):
    """
    Randomized depth-first search with an explicit backtracking stack.

    Each step either advances into a random unvisited neighbor (removing the
    wall pair between them), backtracks one cell, or completes. A grid of N
    cells always takes exactly 2N - 1 steps.
    """
    def __init__(self, grid: Grid, seed: int = None, rng=None, event_log: Optional[EventLog] = None):
        super().__init__(grid, seed=seed, rng=rng)
        self.event_log = event_log
        self.state = RUNNING
        self.advances = 0
        self.backtracks = 0

        # Start at (0,0)
        self.current = Cell(0, 0)
        self.grid.set_visited(self.current)

        # Ancestors of current, most recent last
        self._stack: List[Cell] = []
        self._complete_event: Optional[StepEvent] = None

    @property
    def done(self) -> bool:
        return self.state == DONE

    @property
    def stack(self) -> Tuple[Cell, ...]:
        return tuple(self._stack)

    def unvisited_neighbors(self, cell: Cell) -> List[Cell]:
        return [nb for nb in self.grid.neighbors(cell) if not self.grid.is_visited(nb)]

    def step(self) -> StepEvent:
        if self.state == DONE:
            return self._complete_event

        candidates = self.unvisited_neighbors(self.current)

        if candidates:
            chosen = self.rng.choice(candidates)
            previous = self.current

            # Wall first: a NotAdjacent leaves visited flags and stack untouched
            self.grid.remove_wall_between(previous, chosen)
            self.grid.set_visited(chosen)
            self._stack.append(previous)
            self.current = chosen

            self.advances += 1
            event = StepEvent(EVT_ADVANCE, chosen, (previous, chosen))
        elif self._stack:
            # Backtrack
            self.current = self._stack.pop()
            self.backtracks += 1
            event = StepEvent(EVT_BACKTRACK, self.current)
        else:
            self.state = DONE
            event = self._complete_event = StepEvent(EVT_COMPLETE, self.current)
            logger.debug(
                "Generation complete: %dx%d, %d advances, %d backtracks",
                self.grid.rows, self.grid.cols, self.advances, self.backtracks,
            )

        self.step_count += 1
        if self.event_log is not None:
            self.event_log.record(event)
        return event
