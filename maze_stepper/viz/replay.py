from typing import Optional

from maze_stepper.algo.base import Generator
from maze_stepper.core.errors import InvalidDimension
from maze_stepper.core.events import EVT_ADVANCE, EVT_BACKTRACK, EVT_COMPLETE, EventLog, StepEvent
from maze_stepper.core.grid import Cell, Grid


class ReplayGenerator(Generator):
    """
    Adapts a recorded EventLog to look like a Generator for the Renderer.
    Applies changes to the Grid as it iterates, one event per step.
    """
    def __init__(self, grid: Grid, log: EventLog):
        if (grid.rows, grid.cols) != (log.rows, log.cols):
            raise InvalidDimension(
                f"Event log is {log.rows}x{log.cols} but grid is {grid.rows}x{grid.cols}"
            )
        super().__init__(grid)
        self.log = log
        self.position = 0
        self.current = Cell(0, 0)
        self.grid.set_visited(self.current)
        self._complete_event: Optional[StepEvent] = None

    @property
    def done(self) -> bool:
        return self._complete_event is not None

    def step(self) -> StepEvent:
        if self._complete_event is not None:
            return self._complete_event

        if self.position >= len(self.log.events):
            # Truncated log, finish where it stops
            self._complete_event = StepEvent(EVT_COMPLETE, self.current)
            return self._complete_event

        event = self.log.events[self.position]
        if event.kind == EVT_ADVANCE:
            previous, chosen = event.wall_removed
            self.grid.remove_wall_between(previous, chosen)
            self.grid.set_visited(chosen)
        elif event.kind == EVT_BACKTRACK:
            pass
        elif event.kind == EVT_COMPLETE:
            self._complete_event = event
        else:
            raise ValueError(f"Unknown event kind {event.kind!r}")

        self.position += 1
        self.step_count += 1
        self.current = event.current
        return event
