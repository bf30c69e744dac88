from collections import Counter
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from maze_stepper.core.grid import Cell

# Event Types
EVT_ADVANCE = "advance"
EVT_BACKTRACK = "backtrack"
EVT_COMPLETE = "complete"


class StepEvent(NamedTuple):
    """
    Result of a single generator step.
    `current` is the traversal head after the step. `wall_removed` is the
    (previous, chosen) pair for advances and None otherwise.
    """
    kind: str
    current: Cell
    wall_removed: Optional[Tuple[Cell, Cell]] = None

    @property
    def is_complete(self) -> bool:
        return self.kind == EVT_COMPLETE


class EventLog:
    """
    In-memory record of a generation run, replayable through
    maze_stepper.viz.replay.ReplayGenerator.
    """
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.events: List[StepEvent] = []

    def record(self, event: StepEvent):
        self.events.append(event)

    def counts(self) -> Dict[str, int]:
        counter = Counter(evt.kind for evt in self.events)
        return {kind: counter[kind] for kind in (EVT_ADVANCE, EVT_BACKTRACK, EVT_COMPLETE)}

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[StepEvent]:
        return iter(self.events)
