import random
from abc import ABC, abstractmethod
from typing import Iterator, List, Union

from maze_stepper.core.events import StepEvent
from maze_stepper.core.grid import Grid


class Generator(ABC):
    """
    Stepping maze generator. The driver (renderer loop, CLI, test) owns the
    schedule and calls step() until it reports completion.

    `rng` is any object with a `choice(sequence)` method. When omitted a
    private random.Random(seed) is used, never the module-level generator.
    """
    def __init__(self, grid: Grid, seed: int = None, rng=None):
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def step(self) -> StepEvent:
        """Performs one unit of work and describes it. Idempotent once done."""

    @property
    @abstractmethod
    def done(self) -> bool:
        pass

    def run(self) -> Iterator[StepEvent]:
        """Yields every step event, the final 'complete' one included."""
        while True:
            event = self.step()
            yield event
            if event.is_complete:
                return

    def run_all(self, collect: bool = False) -> Union[int, List[StepEvent]]:
        """Helper to run the generator to completion."""
        if collect:
            return list(self.run())
        count = 0
        for _ in self.run():
            count += 1
        return count

    run_to_completion = run_all
