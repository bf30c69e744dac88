from array import array
from typing import Dict, Iterator, List, NamedTuple, Optional

from maze_stepper.core.errors import InvalidDimension, NotAdjacent


class Cell(NamedTuple):
    """Positional handle. All cell state lives in the Grid."""
    row: int
    col: int


def check_dimension(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidDimension(f"{name} must be at least 1, got {value}")
    return value


class Grid:
    # Bitmask Constants
    TOP    = 0b00000001
    RIGHT  = 0b00000010
    BOTTOM = 0b00000100
    LEFT   = 0b00001000

    # Flags
    VISITED = 0b00010000
    GOAL    = 0b00100000

    # All walls present by default (T|R|B|L) = 15
    ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

    # Direction Helpers, in neighbor order
    SIDES = (TOP, RIGHT, BOTTOM, LEFT)
    SIDE_NAMES = {TOP: "top", RIGHT: "right", BOTTOM: "bottom", LEFT: "left"}
    DROW = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
    DCOL = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        check_dimension(rows, "rows")
        check_dimension(cols, "cols")
        self.rows = rows
        self.cols = cols
        # 'B' (unsigned char) -> 1 byte per cell, row-major
        self.cells = array('B', [self.ALL_WALLS] * (rows * cols))
        self.cells[self.get_index(self.goal)] |= self.GOAL

    @property
    def goal(self) -> Cell:
        return Cell(self.rows - 1, self.cols - 1)

    def get_index(self, cell: Cell) -> int:
        row, col = cell
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Cell ({row}, {col}) out of bounds")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, cell: Cell) -> List[Cell]:
        """
        Orthogonally adjacent cells inside the grid, always ordered
        top, right, bottom, left. Does NOT check walls or visited flags.
        """
        row, col = cell
        return [
            Cell(row + self.DROW[side], col + self.DCOL[side])
            for side in self.SIDES
            if self.in_bounds(row + self.DROW[side], col + self.DCOL[side])
        ]

    def side_between(self, a: Cell, b: Cell) -> int:
        """Side of `a` that faces `b`. Raises NotAdjacent for anything else."""
        drow = b[0] - a[0]
        dcol = b[1] - a[1]
        for side in self.SIDES:
            if self.DROW[side] == drow and self.DCOL[side] == dcol:
                return side
        raise NotAdjacent(a, b)

    def remove_wall_between(self, a: Cell, b: Cell):
        """
        Clears the wall pair shared by `a` and `b`: the side of `a` facing `b`
        and the opposite side of `b`.
        """
        side = self.side_between(a, b)
        idx_a = self.get_index(a)
        idx_b = self.get_index(b)

        self.cells[idx_a] &= ~side
        self.cells[idx_b] &= ~self.OPPOSITE[side]

    def has_wall(self, cell: Cell, side: int) -> bool:
        return (self.cells[self.get_index(cell)] & side) != 0

    def walls(self, cell: Cell) -> Dict[str, bool]:
        val = self.cells[self.get_index(cell)]
        return {name: (val & side) != 0 for side, name in self.SIDE_NAMES.items()}

    def set_visited(self, cell: Cell):
        # Monotonic, the flag is never cleared.
        self.cells[self.get_index(cell)] |= self.VISITED

    def is_visited(self, cell: Cell) -> bool:
        return (self.cells[self.get_index(cell)] & self.VISITED) != 0

    def is_goal(self, cell: Cell) -> bool:
        return (self.cells[self.get_index(cell)] & self.GOAL) != 0

    def visited_count(self) -> int:
        return sum(1 for val in self.cells if val & self.VISITED)

    def iter_cells(self) -> Iterator[Cell]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield Cell(row, col)

    def snapshot(self) -> bytes:
        return self.cells.tobytes()


def setup(rows: int, cols: int, max_dimension: Optional[int] = None) -> Grid:
    """
    Validates the requested shape and builds a fresh, fully walled grid.
    Nothing is allocated when validation fails.
    """
    check_dimension(rows, "rows")
    check_dimension(cols, "cols")
    if max_dimension is not None and (rows > max_dimension or cols > max_dimension):
        raise InvalidDimension(f"Maze too large: {rows}x{cols} (max {max_dimension} per axis)")
    return Grid(rows, cols)
