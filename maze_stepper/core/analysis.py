from typing import Dict, List, Set, Tuple

from maze_stepper.core.grid import Cell, Grid


class MazeAnalyzer:
    @staticmethod
    def passages(grid: Grid) -> List[Tuple[Cell, Cell]]:
        """
        Wall-free edges between adjacent cells, each listed once.
        Only RIGHT and BOTTOM are scanned so an edge is never counted twice.
        """
        edges = []
        for cell in grid.iter_cells():
            row, col = cell
            if col < grid.cols - 1 and not grid.has_wall(cell, Grid.RIGHT):
                edges.append((cell, Cell(row, col + 1)))
            if row < grid.rows - 1 and not grid.has_wall(cell, Grid.BOTTOM):
                edges.append((cell, Cell(row + 1, col)))
        return edges

    @staticmethod
    def open_neighbors(grid: Grid, cell: Cell) -> List[Cell]:
        return [nb for nb in grid.neighbors(cell) if not grid.has_wall(cell, grid.side_between(cell, nb))]

    @staticmethod
    def reachable(grid: Grid, start: Cell = Cell(0, 0)) -> Set[Cell]:
        # Iterative flood fill, no recursion limit concerns
        seen = {Cell(*start)}
        stack = [Cell(*start)]
        while stack:
            cell = stack.pop()
            for nb in MazeAnalyzer.open_neighbors(grid, cell):
                if nb not in seen:
                    seen.add(nb)
                    stack.append(nb)
        return seen

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        for cell in grid.iter_cells():
            for nb in grid.neighbors(cell):
                side = grid.side_between(cell, nb)
                if grid.has_wall(cell, side) != grid.has_wall(nb, Grid.OPPOSITE[side]):
                    return False
        return True

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        A spanning tree: exactly cells-1 passages and every cell reachable
        from (0, 0). Together these rule out cycles.
        """
        total = grid.rows * grid.cols
        if len(MazeAnalyzer.passages(grid)) != total - 1:
            return False
        return len(MazeAnalyzer.reachable(grid)) == total

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        isolated = 0 # 4 walls, only before generation or in a 1x1 grid
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        def popcount_walls(val):
            c = 0
            if val & Grid.TOP: c += 1
            if val & Grid.RIGHT: c += 1
            if val & Grid.BOTTOM: c += 1
            if val & Grid.LEFT: c += 1
            return c

        for val in grid.cells:
            walls = popcount_walls(val)
            if walls == 4: isolated += 1
            elif walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1

        total = grid.rows * grid.cols
        return {
            "isolated": isolated,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": len(MazeAnalyzer.passages(grid)),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
