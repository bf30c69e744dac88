from typing import Optional

from maze_stepper.core.grid import Cell, Grid


def render_ascii(grid: Grid, current: Optional[Cell] = None) -> str:
    """
    Draws the grid with +---+ corners and | walls.
    '@' marks the current cell, 'G' the goal, '.' a cell not yet visited.
    """
    lines = []
    # Top border, each cell's TOP wall
    line = "+"
    for col in range(grid.cols):
        line += "---+" if grid.has_wall(Cell(0, col), Grid.TOP) else "   +"
    lines.append(line)

    for row in range(grid.rows):
        # Cell interiors and vertical walls
        line = "|" if grid.has_wall(Cell(row, 0), Grid.LEFT) else " "
        for col in range(grid.cols):
            cell = Cell(row, col)
            if current is not None and cell == current:
                mark = "@"
            elif grid.is_goal(cell):
                mark = "G"
            elif grid.is_visited(cell):
                mark = " "
            else:
                mark = "."
            line += f" {mark} "
            line += "|" if grid.has_wall(cell, Grid.RIGHT) else " "
        lines.append(line)

        # Horizontal walls
        line = "+"
        for col in range(grid.cols):
            line += "---+" if grid.has_wall(Cell(row, col), Grid.BOTTOM) else "   +"
        lines.append(line)

    return "\n".join(lines)
