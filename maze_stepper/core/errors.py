class InvalidDimension(ValueError):
    """Rows or columns missing, non-positive, or above the allowed maximum."""


class NotAdjacent(AssertionError):
    """
    Wall removal attempted between two cells that do not share a side.
    This is a generator defect, never a user error. Do not recover from it.
    """

    def __init__(self, a, b):
        super().__init__(f"Cells {tuple(a)} and {tuple(b)} are not adjacent")
        self.a = a
        self.b = b
