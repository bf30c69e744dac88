from typing import Tuple, Union

from maze_stepper.core.errors import InvalidDimension

# Per-axis upper bound. Keeps per-frame redraw cost and memory bounded.
MAX_DIMENSION = 50
DEFAULT_DIMENSION = 20


def parse_dimension(value: Union[int, str, None], name: str = "dimension", maximum: int = MAX_DIMENSION) -> int:
    """
    Converts a user supplied row/column count to an int.
    Accepts ints and decimal strings ("20", " 7 ").
    """
    if value is None:
        raise InvalidDimension(f"{name} is required")

    if isinstance(value, bool):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDimension(f"{name} is required")
        try:
            value = int(text)
        except ValueError:
            raise InvalidDimension(f"{name} must be an integer, got {text!r}") from None
    elif not isinstance(value, int):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")

    if value < 1:
        raise InvalidDimension(f"{name} must be at least 1, got {value}")
    if maximum is not None and value > maximum:
        raise InvalidDimension(f"{name} must be at most {maximum}, got {value} (maze too large)")
    return value


def validate_dimensions(rows, cols, maximum: int = MAX_DIMENSION) -> Tuple[int, int]:
    return parse_dimension(rows, "rows", maximum), parse_dimension(cols, "cols", maximum)
