"""
Coordinate and arrow geometry helpers shared by layout and rendering.
"""

import math
from typing import Union

Number = Union[int, float]


def round_to(num: Number = 0, decimals: int = 2) -> float:
    """Round half up on the scaled value, like browser Math.round."""
    factor = 10 ** decimals
    return math.floor(num * factor + 0.5) / factor


def format_number(num: Number) -> str:
    """Render a coordinate without a trailing ".0" for integral values."""
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


def arrow_path(sx: Number, sy: Number, tx: Number, ty: Number, radius: Number) -> str:
    """
    SVG path for a link drawn from source to target.

    The segment is shortened by radius + 1 at the target end so the
    arrowhead sits just outside the target glyph. Coincident points give a
    zero-length segment.
    """
    dx = tx - sx
    dy = ty - sy
    length = math.hypot(dx, dy)
    if length == 0:
        dx = dy = 0.0
    else:
        shortened = max(0.0, length - radius - 1)
        dx = dx / length * shortened
        dy = dy / length * shortened
    return (
        f"M{format_number(sx)},{format_number(sy)} "
        f"l {format_number(round_to(dx))},{format_number(round_to(dy))}"
    )


def stroke_width(weight: Number) -> float:
    return round_to(math.sqrt(weight))
