"""Planar geometry helpers on normalized image coordinates.

Points are anything indexable as ``(x, y)``: tuples, numpy rows of a
landmark array, or ``(x, y, z)`` triples (z is ignored).

Image coordinates grow downwards, so a positive bearing means the target
lies *above* the origin on screen.
"""

import math
from typing import Sequence

Point = Sequence[float]

# Length of the horizontal reference ray used for bearings.
_BASELINE_LENGTH = 0.1


def euclidean_distance(a: Point, b: Point) -> float:
    """Distance between two 2D points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return math.sqrt(dx * dx + dy * dy)


def signed_angle(a: Point, b: Point, c: Point) -> float:
    """Signed angle (radians) of vector ``b - a`` relative to ``b - c``.

    Result is in ``(-pi, pi]``. Degenerate input (a zero-length vector or
    non-finite coordinates) yields ``0.0`` instead of NaN.
    """
    ab_x = b[0] - a[0]
    ab_y = b[1] - a[1]
    cb_x = b[0] - c[0]
    cb_y = b[1] - c[1]

    if (ab_x == 0.0 and ab_y == 0.0) or (cb_x == 0.0 and cb_y == 0.0):
        return 0.0

    dot = ab_x * cb_x + ab_y * cb_y
    cross = ab_x * cb_y - ab_y * cb_x

    alpha = math.atan2(cross, dot)
    if not math.isfinite(alpha):
        return 0.0
    return alpha


def radian_to_degree(radian: float) -> int:
    """Convert radians to whole degrees, rounding halves up."""
    return int(math.floor(radian * 180.0 / math.pi + 0.5))


def signed_angle_degrees(a: Point, b: Point, c: Point) -> int:
    """:func:`signed_angle` in whole degrees."""
    return radian_to_degree(signed_angle(a, b, c))


def bearing_degrees(origin: Point, target: Point) -> int:
    """Bearing of ``origin -> target`` against the positive x axis.

    Example:
        >>> bearing_degrees((0.5, 0.5), (0.6, 0.5))
        0
        >>> bearing_degrees((0.5, 0.5), (0.5, 0.4))
        90
    """
    baseline = (origin[0] + _BASELINE_LENGTH, origin[1])
    return signed_angle_degrees(target, origin, baseline)


__all__ = [
    "euclidean_distance",
    "signed_angle",
    "radian_to_degree",
    "signed_angle_degrees",
    "bearing_degrees",
]
