"""Geometry helpers shared by the turtle and the shape routines."""

import math
from dataclasses import dataclass


class GeometryError(ValueError):
    """Raised when a drawing call breaks its geometric contract."""


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def of(cls, value) -> "Point":
        """Coerce a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def chord_length(radius: float, angle_degrees: float) -> float:
    """Length of the chord subtending `angle_degrees` on a circle of `radius`.

    Rounded to 10 decimals so sums over many chords stay stable.
    """
    angle = math.radians(angle_degrees)
    return round(2 * radius * math.sin(angle / 2), 10) + 0.0


def normalize_angle(degrees: float) -> float:
    """Reduce an angle in degrees to [0, 360)."""
    result = degrees % 360.0
    # -1e-20 % 360 == 360.0
    if result >= 360.0:
        return 0.0
    return result + 0.0
