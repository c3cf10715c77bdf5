"""Turtle graphics state machine."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from .geometry import GeometryError, Point, normalize_angle


class Color(str, Enum):
    BLACK = "black"
    GRAY = "gray"
    RED = "red"
    PINK = "pink"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"
    MAGENTA = "magenta"

    @classmethod
    def parse(cls, value: "Color | str") -> "Color":
        if isinstance(value, Color):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(c.value for c in cls)
            raise GeometryError(f"Unknown color {value!r} (expected one of: {names})") from None


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    color: Color

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


def _finite_angle(angle: float) -> float:
    if not math.isfinite(angle):
        raise GeometryError(f"angle must be a finite number, got {angle!r}")
    return angle


class Turtle(ABC):
    """A cursor with position, heading and pen color.

    Heading is in degrees, 0 faces +x and positive turns rotate
    counter-clockwise.
    """

    @abstractmethod
    def forward(self, length: float) -> None:
        ...

    @abstractmethod
    def turn(self, angle_degrees: float) -> None:
        ...

    @abstractmethod
    def set_color(self, color: Color | str) -> None:
        ...

    @abstractmethod
    def get_position(self) -> Point:
        ...

    @abstractmethod
    def get_heading(self) -> float:
        ...

    @abstractmethod
    def get_color(self) -> Color:
        ...

    @abstractmethod
    def get_segments(self) -> tuple[Segment, ...]:
        ...

    def color(self, color: Color | str) -> None:
        self.set_color(color)

    def snapshot(self) -> "SimpleTurtle":
        """Detached copy of the current state with an empty segment log."""
        return SimpleTurtle(
            position=self.get_position(),
            heading=self.get_heading(),
            pen_color=self.get_color(),
        )


@dataclass
class SimpleTurtle(Turtle):
    """Headless turtle that records every stroke it draws."""

    position: Point = field(default_factory=Point)
    heading: float = 0.0
    pen_color: Color = Color.BLACK
    _segments: list = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self.position = Point.of(self.position)
        self.heading = normalize_angle(_finite_angle(self.heading))
        self.pen_color = Color.parse(self.pen_color)

    def forward(self, length: float) -> None:
        if not (length >= 0 and math.isfinite(length)):
            raise GeometryError(f"forward length must be a finite number >= 0, got {length!r}")
        rad = math.radians(self.heading)
        end = Point(
            self.position.x + length * math.cos(rad),
            self.position.y + length * math.sin(rad),
        )
        self._segments.append(Segment(self.position, end, self.pen_color))
        self.position = end

    def turn(self, angle_degrees: float) -> None:
        self.heading = normalize_angle(self.heading + _finite_angle(angle_degrees))

    def set_color(self, color: Color | str) -> None:
        self.pen_color = Color.parse(color)

    def get_position(self) -> Point:
        return self.position

    def get_heading(self) -> float:
        return self.heading

    def get_color(self) -> Color:
        return self.pen_color

    def get_segments(self) -> tuple[Segment, ...]:
        """Ordered log of drawn segments, as an immutable snapshot."""
        return tuple(self._segments)


def segments_of(source) -> tuple[Segment, ...]:
    """Segment log of a turtle, or the given segments unchanged."""
    if isinstance(source, Turtle):
        return source.get_segments()
    return tuple(source)
