"""Shape routines composed from turtle moves."""

import math

from .geometry import GeometryError, Point, chord_length, distance, normalize_angle
from .turtle import Color, Turtle


class PlanError(ValueError):
    """Raised for a malformed path instruction."""


def draw_square(turtle: Turtle, side_length: float) -> None:
    """Trace a square, turning 90 degrees after each side.

    The heading is not reset first; the square only closes on itself when
    the caller starts from the heading it expects.
    """
    for _ in range(4):
        turtle.forward(side_length)
        turtle.turn(90)


def draw_approximate_circle(turtle: Turtle, radius: float, num_sides: int) -> None:
    """Approximate a circle of `radius` with a regular `num_sides`-gon."""
    if num_sides < 1:
        raise GeometryError(f"num_sides must be >= 1, got {num_sides}")
    angle_per_segment = 360 / num_sides
    step_size = chord_length(radius, angle_per_segment)

    for _ in range(num_sides):
        turtle.forward(step_size)
        turtle.turn(angle_per_segment)


def _format_turn(angle: float) -> str:
    text = f"{angle:.2f}"
    # 359.996 would print as 360.00
    return "0.00" if text == "360.00" else text


def find_path(turtle: Turtle, points) -> list[str]:
    """Plan the turns and moves that visit `points` in order.

    The turtle is only read. Each waypoint yields ``turn <deg>`` followed by
    ``forward <dist>``, both with two decimals. Turns are always in
    [0, 360) and use the same counter-clockwise sense as ``Turtle.turn``.
    A waypoint equal to the current position plans a zero turn and a zero
    move and keeps the heading.
    """
    sim = turtle.snapshot()
    position = sim.get_position()
    heading = sim.get_heading()
    commands = []

    for target in map(Point.of, points):
        dx = target.x - position.x
        dy = target.y - position.y
        if dx == 0 and dy == 0:
            target_angle = heading
        else:
            target_angle = math.degrees(math.atan2(dy, dx))
        angle_to_turn = normalize_angle(target_angle - heading + 360)

        commands.append(f"turn {_format_turn(angle_to_turn)}")
        commands.append(f"forward {distance(position, target):.2f}")

        position = target
        heading = normalize_angle(target_angle)

    return commands


def execute_plan(turtle: Turtle, commands) -> list[Point]:
    """Apply ``turn``/``forward`` instructions; return the position after each move."""
    visited = []
    for line_num, command in enumerate(commands, 1):
        parts = command.split()
        if len(parts) != 2:
            raise PlanError(f"L{line_num}: expected '<verb> <number>', got {command!r}")
        verb, arg = parts[0].lower(), parts[1]
        try:
            amount = float(arg)
        except ValueError:
            raise PlanError(f"L{line_num}: invalid number {arg!r}") from None

        if verb == "turn":
            turtle.turn(amount)
        elif verb == "forward":
            turtle.forward(amount)
            visited.append(turtle.get_position())
        else:
            raise PlanError(f"L{line_num}: unknown instruction {verb!r}")
    return visited


# Constants for the decorative figure
ART_LENGTH = 100
ART_SHIFT = 7
ART_ANGLE = 45
ART_ITERATIONS = 10
ART_TAIL_LENGTH = 50
ART_TAIL_ITERATIONS = 6


def _art_spiral(turtle: Turtle, second: Color) -> None:
    length = ART_LENGTH
    turtle.set_color(Color.RED)
    for _ in range(ART_ITERATIONS):
        turtle.forward(length)
        turtle.turn(90 - ART_ANGLE)
        turtle.set_color(second)
        turtle.forward(length)
        turtle.turn(90 - ART_ANGLE)
        length -= ART_SHIFT


def draw_personal_art(turtle: Turtle) -> None:
    """Fixed multi-color figure: two shrinking spirals and a tail."""
    _art_spiral(turtle, Color.MAGENTA)
    _art_spiral(turtle, Color.BLUE)

    turtle.set_color(Color.PURPLE)
    length = ART_TAIL_LENGTH
    for _ in range(ART_TAIL_ITERATIONS):
        turtle.forward(length)
        turtle.turn(45)
        turtle.set_color(Color.YELLOW)
        turtle.forward(length * 0.8)
        turtle.turn(45)
        length -= ART_SHIFT

    turtle.set_color(Color.CYAN)
    turtle.forward(length / 2)
    turtle.turn(45)
    turtle.forward(length / 2)


SHAPES = {
    "square": lambda turtle, size, sides: draw_square(turtle, size),
    "circle": lambda turtle, size, sides: draw_approximate_circle(turtle, size, sides),
    "art": lambda turtle, size, sides: draw_personal_art(turtle),
}
