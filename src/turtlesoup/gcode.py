"""GCode generation from turtle segments."""

from .config import Config
from .geometry import Point
from .turtle import segments_of


def polylines(segments) -> list[tuple]:
    """Chain segments into (color, [points]) runs of connected same-color strokes."""
    runs = []
    for seg in segments:
        if runs:
            color, points = runs[-1]
            if color == seg.color and points[-1] == seg.start:
                points.append(seg.end)
                continue
        runs.append((seg.color, [seg.start, seg.end]))
    return runs


class GcodeExporter:
    """Exports turtle segments to plotter gcode."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.pen = self.config.pen

    def _pen(self, down: bool) -> str:
        angle = self.pen.down_angle if down else self.pen.up_angle
        return f"M280 P0 S{angle} ; pen {'down' if down else 'up'}"

    def preamble(self, comment: str = "") -> list[str]:
        lines = [f"; {comment}"] if comment else []
        lines += ["; turtlesoup drawing", "", "G21 ; units: millimetres", "G90 ; absolute coordinates"]
        lines += [self._pen(False), "G28 ; home axes", ""]
        return lines

    def postamble(self) -> list[str]:
        return [
            f"G0 X0 Y0 F{self.pen.travel_speed} ; back to origin",
            self._pen(False),
            "M84 ; release motors",
        ]

    def export(self, source, comment: str = "") -> str:
        """Convert turtle segments to gcode string.

        Each run of connected same-color segments is drawn with one pen-down
        stroke, preceded by a `; color <name>` marker.
        """
        lines = self.preamble(comment)

        for color, points in polylines(segments_of(source)):
            start: Point = points[0]
            lines.append(f"; color {color.value}")
            lines.append(f"G0 X{start.x:.2f} Y{start.y:.2f} F{self.pen.travel_speed}")
            lines.append(self._pen(True))
            lines.extend(f"G1 X{p.x:.2f} Y{p.y:.2f} F{self.pen.draw_speed}" for p in points[1:])
            lines.append(self._pen(False))
            lines.append("")

        lines.extend(self.postamble())
        return "\n".join(lines)
