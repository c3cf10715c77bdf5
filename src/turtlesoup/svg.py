"""HTML/SVG rendering of turtle segments."""

import numpy as np

from .config import Config
from .turtle import segments_of

PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>{title}</title>
    <style>
        body {{ margin: 0; }}
        canvas {{ display: block; }}
    </style>
</head>
<body>
    <svg width="{width}" height="{height}" style="background-color:{background};">
        {lines}
    </svg>
</body>
</html>"""


class HtmlExporter:
    """Exports turtle segments to a standalone HTML page."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas

    def transform(self, segments) -> tuple[float, float, float]:
        """Return (scale, offset_x, offset_y) mapping turtle space to the canvas."""
        c = self.canvas
        if not c.fit or not segments:
            return c.scale, c.width / 2, c.height / 2

        coords = np.array(
            [[s.start.x, s.start.y, s.end.x, s.end.y] for s in segments], dtype=float
        ).reshape(-1, 2)
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        span = np.maximum(hi - lo, 1e-9)
        avail = np.array([c.width, c.height], dtype=float) - 2 * c.margin
        scale = float(np.min(avail / span))
        center = (lo + hi) / 2
        return (
            scale,
            c.width / 2 - float(center[0]) * scale,
            c.height / 2 - float(center[1]) * scale,
        )

    def export(self, source) -> str:
        """Convert turtle segments to an HTML string."""
        segments = segments_of(source)
        scale, offset_x, offset_y = self.transform(segments)

        lines = []
        for seg in segments:
            x1 = seg.start.x * scale + offset_x
            y1 = seg.start.y * scale + offset_y
            x2 = seg.end.x * scale + offset_x
            y2 = seg.end.y * scale + offset_y
            lines.append(
                f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
                f'stroke="{seg.color.value}" stroke-width="{self.canvas.stroke_width}"/>'
            )

        return PAGE.format(
            title=self.canvas.title,
            width=self.canvas.width,
            height=self.canvas.height,
            background=self.canvas.background,
            lines="".join(lines),
        )
