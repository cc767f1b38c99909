"""Preview rasterizer for stroked polylines.

A small reference caller of the opacity model. It walks the segments of a
polyline in path order, evaluates every pixel centre near each segment and
advances the calculator by the segment length before moving on.

Joins between segments are not filled and colours are not blended; each
pixel keeps the maximum coverage it received.
"""

import math
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from linefeather.config import StrokeStyle
from linefeather.core.opacity import OpacityCalculator
from linefeather.exceptions import PolylineError
from linefeather.utils import RenderLogger

Vertex = tuple[float, float]


@dataclass(frozen=True, slots=True)
class SegmentSample:
    """Position of a pixel centre relative to a segment.

    Attributes:
        center_distance: Perpendicular distance from the segment line
        start_distance: Distance along the segment from its start
    """

    center_distance: float
    start_distance: float


@dataclass
class CoverageGrid:
    """Row-major grid of coverage values in [0, 1].

    Attributes:
        width: Number of columns
        height: Number of rows
        values: Coverage per pixel, indexed ``values[y][x]``
    """

    width: int
    height: int
    values: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.values:
            self.values = [[0.0] * self.width for _ in range(self.height)]

    def get(self, x: int, y: int) -> float:
        """Coverage of the pixel at column x, row y."""
        return self.values[y][x]

    def blend_max(self, x: int, y: int, opacity: float) -> None:
        """Keep the larger of the stored and the new coverage."""
        if opacity > self.values[y][x]:
            self.values[y][x] = opacity

    def covered_count(self) -> int:
        """Number of pixels with non-zero coverage."""
        return sum(1 for row in self.values for v in row if v > 0.0)

    def to_text(self, shades: str) -> str:
        """Render the grid as text using a character ramp.

        Args:
            shades: Characters from empty to full coverage

        Returns:
            One line per row
        """
        top = len(shades) - 1
        return "\n".join(
            "".join(shades[round(v * top)] for v in row) for row in self.values
        )


def segment_sample(px: float, py: float, start: Vertex, end: Vertex) -> SegmentSample | None:
    """Project a point onto a segment.

    Args:
        px: X coordinate of the point
        py: Y coordinate of the point
        start: Segment start vertex
        end: Segment end vertex

    Returns:
        SegmentSample, or None if the segment is degenerate or the
        projection falls outside it

    Examples:
        >>> segment_sample(3.0, 2.0, (0.0, 0.0), (10.0, 0.0))
        SegmentSample(center_distance=2.0, start_distance=3.0)
        >>> segment_sample(-1.0, 0.0, (0.0, 0.0), (10.0, 0.0)) is None
        True
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length == 0.0:
        return None

    rx = px - start[0]
    ry = py - start[1]
    along = (rx * dx + ry * dy) / length
    if along < 0.0 or along > length:
        return None

    return SegmentSample(
        center_distance=abs(rx * dy - ry * dx) / length,
        start_distance=along,
    )


def _check_points(points: Sequence[Vertex]) -> None:
    if len(points) < 2:
        raise PolylineError(f"need at least 2 points, got {len(points)}")
    for idx, (x, y) in enumerate(points):
        if not (math.isfinite(x) and math.isfinite(y)):
            raise PolylineError(f"point {idx} has non-finite coordinates ({x}, {y})")


def render_polyline(
    points: Sequence[Vertex],
    style: StrokeStyle,
    width: int,
    height: int,
    render_logger: RenderLogger | None = None,
) -> CoverageGrid:
    """Rasterize a stroked polyline into a coverage grid.

    Args:
        points: Polyline vertices in pixel coordinates
        style: Stroke style
        width: Canvas width in pixels
        height: Canvas height in pixels
        render_logger: Optional logger collecting statistics

    Returns:
        CoverageGrid with the maximum coverage per pixel

    Raises:
        PolylineError: If the polyline has fewer than two points or
            non-finite coordinates
    """
    _check_points(points)

    if render_logger is None:
        render_logger = RenderLogger()

    render_logger.stats.start_time = time.time()
    render_logger.log_render_start(len(points), width, height)

    calculator = OpacityCalculator.from_style(style)
    grid = CoverageGrid(width=width, height=height)
    margin = calculator.half_line_width + 1.0

    for idx, (start, end) in enumerate(zip(points, points[1:])):
        length = math.hypot(end[0] - start[0], end[1] - start[1])
        if length == 0.0:
            render_logger.log_segment_skipped(idx, "zero length")
            continue

        min_x = max(int(math.floor(min(start[0], end[0]) - margin)), 0)
        max_x = min(int(math.ceil(max(start[0], end[0]) + margin)), width - 1)
        min_y = max(int(math.floor(min(start[1], end[1]) - margin)), 0)
        max_y = min(int(math.ceil(max(start[1], end[1]) + margin)), height - 1)

        samples = 0
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                sample = segment_sample(x + 0.5, y + 0.5, start, end)
                if sample is None:
                    continue
                samples += 1
                data = calculator.evaluate(sample.center_distance, sample.start_distance)
                if data.is_in_line:
                    grid.blend_max(x, y, data.opacity)

        calculator.advance(length)
        render_logger.log_segment(idx, length, calculator.traveled_distance, samples)

    render_logger.stats.end_time = time.time()
    render_logger.log_render_complete(
        grid.covered_count(),
        render_logger.stats.duration_seconds * 1000.0,
    )

    return grid
