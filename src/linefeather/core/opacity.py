"""Opacity model for anti-aliased strokes.

Combines the dash pattern (along the path) with the stroke edge (across the
path) into a single coverage value per sample. The along-path part looks up
the dash table; the across-path part feathers the stroke edge over one unit.
Round caps narrow the effective stroke width near dash endpoints.

Key components:
- along_path_opacity: Dash opacity and round-cap residual at a path distance
- across_path_opacity: Edge-feathered opacity at a distance from the centerline
- effective_half_width: Half width of a round cap's cross-section
- OpacityCalculator: Per-stroke state holder and public entry point
"""

import math
from collections.abc import Sequence

from linefeather.config import StrokeStyle
from linefeather.core.dashes import build_dash_table
from linefeather.domain import AlongPathOpacity, DashTable, LineCap, OpacityData
from linefeather.exceptions import InvalidLineWidthError

_SOLID = AlongPathOpacity(opacity=1.0, distance_in_cap=None)
_GAP = AlongPathOpacity(opacity=0.0, distance_in_cap=None)


def along_path_opacity(table: DashTable, distance: float) -> AlongPathOpacity:
    """Resolve dash opacity at a distance along the path.

    The distance is reduced by the pattern period. Where feather zones of
    neighbouring intervals overlap the most opaque interval wins.

    Args:
        table: Precomputed dash table
        distance: Distance from the start of the path

    Returns:
        AlongPathOpacity with the dash opacity and, for round caps, the
        distance into the cap
    """
    if table.is_solid:
        return _SOLID

    dist_rem = distance % table.total_length

    best = None
    best_opacity = 0.0
    for interval in table.intervals:
        opacity = interval.opacity_at(dist_rem)
        if opacity is None:
            continue
        if best is None or opacity > best_opacity:
            best = interval
            best_opacity = opacity

    if best is None:
        return _GAP

    return AlongPathOpacity(
        opacity=best_opacity,
        distance_in_cap=best.distance_in_cap(dist_rem),
    )


def across_path_opacity(center_distance: float, half_width: float) -> float:
    """Resolve edge opacity at a distance from the path centerline.

    Strokes thinner than one unit never reach full opacity.

    Args:
        center_distance: Perpendicular distance from the centerline
        half_width: Effective half width of the stroke at this sample

    Returns:
        Opacity in [0, 1]

    Examples:
        >>> across_path_opacity(0.0, 2.0)
        1.0
        >>> across_path_opacity(2.0, 2.0)
        0.5
        >>> across_path_opacity(3.0, 2.0)
        0.0
    """
    feather_from = max(half_width - 0.5, 0.0)
    feather_to = max(half_width + 0.5, 1.0)
    feather_span = feather_to - feather_from
    edge_mul = min(2.0 * half_width, 1.0)

    if center_distance < feather_from:
        return edge_mul
    if center_distance < feather_to:
        return edge_mul * (feather_to - center_distance) / feather_span
    return 0.0


def effective_half_width(half_line_width: float, distance_in_cap: float | None) -> float:
    """Half width of the stroke at a point inside a round cap.

    The cap is a half disc, so its cross-section at distance ``d`` from the
    dash endpoint is ``sqrt(r^2 - d^2)``. Points beyond the disc get zero.

    Args:
        half_line_width: Half of the stroke width (the cap radius)
        distance_in_cap: Distance past the dash endpoint, None outside caps

    Returns:
        Effective half width, never NaN
    """
    if distance_in_cap is None:
        return half_line_width

    return math.sqrt(max(half_line_width**2 - distance_in_cap**2, 0.0))


class OpacityCalculator:
    """Coverage evaluator for one stroked path.

    Holds the immutable stroke parameters, the precomputed dash table and
    the distance travelled so far. Samples of a segment are evaluated with
    distances relative to the segment start; ``advance`` is called with the
    segment length before moving on to the next segment, which keeps the
    dash phase continuous across vertices.

    Not safe for concurrent use. Give each path its own calculator.

    Attributes:
        half_line_width: Half of the stroke width
        line_cap: Cap style
        dash_table: Precomputed dash intervals
    """

    def __init__(
        self,
        line_width: float,
        dashes: Sequence[float] | None = None,
        line_cap: LineCap | None = None,
    ) -> None:
        """Initialize the calculator.

        Args:
            line_width: Full stroke width in raster units
            dashes: Alternating on/off dash lengths (None or empty = solid)
            line_cap: Cap style (None behaves as butt)

        Raises:
            InvalidLineWidthError: If the width is negative or not finite
            InvalidDashPatternError: If the dash pattern has unusable lengths
        """
        if not math.isfinite(line_width):
            raise InvalidLineWidthError(line_width, "must be finite")
        if line_width < 0.0:
            raise InvalidLineWidthError(line_width, "must not be negative")

        self.half_line_width = line_width / 2.0
        self.line_cap = line_cap
        self.dash_table = build_dash_table(self.half_line_width, dashes, line_cap)
        self._traveled_distance = 0.0

    @classmethod
    def from_style(cls, style: StrokeStyle) -> "OpacityCalculator":
        """Create a calculator from a stroke style model."""
        return cls(
            line_width=style.line_width,
            dashes=style.dashes,
            line_cap=style.line_cap,
        )

    @property
    def traveled_distance(self) -> float:
        """Distance covered by the segments already advanced over."""
        return self._traveled_distance

    def advance(self, distance: float) -> None:
        """Add a finished segment's length to the travelled distance.

        Args:
            distance: Length of the segment just rendered
        """
        self._traveled_distance += distance

    def along(self, start_distance: float) -> AlongPathOpacity:
        """Dash opacity at a distance from the current segment start."""
        return along_path_opacity(self.dash_table, self._traveled_distance + start_distance)

    def evaluate(self, center_distance: float, start_distance: float) -> OpacityData:
        """Compute the coverage of one sample.

        Args:
            center_distance: Perpendicular distance from the centerline
            start_distance: Distance along the path from the current
                segment start

        Returns:
            OpacityData with the final opacity and the in-line flag
        """
        along = self.along(start_distance)
        half_width = effective_half_width(self.half_line_width, along.distance_in_cap)
        across = across_path_opacity(center_distance, half_width)

        return OpacityData(
            opacity=min(along.opacity, across),
            is_in_line=across > 0.0,
        )
