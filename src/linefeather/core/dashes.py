"""Dash interval construction.

Turns a raw dash pattern into feathered "on" intervals over one period of
the dash axis. Each interval carries one-unit feather ramps at both ends,
clamped so the ramps never cross the dash midpoint.
"""

from collections.abc import Sequence

from linefeather.domain import DashInterval, DashTable, LineCap, check_dash_pattern

FEATHER_WIDTH = 1.0


def make_interval(
    start: float,
    end: float,
    half_line_width: float,
    line_cap: LineCap | None,
) -> DashInterval:
    """Build the feathered interval for one "on" dash.

    Square and round caps extend the dash by half the line width at both
    ends. Round caps also keep the unextended span so the circular falloff
    can be measured from the true endpoints.

    Args:
        start: Dash start on the dash axis
        end: Dash end on the dash axis
        half_line_width: Half of the stroke width
        line_cap: Cap style (None behaves as butt)

    Returns:
        DashInterval for the dash
    """
    original_endpoints = (start, end) if line_cap is LineCap.ROUND else None

    if line_cap in (LineCap.SQUARE, LineCap.ROUND):
        start -= half_line_width
        end += half_line_width

    midpoint = (start + end) / 2.0
    half_feather = FEATHER_WIDTH / 2.0

    return DashInterval(
        start_from=min(start - half_feather, midpoint - FEATHER_WIDTH),
        start_to=min(start + half_feather, midpoint),
        end_from=max(end - half_feather, midpoint),
        end_to=max(end + half_feather, midpoint + FEATHER_WIDTH),
        opacity_mul=min(end - start, 1.0),
        original_endpoints=original_endpoints,
    )


def build_dash_table(
    half_line_width: float,
    dashes: Sequence[float] | None,
    line_cap: LineCap | None = None,
) -> DashTable:
    """Build the dash interval table for a stroke.

    Even indices of the pattern are drawn dashes, odd indices are gaps. The
    first dash is repeated one period later so its leading cap and feather
    are present where the period wraps around.

    Args:
        half_line_width: Half of the stroke width
        dashes: Alternating on/off lengths (None or empty = solid line)
        line_cap: Cap style (None behaves as butt)

    Returns:
        DashTable with intervals in path order and the period length

    Raises:
        InvalidDashPatternError: If the pattern has unusable lengths

    Examples:
        >>> table = build_dash_table(1.0, [4.0, 2.0])
        >>> table.total_length
        6.0
        >>> len(table)
        2
    """
    if not dashes:
        return DashTable()

    lengths = check_dash_pattern(dashes)

    intervals: list[DashInterval] = []
    position = 0.0

    for idx, length in enumerate(lengths):
        start = position
        position += length
        if idx % 2 != 0:
            continue
        intervals.append(make_interval(start, position, half_line_width, line_cap))

    # Wrap-around copy of the first dash
    intervals.append(intervals[0].shifted(position))

    return DashTable(intervals=tuple(intervals), total_length=position)
