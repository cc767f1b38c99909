"""Dash pattern types for along-path opacity.

This module defines the value types the dash interval builder produces:
- LineCap: Enum for the shape applied at the ends of each drawn dash
- DashInterval: One feathered "on" interval on the periodic dash axis
- DashTable: The full set of intervals and the period length
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from linefeather.exceptions import InvalidDashPatternError


class LineCap(str, Enum):
    """Cap style applied at both ends of every drawn dash.

    - BUTT: Flush cut at the dash endpoint
    - SQUARE: Flat cap extended by half the line width
    - ROUND: Semicircular cap extended by half the line width
    """

    BUTT = "butt"
    SQUARE = "square"
    ROUND = "round"


@dataclass(frozen=True, slots=True)
class DashInterval:
    """A feathered "on" interval on the dash axis.

    Opacity rises from 0 to 1 over ``[start_from, start_to]``, stays at 1
    until ``end_from`` and falls back to 0 at ``end_to``.

    Attributes:
        start_from: Start of the leading feather ramp
        start_to: End of the leading feather ramp
        end_from: Start of the trailing feather ramp
        end_to: End of the trailing feather ramp
        opacity_mul: Peak opacity, below 1 for dashes shorter than one unit
        original_endpoints: Dash span before cap extension (round caps only)
    """

    start_from: float
    start_to: float
    end_from: float
    end_to: float
    opacity_mul: float
    original_endpoints: tuple[float, float] | None = None

    def opacity_at(self, dist: float) -> float | None:
        """Opacity contributed by this interval at a dash-axis distance.

        Args:
            dist: Distance on the dash axis (already reduced by the period)

        Returns:
            Opacity in [0, opacity_mul], or None outside the interval
        """
        if dist < self.start_from:
            return None
        if dist <= self.start_to:
            base = (dist - self.start_from) / (self.start_to - self.start_from)
        elif dist < self.end_from:
            base = 1.0
        elif dist <= self.end_to:
            base = (self.end_to - dist) / (self.end_to - self.end_from)
        else:
            return None

        return self.opacity_mul * base

    def distance_in_cap(self, dist: float) -> float | None:
        """Distance along the path from the nearest true dash endpoint.

        Only meaningful for round caps. A sample before the dash lies in the
        leading cap, a sample after it in the trailing cap.

        Args:
            dist: Distance on the dash axis

        Returns:
            Distance into the cap, or None inside the dash body or when the
            interval carries no original endpoints
        """
        if self.original_endpoints is None:
            return None

        a, b = self.original_endpoints
        if dist < a:
            return a - dist
        if dist <= b:
            return None
        return dist - b

    def shifted(self, offset: float) -> "DashInterval":
        """Return a copy of this interval moved along the dash axis.

        Args:
            offset: Distance to move by

        Returns:
            New DashInterval
        """
        endpoints = None
        if self.original_endpoints is not None:
            a, b = self.original_endpoints
            endpoints = (a + offset, b + offset)

        return DashInterval(
            start_from=self.start_from + offset,
            start_to=self.start_to + offset,
            end_from=self.end_from + offset,
            end_to=self.end_to + offset,
            opacity_mul=self.opacity_mul,
            original_endpoints=endpoints,
        )


@dataclass(frozen=True)
class DashTable:
    """Precomputed dash intervals over one period of the pattern.

    An empty table describes a solid line.

    Attributes:
        intervals: Feathered "on" intervals in path order
        total_length: Period of the pattern (sum of all dash lengths)
    """

    intervals: tuple[DashInterval, ...] = field(default_factory=tuple)
    total_length: float = 0.0

    @property
    def is_solid(self) -> bool:
        """Whether the table describes an undashed line."""
        return not self.intervals

    def __len__(self) -> int:
        return len(self.intervals)


def check_dash_pattern(dashes: Sequence[float]) -> list[float]:
    """Validate a raw dash pattern.

    "On" lengths (even indices) must be positive, "off" lengths (odd
    indices) non-negative, and every length finite.

    Args:
        dashes: Alternating on/off lengths

    Returns:
        The pattern as a list of floats

    Raises:
        InvalidDashPatternError: If any length is unusable
    """
    values = [float(d) for d in dashes]

    for idx, length in enumerate(values):
        if not math.isfinite(length):
            raise InvalidDashPatternError(values, f"length at index {idx} is not finite")
        if idx % 2 == 0 and length <= 0.0:
            raise InvalidDashPatternError(
                values, f"dash at index {idx} must be positive, got {length}"
            )
        if length < 0.0:
            raise InvalidDashPatternError(
                values, f"gap at index {idx} must not be negative, got {length}"
            )

    return values
