"""Exception hierarchy for linefeather."""

from collections.abc import Sequence


class LineFeatherError(Exception):
    """Base exception for all linefeather errors."""

    pass


class StyleError(LineFeatherError):
    """Errors related to stroke style configuration."""

    pass


class InvalidLineWidthError(StyleError):
    """Line width is negative or not a finite number."""

    def __init__(self, line_width: float, reason: str) -> None:
        self.line_width = line_width
        self.reason = reason
        super().__init__(f"Invalid line width {line_width!r}: {reason}")


class InvalidDashPatternError(StyleError):
    """Dash pattern contains unusable lengths."""

    def __init__(self, dashes: Sequence[float], reason: str) -> None:
        self.dashes = list(dashes)
        self.reason = reason
        super().__init__(f"Invalid dash pattern {self.dashes!r}: {reason}")


class GeometryError(LineFeatherError):
    """Errors in path geometry supplied to the rasterizer."""

    pass


class PolylineError(GeometryError):
    """Polyline cannot be rendered."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot render polyline: {reason}")
