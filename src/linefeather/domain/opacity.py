"""Result types returned by the opacity model."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OpacityData:
    """Coverage of a single sample.

    Attributes:
        opacity: Final coverage in [0, 1]
        is_in_line: True when the sample lies within the stroke width
    """

    opacity: float
    is_in_line: bool


@dataclass(frozen=True, slots=True)
class AlongPathOpacity:
    """Opacity contributed by the dash pattern at one path distance.

    Attributes:
        opacity: Dash opacity in [0, 1]
        distance_in_cap: Distance into a round cap, None outside caps
    """

    opacity: float
    distance_in_cap: float | None = None
