"""Domain models for linefeather.

This module contains the value types shared by the opacity model, the
configuration layer and the preview rasterizer. All models are:

- Immutable (frozen dataclasses)
- Free of rendering or I/O concerns

Key classes:
- LineCap: Cap style applied at dash endpoints
- DashInterval: A feathered "on" interval on the dash axis
- DashTable: All intervals of a pattern plus its period
- AlongPathOpacity: Dash opacity and round-cap residual at one distance
- OpacityData: Final coverage of one sample
"""

from linefeather.domain.dash import DashInterval, DashTable, LineCap, check_dash_pattern
from linefeather.domain.opacity import AlongPathOpacity, OpacityData

__all__: list[str] = [
    # Enums
    "LineCap",
    # Core types
    "DashInterval",
    "DashTable",
    "AlongPathOpacity",
    "OpacityData",
    # Validation
    "check_dash_pattern",
]
