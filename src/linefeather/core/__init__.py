"""Core algorithms for linefeather.

This module contains the core algorithms for:

- Dash interval construction (feathered on-intervals, cap extension)
- Along-path opacity (dash lookup, round-cap residual distance)
- Across-path opacity (edge feathering, thin-stroke attenuation)
- Preview rasterization of polylines

Key functions:
- build_dash_table: Build the feathered interval table for a dash pattern
- along_path_opacity: Resolve dash opacity at a path distance
- across_path_opacity: Resolve edge opacity at a centerline distance
- effective_half_width: Round-cap cross-section half width
- render_polyline: Rasterize a stroked polyline into a coverage grid

Key classes:
- OpacityCalculator: Per-stroke coverage evaluator with travel state
- CoverageGrid: Coverage values produced by the preview rasterizer
"""

from linefeather.core.dashes import build_dash_table, make_interval
from linefeather.core.opacity import (
    OpacityCalculator,
    across_path_opacity,
    along_path_opacity,
    effective_half_width,
)
from linefeather.core.raster import CoverageGrid, SegmentSample, render_polyline, segment_sample

__all__ = [
    # Opacity classes
    "OpacityCalculator",
    # Raster classes
    "CoverageGrid",
    "SegmentSample",
    # Functions
    "across_path_opacity",
    "along_path_opacity",
    "build_dash_table",
    "effective_half_width",
    "make_interval",
    "render_polyline",
    "segment_sample",
]
