"""linefeather - Anti-aliased coverage for stroked, dashed and capped polylines.

linefeather computes per-sample opacity for a stroke rasterizer. Given the
distance of a sample from the path centerline and the distance travelled
along the path, it returns how opaque that pixel should be, with feathered
dash boundaries, butt/square/round caps and continuous dash phase across
path segments.

Example:
    >>> from linefeather.core import OpacityCalculator
    >>> calc = OpacityCalculator(line_width=4.0)
    >>> calc.evaluate(center_distance=0.0, start_distance=0.0).opacity
    1.0
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
