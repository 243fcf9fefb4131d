"""
Geometry package — planar quadrilateral value types.
"""

from .shapes import Parallelogram, Rectangle, Rhombus, Square

__all__ = [
    "Parallelogram",
    "Rectangle",
    "Rhombus",
    "Square",
]
