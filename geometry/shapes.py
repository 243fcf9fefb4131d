"""
Planar quadrilaterals as immutable values.

Hierarchy follows the geometric theorems:
  Parallelogram
    ├── Rhombus    (four congruent sides)
    │     └── Square
    └── Rectangle  (right angle)

Angles are in degrees and measure the interior angle between side a and
side b. vertices() places side a along the positive x-axis, starting at
the origin, counter-clockwise.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from core.exceptions import InvalidParameterError
from core.utils import is_close, require_finite, require_positive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parallelogram:
    """
    Quadrilateral with two pairs of parallel sides.

    Attributes:
        side_a: length of side a (and of the side opposite it)
        side_b: length of side b (and of the side opposite it)
        angle: interior angle between a and b, in degrees, 0 < angle < 180
    """

    side_a: float
    side_b: float
    angle: float

    def __post_init__(self):
        side_a = require_positive("side_a", self.side_a)
        side_b = require_positive("side_b", self.side_b)
        angle = require_finite("angle", self.angle)
        if not 0.0 < angle < 180.0:
            raise InvalidParameterError("angle", angle, "must be strictly between 0 and 180 degrees")

        object.__setattr__(self, "side_a", side_a)
        object.__setattr__(self, "side_b", side_b)
        object.__setattr__(self, "angle", angle)
        logger.debug("Created %s(a=%s, b=%s, angle=%s)", type(self).__name__, side_a, side_b, angle)

    @property
    def angle_radians(self) -> float:
        return math.radians(self.angle)

    def area(self) -> float:
        return self.side_a * self.side_b * math.sin(self.angle_radians)

    def perimeter(self) -> float:
        return 2.0 * (self.side_a + self.side_b)

    def height(self) -> float:
        """Distance between side a and its opposite side."""
        return self.side_b * math.sin(self.angle_radians)

    def diagonals(self) -> Tuple[float, float]:
        """
        Return (d1, d2) by the law of cosines.

        d1 is opposite the given angle, d2 opposite its supplement,
        so d1 is the longer diagonal when angle > 90.
        """
        a, b = self.side_a, self.side_b
        cos_angle = math.cos(self.angle_radians)
        d1 = math.sqrt(max(a * a + b * b - 2 * a * b * cos_angle, 0.0))
        d2 = math.sqrt(max(a * a + b * b + 2 * a * b * cos_angle, 0.0))
        return d1, d2

    def vertices(self) -> np.ndarray:
        """4x2 array of corner coordinates, counter-clockwise from the origin."""
        offset = np.array([
            self.side_b * math.cos(self.angle_radians),
            self.side_b * math.sin(self.angle_radians),
        ])
        a = np.array([self.side_a, 0.0])
        return np.array([
            [0.0, 0.0],
            a,
            a + offset,
            offset,
        ])

    def is_rhombus(self) -> bool:
        return is_close(self.side_a, self.side_b)

    def is_rectangle(self) -> bool:
        return is_close(self.angle, 90.0)


class Rhombus(Parallelogram):
    """
    A quadrilateral with four congruent sides.
    Theorem: a rhombus is a parallelogram.
    """

    def __init__(self, side: float, angle: float):
        super().__init__(side, side, angle)

    @property
    def side(self) -> float:
        return self.side_a


class Rectangle(Parallelogram):
    """A parallelogram whose interior angles are right angles."""

    def __init__(self, width: float, height: float):
        super().__init__(width, height, 90.0)

    @property
    def width(self) -> float:
        return self.side_a

    def diagonal(self) -> float:
        return math.hypot(self.side_a, self.side_b)


class Square(Rhombus):
    """A rhombus with right angles (equivalently, an equilateral rectangle)."""

    def __init__(self, side: float):
        super().__init__(side, 90.0)
