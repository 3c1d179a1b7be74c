"""
Shape variants and their measurements.

Each variant is a small immutable record that knows its display name, its
area and perimeter, and its side count (``None`` when it is not a polygon).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Circle:
    radius: float

    name = "Circle"
    side_count = None

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


@dataclass(frozen=True)
class Rectangle:
    """Four-sided shape; squares are rectangles named ``Square``."""

    length: float
    width: float
    name: str = "Rectangle"

    side_count = 4

    def area(self) -> float:
        return self.length * self.width

    def perimeter(self) -> float:
        return 2 * (self.length + self.width)


@dataclass(frozen=True)
class Triangle:
    a: float
    b: float
    c: float

    name = "Triangle"
    side_count = 3

    @property
    def sides(self) -> tuple[float, float, float]:
        return (self.a, self.b, self.c)

    def area(self) -> float:
        """Heron's formula; ``nan`` when the sides cannot close a triangle."""
        a, b, c = self.sides
        product = (a + b + c) * (-a + b + c) * (a - b + c) * (a + b - c)
        if product < 0:
            return math.nan
        return 0.25 * math.sqrt(product)

    def perimeter(self) -> float:
        return self.a + self.b + self.c


Shape = Union[Circle, Rectangle, Triangle]


def square(side: float) -> Rectangle:
    """Build a square as a rectangle with equal sides."""
    return Rectangle(side, side, name="Square")


def is_polygon(shape: Shape) -> bool:
    return shape.side_count is not None
