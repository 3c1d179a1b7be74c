"""
Sorting and summary statistics for a list of shapes.

The summary is collected in a single pass over the shapes and printed in the
same layout as the original console report.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .shapes import Shape, is_polygon


@dataclass
class ShapeSummary:
    total_shapes: int = 0
    total_perimeter: float = 0.0
    total_polygons: int = 0
    total_polygon_sides: int = 0

    @property
    def average_polygon_sides(self) -> float:
        """Mean side count of the polygons; ``nan`` when there are none."""
        if not self.total_polygons:
            return math.nan
        return self.total_polygon_sides / self.total_polygons


def _area_key(shape: Shape) -> tuple[bool, float]:
    # nan areas compare false both ways, so they go last.
    area = shape.area()
    return (math.isnan(area), area)


def sort_by_area(shapes: Iterable[Shape]) -> list[Shape]:
    """Return shapes ordered by ascending area; ties keep their input order.

    Shapes whose area is ``nan`` (impossible triangles) come after the rest.
    """
    return sorted(shapes, key=_area_key)


def summarize(shapes: Iterable[Shape]) -> ShapeSummary:
    summary = ShapeSummary()
    for shape in shapes:
        summary.total_shapes += 1
        summary.total_perimeter += shape.perimeter()
        if is_polygon(shape):
            summary.total_polygons += 1
            summary.total_polygon_sides += shape.side_count
    return summary


def format_number(value: float) -> str:
    # Six significant digits, like a default C++ output stream.
    return f"{value:g}"


def render_report(shapes: Iterable[Shape], summary: ShapeSummary) -> list[str]:
    """Return the report lines: one name per shape, a blank line, then totals."""
    lines = [shape.name for shape in shapes]
    lines.append("")
    lines.append(f"Total Shapes: {summary.total_shapes}")
    lines.append(f"Total Perimeter of all shapes: {format_number(summary.total_perimeter)}")
    lines.append(f"Total Polygons: {summary.total_polygons}")
    lines.append(f"Average Polygon Sides: {format_number(summary.average_polygon_sides)}")
    return lines
