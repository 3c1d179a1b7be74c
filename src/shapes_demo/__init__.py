"""Shape loading, area sorting, and summary statistics."""

from .shapes import Circle, Rectangle, Triangle, is_polygon, square

__all__ = ["Circle", "Rectangle", "Triangle", "is_polygon", "square"]
