"""
Command-line entry point.

Loads the shapes file, sorts the shapes by area, and prints each shape's
name followed by the summary totals. The input is ``shapes.txt`` in the
working directory; the path is not a command-line option.
"""

from __future__ import annotations

import sys

from .config import SHAPES_FILE
from .loader import ShapeFormatError, load_shapes
from .report import render_report, sort_by_area, summarize


def main(path: str | None = None, strict: bool | None = None) -> int:
    """Run the report and return the process exit status."""
    if path is None:
        path = SHAPES_FILE

    try:
        shapes = load_shapes(path, strict=strict)
    except ShapeFormatError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        # Nothing is printed to stdout when the input cannot be read.
        print(f"Cannot open {path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    ordered = sort_by_area(shapes)
    for line in render_report(ordered, summarize(ordered)):
        print(line)
    return 0
