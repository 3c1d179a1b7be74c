"""
Read shape descriptions from a text file.

Each non-blank line holds a one-letter shape code followed by numeric
parameters separated by whitespace::

    C 2         circle, radius
    R 3 4       rectangle, length and width
    S 3         square, side
    T 3 4 5     triangle, three sides

Lines with an unknown code are reported on stderr and skipped. Short or
non-numeric parameter lists are tolerated by default: parameters that could
not be read keep the value from the previous line (0.0 at the start).
Strict mode turns those lines into a ``ShapeFormatError`` instead.
"""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable

from .config import SHAPES_STRICT
from .shapes import Circle, Rectangle, Shape, Triangle, square

# code -> (number of parameters, constructor)
SHAPE_BUILDERS: dict[str, tuple[int, Callable[..., Shape]]] = {
    "C": (1, Circle),
    "R": (2, Rectangle),
    "S": (1, square),
    "T": (3, Triangle),
}

MAX_PARAMS = max(count for count, _ in SHAPE_BUILDERS.values())

NUMBER_PREFIX = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class ShapeFormatError(ValueError):
    """A recognized shape line without enough numeric parameters."""

    def __init__(self, line_no: int, line: str, expected: int, found: int):
        super().__init__(
            f"Line {line_no}: expected {expected} numeric parameter(s), "
            f"found {found}: {line!r}"
        )
        self.line_no = line_no
        self.line = line
        self.expected = expected
        self.found = found


def read_params(text: str, count: int) -> list[float]:
    """Return up to ``count`` leading numbers from ``text``.

    A token with trailing junk such as ``2.5x`` or ``3,4`` still yields its
    numeric prefix, but reading stops there. A token with no numeric prefix
    stops reading without a value.
    """
    values = []
    for token in text.split()[:count]:
        match = NUMBER_PREFIX.match(token)
        if match is None:
            break
        values.append(float(match.group(0)))
        if match.end() < len(token):
            break
    return values


def parse_shapes(lines: Iterable[str], strict: bool | None = None) -> list[Shape]:
    """Build shapes from text lines, keeping their order."""
    if strict is None:
        strict = SHAPES_STRICT

    shapes: list[Shape] = []
    params = [0.0] * MAX_PARAMS
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        # The code is a single character, so "C2" reads the same as "C 2".
        code, rest = line[0], line[1:]
        builder = SHAPE_BUILDERS.get(code)
        if builder is None:
            print(f"Unknown shape: {code}", file=sys.stderr)
            continue

        count, build = builder
        values = read_params(rest, count)
        if len(values) < count and strict:
            raise ShapeFormatError(line_no, line, count, len(values))
        params[: len(values)] = values
        shapes.append(build(*params[:count]))
    return shapes


def load_shapes(path: str, strict: bool | None = None) -> list[Shape]:
    """Load every shape in ``path``; raises ``OSError`` if it cannot be read.

    Bytes that are not valid UTF-8 are replaced, so such a line is reported
    as an unknown shape instead of aborting the run.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = f.readlines()
    return parse_shapes(lines, strict=strict)
