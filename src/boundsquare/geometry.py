# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : geometry.py
#   file_relpath : src/boundsquare/geometry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Smallest axis-aligned square enclosing a set of squares.

Each input square is given by its center and half-width ``h``; its bounding box
is ``[x - h, x + h] x [y - h, y + h]``. The enclosing square is derived from the
running extrema of all bounding boxes:

* ``h = ceil(span / 2)`` where ``span`` is the larger of the width and height
  of the union box, computed as ``(span + 1) / 2``;
* the center is the midpoint of the union box, divided truncating toward zero
  (not floored), so negative odd sums round up.

All arithmetic follows signed 32-bit semantics. An empty input is not special
cased: the extrema keep their sentinel values and the result is
``0 0 -200000000``.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING

from boundsquare.config.logging import get_logger
from boundsquare.constants import SENTINEL_BOUND
from boundsquare.scanner.integers import ceil_div, trunc_div, wrap_int32
from boundsquare.scanner.line_scanner import LineScanner

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from boundsquare.config.logging import BoundsquareLogger

logger: BoundsquareLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Square:
    """Axis-aligned square given by its center and half-width."""

    center_x: int
    center_y: int
    half_width: int

    @property
    def left(self) -> int:
        return wrap_int32(self.center_x - self.half_width)

    @property
    def right(self) -> int:
        return wrap_int32(self.center_x + self.half_width)

    @property
    def bottom(self) -> int:
        return wrap_int32(self.center_y - self.half_width)

    @property
    def top(self) -> int:
        return wrap_int32(self.center_y + self.half_width)


@dataclass(frozen=True, slots=True)
class BoundingSquare:
    """Result of the computation: center ``(x, y)`` and half-width ``h``."""

    x: int
    y: int
    h: int

    def render(self) -> str:
        """Return the ``"x y h"`` output line (no trailing newline)."""
        return f"{self.x} {self.y} {self.h}"

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of the result."""
        return {"x": self.x, "y": self.y, "h": self.h}

    def covers(self, square: Square) -> bool:
        """Return True if this square contains ``square``'s bounding box."""
        return (
            self.x - self.h <= square.left
            and square.right <= self.x + self.h
            and self.y - self.h <= square.bottom
            and square.top <= self.y + self.h
        )


@dataclass
class BoundingAccumulator:
    """Running extrema of the bounding boxes seen so far.

    Attributes:
        min_left (int): Smallest ``x - h`` seen.
        min_bottom (int): Smallest ``y - h`` seen.
        max_right (int): Largest ``x + h`` seen.
        max_top (int): Largest ``y + h`` seen.
        count (int): Number of squares added.
    """

    min_left: int
    min_bottom: int
    max_right: int
    max_top: int
    count: int = 0

    @classmethod
    def empty(cls, bound: int = SENTINEL_BOUND) -> BoundingAccumulator:
        """Return an accumulator seeded with sentinel extrema."""
        return cls(min_left=bound, min_bottom=bound, max_right=-bound, max_top=-bound)

    def add(self, square: Square) -> None:
        """Widen the extrema to include ``square``'s bounding box."""
        self.min_left = min(self.min_left, square.left)
        self.min_bottom = min(self.min_bottom, square.bottom)
        self.max_right = max(self.max_right, square.right)
        self.max_top = max(self.max_top, square.top)
        self.count += 1

    def result(self) -> BoundingSquare:
        """Return the smallest enclosing square of the accumulated boxes."""
        span = max(
            wrap_int32(self.max_right - self.min_left),
            wrap_int32(self.max_top - self.min_bottom),
        )
        h = ceil_div(span, 2)
        x = trunc_div(wrap_int32(self.min_left + self.max_right), 2)
        y = trunc_div(wrap_int32(self.min_bottom + self.max_top), 2)
        return BoundingSquare(x=x, y=y, h=h)


class BoundingSquareComputer:
    """Read squares from a `LineScanner` and compute their enclosing square.

    The expected input is a count ``n`` on the first line followed by ``n``
    lines of ``x y h``.

    Args:
        bound (int): Sentinel magnitude used to seed the extrema.
    """

    def __init__(self, bound: int = SENTINEL_BOUND) -> None:
        self.bound = bound

    def read_squares(self, scanner: LineScanner) -> Iterator[Square]:
        """Yield the squares described by the scanner's input.

        Raises:
            TokenFormatError: If a value is not a 32-bit integer, including a
                value missing because a line or the input ended early.
        """
        n = scanner.next_int_in_line()
        scanner.go_to_next_line()
        logger.debug("Reading %d square(s)", n)

        for _ in range(n):
            x = scanner.next_int_in_line()
            y = scanner.next_int_in_line()
            h = scanner.next_int_in_line()
            scanner.go_to_next_line()
            logger.trace("Square: x=%d y=%d h=%d", x, y, h)
            yield Square(center_x=x, center_y=y, half_width=h)

    def compute(self, squares: Iterable[Square]) -> BoundingSquare:
        """Return the enclosing square of ``squares``."""
        acc = BoundingAccumulator.empty(self.bound)
        for square in squares:
            acc.add(square)
        result = acc.result()
        logger.debug("Accumulated %d square(s): %s -> %s", acc.count, acc, result)
        return result

    def solve(self, scanner: LineScanner) -> BoundingSquare:
        """Read the whole problem from ``scanner`` and return its answer."""
        return self.compute(self.read_squares(scanner))


def compute_bounding_square(
    squares: Iterable[Square],
    bound: int = SENTINEL_BOUND,
) -> BoundingSquare:
    """Return the smallest axis-aligned square enclosing ``squares``."""
    return BoundingSquareComputer(bound).compute(squares)


def solve_text(text: str, bound: int = SENTINEL_BOUND) -> str:
    """Solve a problem given as text and return the rendered ``"x y h"`` line."""
    with LineScanner(io.StringIO(text, newline="")) as scanner:
        return BoundingSquareComputer(bound).solve(scanner).render()
