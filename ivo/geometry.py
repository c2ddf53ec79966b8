"""Points, edges and polygons in two space dimensions plus time."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Point21:
    """Point (x, y, t); the time coordinate defaults to zero."""

    x: float
    y: float
    t: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "t"):
            value = getattr(self, name)
            if not _is_scalar(value):
                raise TypeError(f"coordinate {name} must be a real number")
            object.__setattr__(self, name, float(value))

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.t)[index]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.t))

    def _apply(self, function) -> Point21:
        return Point21(function(self.x), function(self.y), function(self.t))

    def _combine(self, other: Point21, function) -> Point21:
        return Point21(
            function(self.x, other.x),
            function(self.y, other.y),
            function(self.t, other.t),
        )

    def __pos__(self) -> Point21:
        return self

    def __neg__(self) -> Point21:
        return self._apply(lambda value: -value)

    def __add__(self, other):
        if isinstance(other, Point21):
            return self._combine(other, lambda a, b: a + b)
        if _is_scalar(other):
            return self._apply(lambda value: value + other)
        return NotImplemented

    def __radd__(self, other):
        if _is_scalar(other):
            return self._apply(lambda value: other + value)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point21):
            return self._combine(other, lambda a, b: a - b)
        if _is_scalar(other):
            return self._apply(lambda value: value - other)
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return self._apply(lambda value: other - value)
        return NotImplemented

    def __mul__(self, other):
        if _is_scalar(other):
            return self._apply(lambda value: value * other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._apply(lambda value: other * value)
        return NotImplemented

    def __truediv__(self, other):
        if _is_scalar(other):
            return self._apply(lambda value: value / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_scalar(other):
            return self._apply(lambda value: other / value)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.t:g})"


def unit_x(value: float) -> Point21:
    """Point (value, 0, 0)."""
    return Point21(value, 0.0, 0.0)


def unit_y(value: float) -> Point21:
    """Point (0, value, 0)."""
    return Point21(0.0, value, 0.0)


def unit_t(value: float) -> Point21:
    """Point (0, 0, value)."""
    return Point21(0.0, 0.0, value)


def distance(p: Point21, q: Point21) -> float:
    """Euclidean distance between two points."""
    return math.dist(tuple(p), tuple(q))


@dataclass(frozen=True, eq=False)
class Edge21:
    """Segment [a, b]; two edges are equal whatever their orientation."""

    a: Point21
    b: Point21

    def __post_init__(self) -> None:
        if not (isinstance(self.a, Point21) and isinstance(self.b, Point21)):
            raise TypeError("edge ends must be points")

    def __getitem__(self, index: int) -> Point21:
        return (self.a, self.b)[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge21):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (
            self.a == other.b and self.b == other.a
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.a, self.b)))

    def size(self) -> float:
        """Length of the edge."""
        return distance(self.a, self.b)

    def __str__(self) -> str:
        return f"[{self.a}, {self.b}]"


class Polygon21:
    """Polygon given by its points, counterclockwise in its plane."""

    def __init__(self, points: Iterable[Point21]) -> None:
        self._points = tuple(points)
        if not all(isinstance(point, Point21) for point in self._points):
            raise TypeError("polygon vertices must be points")

    @property
    def points(self) -> tuple[Point21, ...]:
        """The polygon's points, in order."""
        return self._points

    def edges(self) -> list[Edge21]:
        """Edges joining consecutive points, closing back to the first."""
        if not self._points:
            return []
        following = self._points[1:] + self._points[:1]
        return [Edge21(a, b) for a, b in zip(self._points, following)]

    def __getitem__(self, index: int) -> Point21:
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point21]:
        return iter(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon21):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __str__(self) -> str:
        return "\n".join(str(point) for point in self._points)

    def __repr__(self) -> str:
        return f"Polygon21({list(self._points)!r})"