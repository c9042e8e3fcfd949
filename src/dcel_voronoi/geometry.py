from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in screen orientation (top < bottom).
    Bounds are taken as given: left >= right or top >= bottom is not rejected,
    such a rect simply contains nothing.
    """
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def contains_point(self, point: Point) -> bool:
        # strict interior, boundary excluded
        return (
            self.left < point.x < self.right
            and self.top < point.y < self.bottom
        )

    def contains(self, points: np.ndarray) -> np.ndarray:
        """
        points: (N,2) -> mask (N,), same strict test as contains_point
        """
        P = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return (
            (P[:, 0] > self.left) & (P[:, 0] < self.right)
            & (P[:, 1] > self.top) & (P[:, 1] < self.bottom)
        )


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    if len(points) == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([[p.x, p.y] for p in points], dtype=np.float64)


def vertex_mean(points: Sequence[Point]) -> Point:
    """
    Unweighted mean of polygon vertices. This is not the area centroid;
    the two agree only for regular / evenly sampled outlines.
    Empty input gives Point(nan, nan).
    """
    if len(points) == 0:
        return Point(float("nan"), float("nan"))

    total = Point(0.0, 0.0)
    for p in points:
        total = p + total
    return total * (1.0 / len(points))


def signed_area(points: Sequence[Point]) -> float:
    """
    Shoelace area, positive for counter-clockwise (y up) outlines.
    """
    P = points_to_array(points)
    if len(P) < 3:
        return 0.0
    x = P[:, 0]
    y = P[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))
