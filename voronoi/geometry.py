"""
Integer pixel geometry: points and circles.
"""

from math import sqrt
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: int
    y: int


class Circle(NamedTuple):
    center: Point
    radius: int

    def distance(self, p: Point) -> float:
        """Signed distance from p to the circle boundary; negative inside."""
        dx = float(self.center.x - p.x)
        dy = float(self.center.y - p.y)
        return sqrt(dx * dx + dy * dy) - float(self.radius)

    def contains(self, p: Point) -> bool:
        """True if p lies inside the circle or on its boundary."""
        dx = float(self.center.x - p.x)
        dy = float(self.center.y - p.y)
        return sqrt(dx * dx + dy * dy) <= float(self.radius)

    def bounds(self) -> Tuple[Point, Point]:
        """Inclusive bounding square as (upper-left, lower-right) corners."""
        return (
            Point(self.center.x - self.radius, self.center.y - self.radius),
            Point(self.center.x + self.radius, self.center.y + self.radius),
        )
