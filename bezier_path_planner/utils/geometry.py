# geometry.py
"""
2D point / vector primitives used by the spline and path utilities.

Classes:
- Point(x, y, distance=0.0, velocity=0.0)
- Vector(start, end) with magnitude() and interpolate(d)

Functions:
- distance(p1, p2)
"""

import math


class Point:
    """
    A 2D point that can carry the path annotations filled in by Path:
    cumulative arc length (`distance`) and target speed (`velocity`).
    """

    __slots__ = ("x", "y", "distance", "velocity")

    def __init__(self, x, y, distance=0.0, velocity=0.0):
        self.x = float(x)
        self.y = float(y)
        self.distance = float(distance)
        self.velocity = float(velocity)

    def copy(self):
        return Point(self.x, self.y, self.distance, self.velocity)

    def __repr__(self):
        return (f"Point(x={self.x:.4f}, y={self.y:.4f}, "
                f"distance={self.distance:.4f}, velocity={self.velocity:.4f})")


class Vector:
    """Directed segment from `start` to `end`."""

    def __init__(self, start, end):
        self.start = start
        self.end = end

    def magnitude(self):
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    def interpolate(self, d):
        """
        Return the point at signed arc distance `d` from start toward end.

        Note: `d` is a distance, not a 0..1 fraction.
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise ValueError(
                f"cannot interpolate along a zero-length vector at ({self.start.x}, {self.start.y})")
        x = self.start.x + d * (self.end.x - self.start.x) / mag
        y = self.start.y + d * (self.end.y - self.start.y) / mag
        return Point(x, y)


def distance(p1, p2):
    """Euclidean distance between two points."""
    return Vector(p1, p2).magnitude()
