# bezier_spline.py
"""
Cubic Bezier spline segment.

A Spline is defined by four control points: p1 (start, on-curve), p2 and p3
(tangent handles, off-curve) and p4 (end, on-curve).

    B(t) = (1-t)^3 P1 + 3t(1-t)^2 P2 + 3t^2(1-t) P3 + t^3 P4

Sampling is uniform in t, so arc-length accuracy depends on `tolerance`.
"""

import logging
import math

import numpy as np

from bezier_path_planner.utils.geometry import Point, Vector

logger = logging.getLogger(__name__)


def validate_count(value, name):
    """Return `value` as an int, raising ValueError unless it is an integer >= 2."""
    if isinstance(value, bool) or not math.isfinite(value) or int(value) != value:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 2:
        raise ValueError(f"{name} must be >= 2, got {value!r}")
    return int(value)


class Spline:
    def __init__(self, p1, p2, p3, p4):
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.p4 = p4
        self.points = []
        self.length = 0.0

    def control_array(self):
        """Control points as a (4,2) array."""
        return np.array([[p.x, p.y] for p in (self.p1, self.p2, self.p3, self.p4)], dtype=float)

    def get_position(self, t):
        """Position on the curve at parameter t (not clamped to [0,1])."""
        x = ((1 - t) ** 3 * self.p1.x + 3 * t * (1 - t) ** 2 * self.p2.x +
             3 * t ** 2 * (1 - t) * self.p3.x + t ** 3 * self.p4.x)
        y = ((1 - t) ** 3 * self.p1.y + 3 * t * (1 - t) ** 2 * self.p2.y +
             3 * t ** 2 * (1 - t) * self.p3.y + t ** 3 * self.p4.y)
        return Point(x, y)

    def get_positions(self, ts):
        """
        Vectorised get_position.

        Args:
          ts: array-like of parameter values
        Returns:
          (N,2) ndarray of positions
        """
        t = np.asarray(ts, dtype=float)[:, None]
        P = self.control_array()
        return ((1 - t) ** 3 * P[0] + 3 * t * (1 - t) ** 2 * P[1] +
                3 * t ** 2 * (1 - t) * P[2] + t ** 3 * P[3])

    def generate_points(self, tolerance, first):
        """
        Sample `tolerance` points evenly spaced in t over [0,1] (inclusive).

        Args:
          tolerance: number of samples, integer >= 2
          first: False for every segment after the first on a path; the t=0
                 sample is then dropped since it repeats the previous p4
        """
        tolerance = validate_count(tolerance, "tolerance")
        ts = np.linspace(0.0, 1.0, tolerance)
        # endpoints come from the control points so t=0/1 are exact
        xy = self.get_positions(ts)
        xy[0] = (self.p1.x, self.p1.y)
        xy[-1] = (self.p4.x, self.p4.y)

        self.points = [Point(x, y) for x, y in xy]
        if not first:
            self.points = self.points[1:]
        self.gen_length()
        logger.debug("spline sampled: %d points, length=%.4f", len(self.points), self.length)
        return self.points

    def gen_length(self):
        """Piecewise-linear length of the current samples."""
        self.length = 0.0
        for i in range(len(self.points) - 1):
            self.length += Vector(self.points[i], self.points[i + 1]).magnitude()
        return self.length

    def __repr__(self):
        return f"Spline(p1={self.p1!r}, p2={self.p2!r}, p3={self.p3!r}, p4={self.p4!r})"
