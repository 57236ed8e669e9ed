# path.py
"""
Robot path made of chained cubic Bezier splines.

Pipeline (Path.gen_points):
  1. sample every spline (t=0 sample dropped for all but the first)
  2. concatenate copies of the samples into `points`
  3. gen_length():        cumulative arc length -> point.distance, path.length
  4. gen_velocities():    forward speed limit, then backward deceleration pass
  5. gen_spaced_points(): `spacing` points evenly spaced in arc length -> points2

Derived state (`points`, `length`, `points2`) is rebuilt from scratch on
every gen_points() call.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np

from bezier_path_planner.utils.bezier_spline import validate_count
from bezier_path_planner.utils.geometry import Vector
from bezier_path_planner.utils.time_parameterization import arc_lengths

logger = logging.getLogger(__name__)

# max gap allowed between one spline's p4 and the next spline's p1
JUNCTION_TOLERANCE = 1e-9


@dataclass(frozen=True)
class PathConfig:
    """
    Velocity tunables.

    max_speed: hard velocity ceiling
    curvature_multiplier: scales the sample-gap speed limit of the forward pass
    decel: deceleration bound (distance units / time^2) for the backward pass
    """
    max_speed: float = 60.0
    curvature_multiplier: float = 2.0
    decel: float = 20.0

    def __post_init__(self):
        if not self.max_speed > 0:
            raise ValueError("max_speed must be > 0")
        if not self.curvature_multiplier >= 0:
            raise ValueError("curvature_multiplier must be >= 0")
        if not self.decel >= 0:
            raise ValueError("decel must be >= 0")

    @classmethod
    def from_sliders(cls, max_speed, curve_multiplier, precision, decel):
        """
        Build a config from UI slider values; the effective multiplier is
        scaled by sampling precision so the limit tracks spline length rather
        than sample gap.
        """
        return cls(max_speed=float(max_speed),
                   curvature_multiplier=float(curve_multiplier) * float(precision) / 100.0,
                   decel=float(decel))


class Path:
    def __init__(self, config=None):
        self.config = config if config is not None else PathConfig()
        self.splines = []
        self.points = []
        self.points2 = []
        self.length = 0.0
        self.built = False

    def add_spline(self, spline):
        """Append a spline; its p1 must coincide with the previous spline's p4."""
        if self.splines:
            prev = self.splines[-1].p4
            if not (math.isclose(prev.x, spline.p1.x, rel_tol=0.0, abs_tol=JUNCTION_TOLERANCE) and
                    math.isclose(prev.y, spline.p1.y, rel_tol=0.0, abs_tol=JUNCTION_TOLERANCE)):
                raise ValueError(
                    f"spline {len(self.splines)} starts at ({spline.p1.x}, {spline.p1.y}) "
                    f"but previous spline ends at ({prev.x}, {prev.y})")
        self.splines.append(spline)
        self.built = False

    def gen_length(self):
        """Assign cumulative distance along `points` and set `length`."""
        s = arc_lengths([(p.x, p.y) for p in self.points])
        for p, si in zip(self.points, s):
            p.distance = float(si)
        self.length = float(s[-1])
        return self.length

    def gen_velocities(self):
        """
        Forward pass: v_i = min(max_speed, curvature_multiplier * |p_i p_i+1|),
        the last point copying its predecessor. Backward pass: stop at the
        end and cap each speed by sqrt(v_next^2 + 2 * decel * ds).
        """
        cfg = self.config
        pts = self.points
        n = len(pts)

        for i in range(n - 1):
            gap = Vector(pts[i], pts[i + 1]).magnitude()
            pts[i].velocity = min(cfg.max_speed, cfg.curvature_multiplier * gap)
        if n >= 2:
            pts[-1].velocity = pts[-2].velocity

        pts[-1].velocity = 0.0
        for i in range(n - 1, 0, -1):
            ds = Vector(pts[i], pts[i - 1]).magnitude()
            vel = math.sqrt(pts[i].velocity ** 2 + 2 * cfg.decel * ds)
            pts[i - 1].velocity = min(vel, pts[i - 1].velocity)

    def gen_spaced_points(self, spacing):
        """
        Resample `points` into exactly `spacing` points evenly spaced in arc
        length. Positions between samples are linearly interpolated; speed
        is taken from the nearer of the two samples.
        """
        spacing = validate_count(spacing, "spacing")
        distances = np.array([p.distance for p in self.points], dtype=float)
        last = len(self.points) - 1

        self.points2 = []
        for T in np.linspace(0.0, 1.0, spacing):
            u = float(T * self.length)
            # largest sample with distance <= u
            idx = max(int(np.searchsorted(distances, u, side="right")) - 1, 0)
            p1 = self.points[idx]

            if p1.distance == u or idx == last:
                p3 = p1.copy()
            else:
                p2 = self.points[idx + 1]
                v = Vector(p1, p2)
                offset = u - p1.distance
                p3 = v.interpolate(offset)
                if offset > v.magnitude() / 2:
                    p3.velocity = p2.velocity
                else:
                    p3.velocity = p1.velocity
            p3.distance = u
            self.points2.append(p3)
        return self.points2

    def gen_points(self, tolerance, spacing):
        """
        Build the whole trajectory.

        Args:
          tolerance: samples per spline (integer >= 2)
          spacing: number of evenly spaced output points (integer >= 2)
        Returns:
          points2, the resampled velocity-annotated points
        """
        if not self.splines:
            raise ValueError("path has no splines")
        tolerance = validate_count(tolerance, "tolerance")
        spacing = validate_count(spacing, "spacing")

        self.points = []
        for i, spline in enumerate(self.splines):
            samples = spline.generate_points(tolerance, i == 0)
            self.points.extend(p.copy() for p in samples)

        self.gen_length()
        self.gen_velocities()
        self.gen_spaced_points(spacing)
        self.built = True
        logger.debug("path built: splines=%d raw=%d length=%.4f output=%d",
                     len(self.splines), len(self.points), self.length, len(self.points2))
        return self.points2

    def spacing_for_resolution(self, units_per_point):
        """
        Output count giving roughly `units_per_point` between points of the
        last build. Halves round up (5 / 2 -> 3).
        """
        if not units_per_point > 0:
            raise ValueError("units_per_point must be > 0")
        return max(2, int(math.floor(self.length / units_per_point + 0.5)))

    def to_array(self):
        """(N,4) array of x, y, distance, velocity for points2."""
        if not self.points2:
            return np.zeros((0, 4))
        return np.array([[p.x, p.y, p.distance, p.velocity] for p in self.points2], dtype=float)
