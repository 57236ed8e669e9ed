# path_io.py
"""
Spline input / trajectory output helpers shared by the ROS node.

Spline CSV format: one spline per row, 8 values
    x1, y1, x2, y2, x3, y3, x4, y4
where (x1,y1)/(x4,y4) are the on-curve endpoints and the middle pairs are
the control handles. Consecutive rows must chain (row i end == row i+1 start).
"""

import logging

import numpy as np

from bezier_path_planner.utils.bezier_spline import Spline
from bezier_path_planner.utils.geometry import Point
from bezier_path_planner.utils.path import Path

logger = logging.getLogger(__name__)

VALUES_PER_SPLINE = 8

# S-curve of two chained splines, used when no CSV is given
DEFAULT_SPLINE_ROWS = [
    (-48.0, -48.0, -48.0, 0.0, 0.0, -24.0, 0.0, 0.0),
    (0.0, 0.0, 0.0, 24.0, 48.0, 0.0, 48.0, 48.0),
]


def splines_from_rows(rows):
    """Build Splines from rows of 8 floats."""
    data = np.asarray(rows, dtype=float)
    if data.ndim == 1:
        data = data.reshape((1, -1))
    if data.ndim != 2 or data.shape[1] != VALUES_PER_SPLINE:
        raise ValueError(f"each spline row needs {VALUES_PER_SPLINE} values, got shape {data.shape}")
    splines = []
    for row in data:
        pts = [Point(row[j], row[j + 1]) for j in range(0, VALUES_PER_SPLINE, 2)]
        splines.append(Spline(*pts))
    return splines


def load_splines_from_csv(path):
    data = np.loadtxt(path, delimiter=',', ndmin=2)
    splines = splines_from_rows(data)
    logger.debug("loaded %d splines from %s", len(splines), path)
    return splines


def build_path(splines, config=None):
    """Path with every spline appended in order (junctions checked)."""
    path = Path(config)
    for spline in splines:
        path.add_spline(spline)
    return path


def generate_for_resolution(path, tolerance, spacing, units_per_point):
    """
    Generate `path`, taking the output count from `units_per_point` when
    `spacing` is 0 or negative. That needs the path length, so the path is
    first built with two output points to measure it.
    """
    if spacing <= 0:
        path.gen_points(tolerance, 2)
        spacing = path.spacing_for_resolution(units_per_point)
        logger.debug("length %.4f at %.4f per point -> spacing %d", path.length, units_per_point, spacing)
    return path.gen_points(tolerance, spacing)


def flatten_trajectory(trajectory):
    """[(x, y, v, t), ...] -> [x0, y0, v0, t0, x1, ...] for Float32MultiArray."""
    flat = []
    for (x, y, v, t) in trajectory:
        flat += [float(x), float(y), float(v), float(t)]
    return flat
