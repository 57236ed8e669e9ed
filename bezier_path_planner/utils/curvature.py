# curvature.py
"""
Three-point curvature utilities.

Functions:
- calc_curvature(p1, p2, p3) -> 1 / radius of the circle through three points
- compute_discrete_curvature(points) -> (N,) curvature per point
"""

import math

import numpy as np

# nudge applied to p1.x when p1 and p2 share an x coordinate
X_EPSILON = 1e-5


def calc_curvature(p1, p2, p3):
    """
    Fit the circle through p1, p2, p3 and return its curvature (1 / r).

    The centre (a, b) comes from intersecting the perpendicular bisectors
    of (p1, p2) and (p2, p3). Collinear or otherwise degenerate input gives
    a non-finite radius and is reported as 0 (straight).
    """
    x1 = p1.x
    if x1 == p2.x:
        x1 += X_EPSILON
    x2, x3 = p2.x, p3.x
    y1, y2, y3 = p1.y, p2.y, p3.y

    with np.errstate(divide="ignore", invalid="ignore"):
        dx12 = np.float64(x1 - x2)
        k1 = 0.5 * (x1 ** 2 + y1 ** 2 - x2 ** 2 - y2 ** 2) / dx12
        k2 = (y1 - y2) / dx12
        b_num = x2 ** 2 - 2 * x2 * k1 + y2 ** 2 - x3 ** 2 + 2 * x3 * k1 - y3 ** 2
        b_den = x3 * k2 - y3 + y2 - x2 * k2

        b = 0.5 * b_num / np.float64(b_den)  # centre y
        a = k1 - k2 * b                      # centre x
        r = np.sqrt((x1 - a) ** 2 + (y1 - b) ** 2)
        kappa = 1.0 / r

    if not math.isfinite(kappa):
        return 0.0
    return float(kappa)


def compute_discrete_curvature(points):
    """
    Curvature at each point of an ordered sequence using calc_curvature on
    (prev, point, next). Endpoints copy their neighbour's value.
    """
    n = len(points)
    if n < 3:
        return np.zeros(n)

    kappa = np.zeros(n)
    for i in range(1, n - 1):
        kappa[i] = calc_curvature(points[i - 1], points[i], points[i + 1])
    kappa[0] = kappa[1]
    kappa[-1] = kappa[-2]
    return kappa
