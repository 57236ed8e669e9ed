# time_parameterization.py
"""
Timestamps for a velocity-annotated path.

Inputs:
- `samples`: ndarray (N,2) spatial samples along the path
- `v_profile`: ndarray (N,) target speed per sample (e.g. Path.points2 velocities)
Outputs:
- times: ndarray (N,) timestamps (seconds)
- trajectory: list of tuples [(x, y, v, t), ...] ready to publish

Functions:
- arc_lengths(samples)
- integrate_variable_speed_to_times(samples, v_profile, v_floor)
- make_velocity_trajectory(points, times=None)
"""

import numpy as np


def arc_lengths(samples):
    """Cumulative distance from the first sample, (N,) for samples (N,2)."""
    xy = np.asarray(samples, dtype=float).reshape(-1, 2)
    if len(xy) == 0:
        return np.zeros(0)
    steps = np.hypot(*np.diff(xy, axis=0).T)
    return np.cumsum(np.insert(steps, 0, 0.0))


def integrate_variable_speed_to_times(samples, v_profile, v_floor=1e-6):
    """
    Time at each sample when moving along `samples` at the speeds in `v_profile`.

    Each gap is crossed at the mean of its two end speeds, dt = 2 ds / (v_a + v_b).
    Speeds below `v_floor` are raised to it so the stop at the goal stays finite.
    """
    v = np.asarray(v_profile, dtype=float)
    s = arc_lengths(samples)
    if len(s) != len(v):
        raise ValueError("samples and v_profile must have the same length")
    if v_floor <= 0:
        raise ValueError("v_floor must be > 0")
    if len(s) == 0:
        return np.zeros(0)
    v = np.maximum(v, v_floor)
    dt = 2.0 * np.diff(s) / (v[:-1] + v[1:])
    return np.cumsum(np.insert(dt, 0, 0.0))


def make_velocity_trajectory(points, times=None):
    """
    Convert resampled Points into a list of tuples [(x, y, v, t), ...].
    When `times` is None they are integrated from the point velocities.
    """
    samples = np.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)
    if times is None:
        times = integrate_variable_speed_to_times(samples, [p.velocity for p in points])
    if len(points) != len(times):
        raise ValueError("points and times must have the same length")
    return [(float(p.x), float(p.y), float(p.velocity), float(t)) for p, t in zip(points, times)]
