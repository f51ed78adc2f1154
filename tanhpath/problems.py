"""
Training sets for tanhpath.

Each problem returns (X, y): float64 arrays of shape (n_samples,) sampled
along straight lines between consecutive anchor points. The final anchor
itself is never emitted.
"""

import numpy as np
from typing import Sequence, Tuple

from . import config as cfg


def interpolate_path(
    anchors: Sequence[Tuple[float, float]],
    points_per_segment: int = cfg.POINTS_PER_SEGMENT,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the polyline through anchors.

    Each segment (p1, p2) contributes points_per_segment points
    p1 + j * (p2 - p1) / points_per_segment for j = 0..points_per_segment-1.

    Args:
        anchors: (x, y) pairs, at least two
        points_per_segment: Samples per segment

    Returns:
        (X, y)
    """
    if len(anchors) < 2:
        raise ValueError(f"Need at least 2 anchors, got {len(anchors)}")
    if points_per_segment < 1:
        raise ValueError(f"points_per_segment must be positive, got {points_per_segment}")

    xs, ys = [], []
    for (x1, y1), (x2, y2) in zip(anchors[:-1], anchors[1:]):
        x_step = (x2 - x1) / points_per_segment
        y_step = (y2 - y1) / points_per_segment
        for j in range(points_per_segment):
            xs.append(x1 + x_step * j)
            ys.append(y1 + y_step * j)

    return np.array(xs), np.array(ys)


def step_path_problem(points_per_segment: int = cfg.POINTS_PER_SEGMENT) -> Tuple[np.ndarray, np.ndarray]:
    """Low, jump to high, drop to the middle (config.STEP_PATH)."""
    return interpolate_path(cfg.STEP_PATH, points_per_segment)


def ramp_path_problem(points_per_segment: int = cfg.POINTS_PER_SEGMENT) -> Tuple[np.ndarray, np.ndarray]:
    """Step path with a sloped rise (config.RAMP_PATH)."""
    return interpolate_path(cfg.RAMP_PATH, points_per_segment)


# Registry for easy lookup
PATHS = {
    'step': step_path_problem,
    'ramp': ramp_path_problem,
}


def get_path_problem(name: str, **kwargs) -> Tuple[np.ndarray, np.ndarray]:
    """Get a path problem by name."""
    if name not in PATHS:
        raise ValueError(f"Unknown path: {name}. Available: {list(PATHS.keys())}")
    return PATHS[name](**kwargs)


def as_rows(values) -> np.ndarray:
    """Reshape (n_samples,) to (n_samples, 1); 2-D data passes through."""
    values = np.asarray(values, dtype=float)
    if values.ndim == 1:
        values = values.reshape(-1, 1)
    return values
