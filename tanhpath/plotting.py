"""
Side-by-side plots of every network's curve against the target path.

One panel per network: target samples as red dots, the current curve in
blue and (optionally) the previous curve in silver so movement between
snapshots is visible. An extra panel can show a closed-form function.
"""

import math
import numpy as np
from typing import Callable, Dict, Optional, Tuple

from matplotlib.figure import Figure

from . import config as cfg


def sample_grid(
    start: float = cfg.GRID_START,
    stop: float = cfg.GRID_STOP,
    step: float = cfg.GRID_STEP,
) -> np.ndarray:
    """x values from start (inclusive) to stop (exclusive)."""
    return np.arange(start, stop, step)


def _style_axes(ax, title: str):
    ax.axhline(0, color='darkgray', linewidth=0.8)
    ax.axvline(0, color='darkgray', linewidth=0.8)
    ax.set_xlim(-1.05, 1.05)
    ax.set_ylim(-1.05, 1.05)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title, fontsize=9)


def plot_registry(
    registry,
    X: np.ndarray,
    y: np.ndarray,
    path=None,
    closed_form: Optional[Callable[[float], float]] = None,
    previous: Optional[Dict[int, np.ndarray]] = None,
    xs: Optional[np.ndarray] = None,
    cols: int = 5,
) -> Tuple[Figure, Dict[int, np.ndarray]]:
    """
    Draw one panel per network.

    Args:
        registry: NetworkRegistry to plot
        X: Target x samples
        y: Target y samples
        path: Save the figure here if given
        closed_form: Extra panel for a plain function of x
        previous: Curves from an earlier call (same xs), drawn in silver
        xs: Sampling grid (default sample_grid())
        cols: Panels per row

    Returns:
        (figure, curves) where curves can be passed back as previous
    """
    if xs is None:
        xs = sample_grid()

    curves = registry.predict_curves(xs)

    n_panels = len(registry) + (1 if closed_form is not None else 0)
    cols = max(1, min(cols, n_panels))
    rows = max(1, math.ceil(n_panels / cols))

    fig = Figure(figsize=(2.2 * cols, 2.4 * rows))
    axes = fig.subplots(rows, cols, squeeze=False).flatten()

    for ax, network in zip(axes, registry):
        ax.scatter(X, y, s=2, color='red')
        if previous and network.id in previous:
            ax.plot(xs, previous[network.id], color='silver', linewidth=1)
        ax.plot(xs, curves[network.id], color='blue', linewidth=1.5)
        _style_axes(ax, network.describe())

    if closed_form is not None:
        ax = axes[len(registry)]
        ax.scatter(X, y, s=2, color='red')
        ax.plot(xs, [closed_form(x) for x in xs], color='blue', linewidth=1.5)
        _style_axes(ax, "closed form")

    for ax in axes[n_panels:]:
        ax.axis('off')

    fig.tight_layout()

    if path is not None:
        fig.savefig(path, dpi=120)

    return fig, curves
