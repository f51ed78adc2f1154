"""
Metrics for evaluating tanhpath networks.
"""

import numpy as np
from typing import List, Optional

from . import config as cfg
from .networks import Network
from .problems import as_rows


def mse(net: Network, X: np.ndarray, y: np.ndarray) -> float:
    """Compute Mean Squared Error over the dataset, one sample at a time."""
    inputs, targets = as_rows(X), as_rows(y)
    errors = [np.mean((net.predict(x) - t) ** 2) for x, t in zip(inputs, targets)]
    return float(np.mean(errors))


def saturation(net: Network, X: np.ndarray, threshold: float = cfg.SATURATION_THRESHOLD) -> float:
    """
    Compute saturation ratio (% of hidden activations with |activation| > threshold).

    Args:
        net: Network to evaluate
        X: Input data
        threshold: Saturation threshold (default 0.95)

    Returns:
        Fraction of hidden activations that are saturated, 0.0 without hidden layers
    """
    if len(net.layer_sizes) < 3:
        return 0.0

    saturated = 0
    total = 0
    for x in as_rows(X):
        for layer in net.forward(x)[1:-1]:
            saturated += int((np.abs(layer) > threshold).sum())
            total += layer.size
    return saturated / total


def format_table(rows: List[list], headers: Optional[List[str]] = None) -> str:
    """
    Format rows as an aligned text table.

    Args:
        rows: List of row cells (converted with str())
        headers: Optional column headers

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    if headers is None:
        headers = ['Id', 'Layers', 'MSE', 'Saturation']

    cells = [[str(cell) for cell in row] for row in rows]

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    lines = []
    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    lines.append(header_line)
    lines.append("-" * len(header_line))

    for row in cells:
        lines.append(" | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)))

    return "\n".join(lines)
