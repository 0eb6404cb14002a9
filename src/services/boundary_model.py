"""Conversions between per-item shares and cumulative boundaries in [0, 1].

For N shares the boundary array has N+1 entries: ``b[0] == 0``, ``b[N] == 1``
and ``b[i] - b[i-1]`` is the share of item ``i-1``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def to_boundaries(shares: Sequence[float]) -> list[float]:
    """Cumulative cut points for *shares*, with both ends pinned.

    Example:
        >>> to_boundaries([0.25, 0.25, 0.5])
        [0.0, 0.25, 0.5, 1.0]
    """
    bounds = np.zeros(len(shares) + 1, dtype=np.float64)
    if len(shares) == 0:
        return bounds.tolist()
    bounds[1:] = np.cumsum(np.asarray(shares, dtype=np.float64))
    bounds[-1] = 1.0
    return bounds.tolist()


def to_shares(boundaries: Sequence[float]) -> list[float]:
    """Consecutive differences of *boundaries* (one share per item)."""
    if len(boundaries) < 2:
        return []
    return np.diff(np.asarray(boundaries, dtype=np.float64)).tolist()
