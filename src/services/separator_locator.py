"""Pixel hit test for the separators of a distribution bar."""

from __future__ import annotations

import math
from typing import Sequence

from src.utils.config import SEPARATOR_HIT_PX


def separator_x(boundaries: Sequence[float], separator_index: int, total_width: float) -> float:
    """Pixel position of separator *separator_index* (boundary ``index + 1``)."""
    return boundaries[separator_index + 1] * total_width


def locate_separator(
    pointer_x: float,
    total_width: float,
    boundaries: Sequence[float],
    max_distance: float = SEPARATOR_HIT_PX,
) -> int | None:
    """Return the separator nearest to *pointer_x*, or None if none is within *max_distance*.

    Ties go to the lowest index. Needs at least two items and a positive width.
    """
    item_count = len(boundaries) - 1
    if item_count < 2 or total_width <= 0:
        return None

    best_index: int | None = None
    best_distance = math.inf
    for index in range(item_count - 1):
        distance = abs(pointer_x - separator_x(boundaries, index, total_width))
        if distance < best_distance:
            best_distance = distance
            best_index = index

    if best_distance <= max_distance:
        return best_index
    return None
