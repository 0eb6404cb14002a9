"""
Service converting a separator drag into a new share distribution.
"""
from __future__ import annotations

import logging
from typing import Hashable, Mapping, Sequence

from src.models.distributable import Distributable
from src.models.distribution import DistributionConstraints, DistributionState, SeparatorDrag, ShareMap
from src.services.boundary_model import to_boundaries, to_shares
from src.services.share_normalizer import ordered_shares
from src.utils.config import SHARE_SUM_TOLERANCE

logger = logging.getLogger(__name__)


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


class PartitionUpdater:
    """
    Moves one boundary of a partition of [0, 1] while keeping every item at or
    above the minimum share.

    Two policies:
      - simple: only the two items next to the separator change, and the
        separator stops at their minimum.
      - push: the separator moves freely and cascades neighbouring separators
        out of its way, until the items beyond them reach their minimum too.

    Every call returns a new ShareMap holding all items; the input is never
    mutated. When the drag cannot be applied the result equals the input.
    """

    @staticmethod
    def apply(
        items: Sequence[Distributable],
        shares: Mapping[Hashable, float],
        drag: SeparatorDrag,
        constraints: DistributionConstraints,
    ) -> ShareMap:
        """
        Apply a separator drag.

        Args:
            items: Items in display order.
            shares: Current share map (need not be normalized).
            drag: Separator index and the pointer position as a fraction of the bar.
            constraints: Minimum share and push policy.

        Returns:
            The updated share map, or an unchanged copy of *shares* for a no-op.
        """
        n = len(items)
        if n < 2:
            return dict(shares)
        if not 0 <= drag.separator_index <= n - 2:
            logger.debug("Separator %d out of range for %d items", drag.separator_index, n)
            return dict(shares)
        if not constraints.is_feasible(n):
            logger.debug(
                "min_share %.4f infeasible for %d items, drag ignored", constraints.min_share, n
            )
            return dict(shares)

        bounds = to_boundaries(ordered_shares(items, shares))
        if constraints.enable_push:
            bounds = PartitionUpdater.push_boundaries(
                bounds, drag.boundary_index, drag.position, constraints.min_share
            )
            new_shares = PartitionUpdater._compensate(to_shares(bounds))
        else:
            new_shares = PartitionUpdater.clamp_shares(
                to_shares(bounds), bounds, drag.separator_index, drag.position, constraints.min_share
            )

        return {item.id: max(0.0, share) for item, share in zip(items, new_shares)}

    @staticmethod
    def clamp_shares(
        shares: list[float],
        bounds: Sequence[float],
        separator_index: int,
        position: float,
        min_share: float,
    ) -> list[float]:
        """Move only the separator between items *separator_index* and *separator_index* + 1."""
        left_fixed = bounds[separator_index]
        right_fixed = bounds[separator_index + 2]
        lo = max(0.0, left_fixed + min_share)
        hi = min(1.0, right_fixed - min_share)
        if lo > hi:
            # Neighbours cannot both hold min_share; settle in the middle of the collapsed range.
            target = (lo + hi) / 2
        else:
            target = _clamp(position, lo, hi)

        result = list(shares)
        result[separator_index] = target - left_fixed
        result[separator_index + 1] = right_fixed - target
        return result

    @staticmethod
    def push_boundaries(
        bounds: Sequence[float],
        boundary_index: int,
        position: float,
        min_share: float,
    ) -> list[float]:
        """
        Move boundary *boundary_index* towards *position*, pushing neighbours.

        Alternates a leftward and a rightward sweep that restore the minimum
        gap outward from the dragged boundary, then re-anchors the dragged
        boundary between its (possibly moved) neighbours. Stops when a pass
        writes nothing new, or after ``2n`` passes.

        Returns:
            The new boundary list (``n + 1`` entries, ends pinned at 0 and 1).
        """
        b = list(bounds)
        n = len(b) - 1
        bi = boundary_index
        target = _clamp(position, 0.0, 1.0)
        b[bi] = target

        max_passes = 2 * n
        for _ in range(max_passes):
            changed = False

            # Leftward sweep
            for i in range(bi, 0, -1):
                if b[i] - b[i - 1] < min_share:
                    pushed = b[i] - min_share
                    if b[i - 1] != pushed:
                        b[i - 1] = pushed
                        changed = True
            if b[0] != 0.0:
                b[0] = 0.0
                changed = True

            # Rightward sweep
            for i in range(bi, n):
                if b[i + 1] - b[i] < min_share:
                    pushed = b[i] + min_share
                    if b[i + 1] != pushed:
                        b[i + 1] = pushed
                        changed = True
            if b[n] != 1.0:
                b[n] = 1.0
                changed = True

            # Re-anchor the dragged boundary between its neighbours
            min_possible = b[bi - 1] + min_share if bi > 0 else 0.0
            max_possible = b[bi + 1] - min_share if bi < n else 1.0
            if target < min_possible:
                target = min_possible
                changed = True
            elif target > max_possible:
                target = max_possible
                changed = True
            if b[bi] != target:
                b[bi] = target
                changed = True

            if not changed:
                return b

        logger.debug(
            "Push sweep hit %d passes at boundary %d, settling from the pinned ends",
            max_passes, bi,
        )
        return PartitionUpdater._settle(b, bi, min_share)

    @staticmethod
    def _settle(b: list[float], bi: int, min_share: float) -> list[float]:
        """Clamp boundary *bi* into the range the pinned ends allow and rebuild the gaps.

        Used when the sweeps keep re-pinning an end they pushed past. The
        dragged boundary keeps ``bi`` items to its left and ``n - bi`` to its
        right, so it must stay within ``[bi * min, 1 - (n - bi) * min]``.
        """
        n = len(b) - 1
        b[0] = 0.0
        b[n] = 1.0
        lo = b[0] + bi * min_share
        hi = b[n] - (n - bi) * min_share
        b[bi] = _clamp(b[bi], lo, hi) if lo <= hi else (lo + hi) / 2

        # Walk inward from the pinned ends, then outward from the dragged boundary.
        for i in range(1, bi):
            b[i] = max(b[i], b[i - 1] + min_share)
        for i in range(n - 1, bi, -1):
            b[i] = min(b[i], b[i + 1] - min_share)
        for i in range(bi, 1, -1):
            b[i - 1] = min(b[i - 1], b[i] - min_share)
        for i in range(bi, n - 1):
            b[i + 1] = max(b[i + 1], b[i] + min_share)
        return b

    @staticmethod
    def _compensate(shares: list[float]) -> list[float]:
        """Put any floating-point residual above tolerance on the last share."""
        total = sum(shares)
        if shares and total != 0 and abs(total - 1.0) > SHARE_SUM_TOLERANCE:
            shares[-1] += 1.0 - total
        return shares


def apply_drag(state: DistributionState, drag: SeparatorDrag) -> ShareMap:
    """Pure transition ``(state.shares, drag) -> new shares`` for *state*."""
    return PartitionUpdater.apply(state.items, state.shares, drag, state.constraints)
