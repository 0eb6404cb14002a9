"""Distribution state models (pure Python, no Qt dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence

from src.models.distributable import Distributable
from src.utils.config import DEFAULT_ENABLE_PUSH, DEFAULT_MIN_SHARE

# item id -> fraction of the total duration
ShareMap = dict[Hashable, float]


@dataclass(frozen=True, slots=True)
class DistributionConstraints:
    """Minimum share per item and the separator push policy."""

    min_share: float = DEFAULT_MIN_SHARE
    enable_push: bool = DEFAULT_ENABLE_PUSH

    def __post_init__(self) -> None:
        if not 0.0 < self.min_share < 1.0:
            raise ValueError(f"min_share must be in (0, 1), got {self.min_share}")

    def is_feasible(self, item_count: int) -> bool:
        """True if every one of *item_count* items can hold ``min_share`` at once."""
        return self.min_share * item_count <= 1.0


@dataclass(frozen=True, slots=True)
class SeparatorDrag:
    """Move separator *separator_index* to *position* (pointer fraction, un-clamped)."""

    separator_index: int
    position: float

    @property
    def boundary_index(self) -> int:
        return self.separator_index + 1


@dataclass(slots=True)
class DistributionState:
    """Host-owned distribution of ``total_duration`` seconds among ``items``.

    ``shares`` is only ever replaced as a whole; nothing here mutates it per item.
    """

    total_duration: float
    items: list[Distributable] = field(default_factory=list)
    shares: ShareMap = field(default_factory=dict)
    constraints: DistributionConstraints = field(default_factory=DistributionConstraints)

    def __post_init__(self) -> None:
        if self.total_duration <= 0:
            raise ValueError(f"total_duration must be positive, got {self.total_duration}")
        self.items = list(self.items)
        _check_unique_ids(self.items)
        self.ensure_shares()

    @property
    def item_ids(self) -> list[Hashable]:
        return [item.id for item in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def equalize(self) -> None:
        """Give every item the same share (1/n)."""
        if not self.items:
            self.shares = {}
            return
        equal = 1.0 / len(self.items)
        self.shares = {item.id: equal for item in self.items}

    def ensure_shares(self) -> None:
        """Equalize when shares are empty, sized differently, or miss an item."""
        if not self.shares or len(self.shares) != len(self.items):
            self.equalize()
            return
        for item in self.items:
            if item.id not in self.shares:
                self.equalize()
                return

    def set_items(self, items: Sequence[Distributable]) -> None:
        """Replace the item list. Shares survive a reorder; any other change equalizes."""
        items = list(items)
        _check_unique_ids(items)
        self.items = items
        self.ensure_shares()

    def share_of(self, item: Distributable) -> float:
        return self.shares.get(item.id, 0.0)

    def duration_of(self, item: Distributable) -> float:
        """Seconds assigned to *item*."""
        return self.share_of(item) * self.total_duration


def _check_unique_ids(items: Sequence[Distributable]) -> None:
    seen: set[Hashable] = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"Duplicate item id: {item.id!r}")
        seen.add(item.id)
