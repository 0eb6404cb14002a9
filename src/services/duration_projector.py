"""Project shares onto the total duration for legends and detail views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Mapping, Sequence

from src.models.distributable import Distributable
from src.utils.time_utils import format_duration, format_percent


@dataclass(frozen=True, slots=True)
class LegendEntry:
    """Display data for one item."""

    item: Distributable
    index: int
    share: float
    duration: float  # seconds

    @property
    def label(self) -> str:
        return f"{self.item.name}: {format_duration(self.duration)}"

    @property
    def duration_text(self) -> str:
        return format_duration(self.duration)

    @property
    def percent_text(self) -> str:
        return format_percent(self.share)


def project_durations(
    items: Sequence[Distributable],
    shares: Mapping[Hashable, float],
    total_duration: float,
) -> dict[Hashable, float]:
    """Seconds per item id (``share * total_duration``; a missing share counts as 0)."""
    return {item.id: shares.get(item.id, 0.0) * total_duration for item in items}


def legend_entries(
    items: Sequence[Distributable],
    shares: Mapping[Hashable, float],
    total_duration: float,
) -> list[LegendEntry]:
    durations = project_durations(items, shares, total_duration)
    return [
        LegendEntry(item=item, index=i, share=shares.get(item.id, 0.0), duration=durations[item.id])
        for i, item in enumerate(items)
    ]
