"""Derive a valid share map from arbitrary, possibly incomplete, input."""

from __future__ import annotations

from typing import Hashable, Mapping, Sequence

from src.models.distributable import Distributable
from src.models.distribution import ShareMap


def uniform_shares(items: Sequence[Distributable]) -> ShareMap:
    """Same share (1/n) for every item. Empty for no items."""
    if not items:
        return {}
    equal = 1.0 / len(items)
    return {item.id: equal for item in items}


def normalize(items: Sequence[Distributable], raw: Mapping[Hashable, float] | None) -> ShareMap:
    """Scale the raw values of *items* so they sum to 1.

    Missing items count as 0. When nothing positive remains the result falls
    back to a uniform distribution.
    """
    raw = raw or {}
    values = [raw.get(item.id, 0.0) for item in items]
    total = sum(values)
    if total <= 0:
        return uniform_shares(items)
    return {item.id: value / total for item, value in zip(items, values)}


def ordered_shares(items: Sequence[Distributable], raw: Mapping[Hashable, float] | None) -> list[float]:
    """Normalized shares as a list in item order."""
    shares = normalize(items, raw)
    return [shares[item.id] for item in items]
