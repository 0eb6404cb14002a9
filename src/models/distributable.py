"""Item identity for time distribution (pure Python, no Qt dependency)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class Distributable(Protocol):
    """Anything that can receive a share of the total duration.

    Only ``id`` takes part in the distribution; ``name`` is shown in the legend.
    """

    @property
    def id(self) -> Hashable: ...

    @property
    def name(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Client:
    """Default distributable item."""

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
