"""DistributionDragManager: 분배 슬라이더의 드래그 제스처 상태를 캡슐화.

TimeDistributionSlider는 마우스 이벤트만 받아 이 매니저에 위임한다.
Qt에 의존하지 않으므로 위젯 없이도 테스트할 수 있다.
"""

from __future__ import annotations

from src.models.distribution import DistributionState, SeparatorDrag, ShareMap
from src.services.boundary_model import to_boundaries
from src.services.partition_updater import apply_drag
from src.services.separator_locator import locate_separator
from src.services.share_normalizer import ordered_shares
from src.utils.config import SEPARATOR_HIT_PX


class DistributionDragManager:
    """Holds the active separator for one gesture and replaces ``state.shares`` on each move."""

    def __init__(self, state: DistributionState, hit_distance: float = SEPARATOR_HIT_PX) -> None:
        self.state = state
        self.hit_distance = hit_distance

        # ---- 제스처 상태 ----
        self.active_index: int | None = None
        self.orig_shares: ShareMap = {}

    @property
    def is_active(self) -> bool:
        return self.active_index is not None

    def boundaries(self) -> list[float]:
        """Current cut points of the state, for hit testing and painting."""
        return to_boundaries(ordered_shares(self.state.items, self.state.shares))

    # ================================================================
    # 제스처
    # ================================================================

    def start(self, x: float, width: float) -> int | None:
        """Pick the separator under *x*. It stays fixed until ``end()`` or ``cancel()``."""
        if self.active_index is None:
            self.active_index = locate_separator(x, width, self.boundaries(), self.hit_distance)
            self.orig_shares = dict(self.state.shares)
        return self.active_index

    def update(self, x: float, width: float) -> ShareMap | None:
        """Move the active separator to *x*. Returns the new shares, or None without a gesture."""
        if self.active_index is None or width <= 0:
            return None
        drag = SeparatorDrag(separator_index=self.active_index, position=x / width)
        self.state.shares = apply_drag(self.state, drag)
        return self.state.shares

    def end(self) -> tuple[ShareMap, ShareMap] | None:
        """Finish the gesture. Returns ``(old, new)`` shares if the gesture changed anything."""
        was_active = self.active_index is not None
        old = self.orig_shares
        self._reset()
        if not was_active or old == self.state.shares:
            return None
        return old, dict(self.state.shares)

    def cancel(self) -> None:
        """Abort the gesture and put the shares back."""
        if self.active_index is not None:
            self.state.shares = self.orig_shares
        self._reset()

    def _reset(self) -> None:
        self.active_index = None
        self.orig_shares = {}
