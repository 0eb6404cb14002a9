"""DistributionDragManager 단위 테스트 (Qt 불필요)."""

from __future__ import annotations

import pytest

from src.models.distributable import Client
from src.models.distribution import DistributionConstraints, DistributionState
from src.ui.distribution_drag import DistributionDragManager


def _make_state(n: int = 3, min_share: float = 0.1, push: bool = True) -> DistributionState:
    return DistributionState(
        total_duration=8 * 3600,
        items=[Client(name=f"C{i}") for i in range(n)],
        constraints=DistributionConstraints(min_share=min_share, enable_push=push),
    )


def _shares(state: DistributionState) -> list[float]:
    return [state.shares[item.id] for item in state.items]


class TestStart:
    def test_picks_nearest_separator(self):
        mgr = DistributionDragManager(_make_state())
        assert mgr.start(95, 300) == 0
        assert mgr.is_active

    def test_miss_leaves_gesture_inactive(self):
        mgr = DistributionDragManager(_make_state())
        assert mgr.start(260, 300) is None
        assert not mgr.is_active
        assert mgr.update(150, 300) is None

    def test_custom_hit_distance(self):
        mgr = DistributionDragManager(_make_state(), hit_distance=60)
        assert mgr.start(150, 300) == 0

    def test_index_fixed_for_gesture(self):
        mgr = DistributionDragManager(_make_state())
        mgr.start(95, 300)
        # 두 번째 구분선 근처로 이동해도 활성 인덱스는 그대로
        assert mgr.start(200, 300) == 0


class TestUpdate:
    def test_moves_active_separator(self):
        state = _make_state(push=False)
        mgr = DistributionDragManager(state)
        mgr.start(100, 300)
        shares = mgr.update(150, 300)
        assert shares is state.shares
        assert _shares(state) == pytest.approx([0.5, 1 / 6, 1 / 3])

    def test_zero_width_ignored(self):
        state = _make_state()
        mgr = DistributionDragManager(state)
        mgr.start(100, 300)
        assert mgr.update(150, 0) is None

    def test_replaces_whole_map(self):
        state = _make_state(n=4)
        before = state.shares
        mgr = DistributionDragManager(state)
        mgr.start(100, 400)
        mgr.update(150, 400)
        assert state.shares is not before
        assert set(state.shares) == set(before)


class TestEndCancel:
    def test_end_returns_old_and_new(self):
        state = _make_state()
        original = dict(state.shares)
        mgr = DistributionDragManager(state)
        mgr.start(100, 300)
        mgr.update(150, 300)
        old, new = mgr.end()
        assert old == original
        assert new == state.shares
        assert not mgr.is_active

    def test_end_without_change(self):
        state = _make_state()
        mgr = DistributionDragManager(state)
        mgr.start(100, 300)
        assert mgr.end() is None

    def test_end_without_gesture(self):
        mgr = DistributionDragManager(_make_state())
        assert mgr.end() is None

    def test_cancel_restores(self):
        state = _make_state()
        original = dict(state.shares)
        mgr = DistributionDragManager(state)
        mgr.start(100, 300)
        mgr.update(250, 300)
        mgr.cancel()
        assert state.shares == original
        assert not mgr.is_active


class TestBoundaries:
    def test_uniform(self):
        mgr = DistributionDragManager(_make_state(n=4))
        assert mgr.boundaries() == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
