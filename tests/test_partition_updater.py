"""Tests for PartitionUpdater (simple clamp and push cascade)."""

from __future__ import annotations

import random

import pytest

from src.models.distributable import Client
from src.models.distribution import DistributionConstraints, DistributionState, SeparatorDrag
from src.services.partition_updater import PartitionUpdater, apply_drag


# ── Helpers ──────────────────────────────────────────────────────────────────

def _make_clients(n: int) -> list[Client]:
    return [Client(name=f"C{i}") for i in range(n)]


def _uniform(items) -> dict:
    return {item.id: 1.0 / len(items) for item in items}


def _shares_list(items, shares) -> list[float]:
    return [shares[item.id] for item in items]


def _drag(items, shares, sep, pos, min_share, push):
    return PartitionUpdater.apply(
        items, shares, SeparatorDrag(sep, pos), DistributionConstraints(min_share, push)
    )


# ── Simple mode ──────────────────────────────────────────────────────────────

class TestSimpleMode:
    def test_drag_first_separator(self):
        items = _make_clients(3)
        result = _drag(items, _uniform(items), 0, 0.5, 0.1, False)
        assert _shares_list(items, result) == pytest.approx([0.5, 1 / 6, 1 / 3])

    def test_clamps_at_right_neighbour_minimum(self):
        items = _make_clients(3)
        result = _drag(items, _uniform(items), 0, 0.9, 0.1, False)
        assert _shares_list(items, result) == pytest.approx([2 / 3 - 0.1, 0.1, 1 / 3])

    def test_clamps_at_left_neighbour_minimum(self):
        items = _make_clients(3)
        result = _drag(items, _uniform(items), 1, -5.0, 0.1, False)
        assert _shares_list(items, result) == pytest.approx([1 / 3, 0.1, 2 / 3 - 0.1])

    def test_other_items_untouched(self):
        items = _make_clients(4)
        result = _drag(items, _uniform(items), 1, 0.6, 0.05, False)
        shares = _shares_list(items, result)
        assert shares[0] == pytest.approx(0.25)
        assert shares[3] == pytest.approx(0.25)
        assert shares[1] == pytest.approx(0.35)
        assert shares[2] == pytest.approx(0.15)

    def test_degenerate_range_uses_midpoint(self):
        items = _make_clients(4)
        # 구분선 1의 이웃 합이 0.1 → 둘 다 0.1 불가 (lo = 0.6, hi = 0.5)
        shares = {item.id: s for item, s in zip(items, [0.5, 0.08, 0.02, 0.4])}
        result = _drag(items, shares, 1, 0.9, 0.1, False)
        # 현재 위치 0.58이 아니라 붕괴된 범위의 중간 0.55로 이동
        assert _shares_list(items, result) == pytest.approx([0.5, 0.05, 0.05, 0.4])

    def test_normalizes_input(self):
        items = _make_clients(2)
        shares = {items[0].id: 2.0, items[1].id: 2.0}
        result = _drag(items, shares, 0, 0.3, 0.1, False)
        assert _shares_list(items, result) == pytest.approx([0.3, 0.7])


# ── Push mode ────────────────────────────────────────────────────────────────

class TestPushMode:
    def test_cascade_pushes_right_neighbour(self):
        items = _make_clients(4)
        result = _drag(items, _uniform(items), 1, 0.8, 0.1, True)
        shares = _shares_list(items, result)
        assert shares == pytest.approx([0.25, 0.55, 0.1, 0.1])
        assert sum(shares) == pytest.approx(1.0, abs=1e-12)

    def test_cascade_pushes_left_neighbours(self):
        items = _make_clients(4)
        result = _drag(items, _uniform(items), 2, 0.45, 0.1, True)
        # boundary 3 → 0.45 pushes boundary 2 from 0.5 to 0.35
        assert _shares_list(items, result) == pytest.approx([0.25, 0.1, 0.1, 0.55])

    def test_cascade_stops_at_left_end(self):
        items = _make_clients(4)
        result = _drag(items, _uniform(items), 2, 0.25, 0.1, True)
        # 세 항목이 모두 최소값 → 구분선은 0.3에서 멈춤
        assert _shares_list(items, result) == pytest.approx([0.1, 0.1, 0.1, 0.7])

    def test_move_without_conflict_changes_two_items(self):
        items = _make_clients(4)
        result = _drag(items, _uniform(items), 1, 0.55, 0.1, True)
        assert _shares_list(items, result) == pytest.approx([0.25, 0.3, 0.2, 0.25])

    def test_first_separator_gives_way_at_left_edge(self):
        items = _make_clients(3)
        result = _drag(items, _uniform(items), 0, 0.02, 0.1, True)
        assert _shares_list(items, result) == pytest.approx([0.1, 2 / 3 - 0.1, 1 / 3])

    def test_last_separator_gives_way_at_right_edge(self):
        items = _make_clients(3)
        result = _drag(items, _uniform(items), 1, 1.5, 0.1, True)
        assert _shares_list(items, result) == pytest.approx([1 / 3, 2 / 3 - 0.1, 0.1])

    def test_inner_separator_past_edge_is_clamped(self):
        # 중간 구분선을 왼쪽 끝 너머로: 반복 상한 도달 후 가능한 범위로 고정
        items = _make_clients(4)
        result = _drag(items, _uniform(items), 1, 0.05, 0.1, True)
        assert _shares_list(items, result) == pytest.approx([0.1, 0.1, 0.55, 0.25])

    def test_tight_minimum_full_cascade(self):
        items = _make_clients(5)
        result = _drag(items, _uniform(items), 2, 0.0, 0.2, True)
        assert _shares_list(items, result) == pytest.approx([0.2] * 5)

    def test_repairs_undersized_item(self):
        items = _make_clients(3)
        shares = {items[0].id: 0.02, items[1].id: 0.49, items[2].id: 0.49}
        result = _drag(items, shares, 1, 0.5, 0.1, True)
        values = _shares_list(items, result)
        assert min(values) >= 0.1 - 1e-9
        assert sum(values) == pytest.approx(1.0)

    def test_returns_every_item(self):
        items = _make_clients(6)
        result = _drag(items, _uniform(items), 3, 0.1, 0.05, True)
        assert set(result) == {item.id for item in items}


# ── No-op cases ──────────────────────────────────────────────────────────────

class TestNoOp:
    @pytest.mark.parametrize("push", [True, False])
    def test_infeasible_minimum_leaves_shares(self, push):
        items = _make_clients(5)
        before = {item.id: s for item, s in zip(items, [0.1, 0.2, 0.3, 0.15, 0.25])}
        result = _drag(items, before, 2, 0.9, 0.25, push)
        assert result == before
        assert result is not before

    def test_single_item(self):
        items = _make_clients(1)
        before = {items[0].id: 1.0}
        assert _drag(items, before, 0, 0.5, 0.1, True) == before

    def test_no_items(self):
        assert _drag([], {}, 0, 0.5, 0.1, True) == {}

    @pytest.mark.parametrize("sep", [-1, 2, 10])
    def test_separator_out_of_range(self, sep):
        items = _make_clients(3)
        before = _uniform(items)
        assert _drag(items, before, sep, 0.5, 0.1, True) == before

    def test_input_not_mutated(self):
        items = _make_clients(4)
        before = _uniform(items)
        snapshot = dict(before)
        _drag(items, before, 1, 0.8, 0.1, True)
        assert before == snapshot


# ── Properties ───────────────────────────────────────────────────────────────

class TestProperties:
    @pytest.mark.parametrize("push", [True, False])
    @pytest.mark.parametrize("seed", range(12))
    def test_sum_and_minimum_hold_over_drag_sequences(self, seed, push):
        rng = random.Random(seed)
        n = rng.randint(1, 50)
        max_min = min(0.2, 1.0 / n)
        min_share = rng.uniform(0.01, max_min) if max_min > 0.01 else max_min
        items = _make_clients(n)
        constraints = DistributionConstraints(min_share, push)
        shares = _uniform(items)

        for _ in range(40):
            if n < 2:
                break
            drag = SeparatorDrag(rng.randint(0, n - 2), rng.uniform(-0.2, 1.2))
            shares = PartitionUpdater.apply(items, shares, drag, constraints)
            values = list(shares.values())
            assert sum(values) == pytest.approx(1.0, abs=1e-4)
            assert min(values) >= min_share - 1e-9

    @pytest.mark.parametrize("push", [True, False])
    @pytest.mark.parametrize("sep,pos", [(0, 0.5), (1, 0.8), (2, 0.05), (3, 1.2), (1, 0.3)])
    def test_same_drag_twice_is_fixed_point(self, push, sep, pos):
        items = _make_clients(5)
        constraints = DistributionConstraints(0.1, push)
        drag = SeparatorDrag(sep, pos)
        once = PartitionUpdater.apply(items, _uniform(items), drag, constraints)
        twice = PartitionUpdater.apply(items, once, drag, constraints)
        assert _shares_list(items, twice) == pytest.approx(_shares_list(items, once), abs=1e-12)


# ── Low-level helpers ────────────────────────────────────────────────────────

class TestPushBoundaries:
    def test_ends_stay_pinned(self):
        bounds = PartitionUpdater.push_boundaries([0.0, 0.25, 0.5, 0.75, 1.0], 3, 0.99, 0.1)
        assert bounds[0] == 0.0
        assert bounds[-1] == 1.0
        assert bounds[3] == pytest.approx(0.9)

    def test_target_is_clamped_to_unit_interval(self):
        bounds = PartitionUpdater.push_boundaries([0.0, 0.5, 1.0], 1, -3.0, 0.1)
        assert bounds == pytest.approx([0.0, 0.1, 1.0])

    def test_non_decreasing(self):
        bounds = PartitionUpdater.push_boundaries([0.0, 0.2, 0.4, 0.6, 0.8, 1.0], 2, 0.97, 0.1)
        assert all(b2 >= b1 for b1, b2 in zip(bounds, bounds[1:]))


class TestApplyDrag:
    def test_uses_state_constraints(self):
        items = _make_clients(3)
        state = DistributionState(
            total_duration=3600, items=items,
            constraints=DistributionConstraints(min_share=0.1, enable_push=False),
        )
        result = apply_drag(state, SeparatorDrag(0, 0.5))
        assert _shares_list(items, result) == pytest.approx([0.5, 1 / 6, 1 / 3])
        # 순수 함수: state는 그대로
        assert state.shares[items[0].id] == pytest.approx(1 / 3)
