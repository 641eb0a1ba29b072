"""Tests for handle layout on node sides.

Invariants checked here:

1. Left/right handles stay inside the centered band and alternate
   target/source.
2. Top/bottom handles skip segment 0 and stay within the node width.
3. Sources always stack above targets.
4. Ids are stable and unique per node.
5. Counts below the minimum are rejected rather than silently empty.
"""

from __future__ import annotations

import pytest

from payflow.canvas.model import HandleRole, Node, Side
from payflow.layout.constants import SOURCE_Z_INDEX, TARGET_Z_INDEX
from payflow.layout.handles import (
    HandleLayoutConfig,
    compute_handle_layout,
    find_handle,
    handle_id,
    hit_test,
    node_handles,
)

WIDTH = 186.0
HEIGHT = 70.0


class TestVerticalSides:
    def test_left_three_pairs(self):
        handles = compute_handle_layout(Side.LEFT, 3, WIDTH, HEIGHT)
        assert [h.id for h in handles] == [
            "left-target-1",
            "left-source-1",
            "left-target-2",
            "left-source-2",
            "left-target-3",
            "left-source-3",
        ]

    def test_left_geometry(self):
        handles = compute_handle_layout(Side.LEFT, 3, WIDTH, HEIGHT)
        first, second = handles[0], handles[1]
        # Band of 50px centered in 70px starts at 10; handles nudged up by 5.
        assert first.top == pytest.approx(5.0)
        assert second.top == pytest.approx(10.0 + 50.0 / 6 - 5.0)
        assert first.left == -1.0
        assert (first.width, first.height) == (20.0, 20.0)

    def test_right_inset_from_edge(self):
        handles = compute_handle_layout(Side.RIGHT, 3, WIDTH, HEIGHT)
        assert all(h.left == pytest.approx(WIDTH - 20.0) for h in handles)

    def test_staggered_tops_increase(self):
        handles = compute_handle_layout(Side.RIGHT, 3, WIDTH, HEIGHT)
        tops = [h.top for h in handles]
        assert tops == sorted(tops)
        assert len(set(tops)) == len(tops)

    @pytest.mark.parametrize("count", [2, 3, 5])
    def test_roles_alternate(self, count: int):
        handles = compute_handle_layout(Side.LEFT, count, WIDTH, HEIGHT)
        assert len(handles) == count * 2
        roles = [h.role for h in handles]
        assert roles[0::2] == [HandleRole.TARGET] * count
        assert roles[1::2] == [HandleRole.SOURCE] * count

    def test_band_follows_config(self):
        config = HandleLayoutConfig(vertical_band=30.0)
        handles = compute_handle_layout(Side.LEFT, 3, WIDTH, HEIGHT, config)
        assert handles[0].top == pytest.approx((HEIGHT - 30.0) / 2 - 5.0)

    @pytest.mark.parametrize("side", [Side.LEFT, Side.RIGHT])
    def test_single_pair_is_one_enlarged_hotspot(self, side: Side):
        target, source = compute_handle_layout(side, 1, WIDTH, HEIGHT)
        assert target.role == HandleRole.TARGET
        assert source.role == HandleRole.SOURCE
        assert (target.top, target.left, target.width, target.height) == (
            source.top,
            source.left,
            source.width,
            source.height,
        )
        assert source.height == 50.0
        assert source.width > 20.0
        assert source.z_index > target.z_index
        assert 0.0 <= source.left + source.width <= WIDTH

    def test_zero_pairs_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            compute_handle_layout(Side.LEFT, 0, WIDTH, HEIGHT)


class TestHorizontalSides:
    def test_top_skips_first_segment(self):
        handles = compute_handle_layout(Side.TOP, 10, WIDTH, HEIGHT)
        assert len(handles) == 18
        assert handles[0].left == pytest.approx(WIDTH / 10)
        assert handles[0].id == "top-target-1"
        assert handles[-1].id == "top-source-9"

    def test_pairs_share_rectangle(self):
        handles = compute_handle_layout(Side.BOTTOM, 10, WIDTH, HEIGHT)
        for target, source in zip(handles[0::2], handles[1::2]):
            assert target.role == HandleRole.TARGET
            assert source.role == HandleRole.SOURCE
            assert target.index == source.index
            assert (target.left, target.top, target.width) == (
                source.left,
                source.top,
                source.width,
            )

    def test_last_segment_narrowed_and_inset(self):
        handles = compute_handle_layout(Side.TOP, 10, WIDTH, HEIGHT)
        last = handles[-1]
        assert last.width == 10.0
        assert last.left == pytest.approx(WIDTH * 9 / 10 - 10.0)
        assert handles[0].width == 20.0

    @pytest.mark.parametrize("count", [2, 3, 10, 20])
    @pytest.mark.parametrize("side", [Side.TOP, Side.BOTTOM])
    def test_within_node_width(self, side: Side, count: int):
        for h in compute_handle_layout(side, count, WIDTH, HEIGHT):
            assert h.left >= 0.0
            assert h.left + h.width <= WIDTH

    def test_top_and_bottom_rows(self):
        top = compute_handle_layout(Side.TOP, 4, WIDTH, HEIGHT)
        bottom = compute_handle_layout(Side.BOTTOM, 4, WIDTH, HEIGHT)
        assert all(h.top == -3.0 for h in top)
        assert all(h.top == pytest.approx(HEIGHT - 20.0 + 3.0) for h in bottom)

    @pytest.mark.parametrize("count", [0, 1])
    def test_count_below_two_rejected(self, count: int):
        with pytest.raises(ValueError, match="at least 2"):
            compute_handle_layout(Side.TOP, count, WIDTH, HEIGHT)


class TestCommon:
    def test_unknown_side_rejected(self):
        with pytest.raises(ValueError, match="Unknown side"):
            compute_handle_layout("middle", 3, WIDTH, HEIGHT)

    def test_side_names_accepted(self):
        assert compute_handle_layout("right", 3, WIDTH, HEIGHT)[1].id == "right-source-1"

    def test_z_order(self):
        for h in node_handles(WIDTH, HEIGHT):
            expected = SOURCE_Z_INDEX if h.role == HandleRole.SOURCE else TARGET_Z_INDEX
            assert h.z_index == expected
        assert SOURCE_Z_INDEX > TARGET_Z_INDEX

    def test_node_handles_default_counts(self):
        handles = node_handles(WIDTH, HEIGHT)
        assert len(handles) == 6 + 6 + 18 + 18
        ids = [h.id for h in handles]
        assert len(ids) == len(set(ids))

    def test_node_handles_custom_counts(self):
        handles = node_handles(WIDTH, HEIGHT, {Side.RIGHT: 1, Side.TOP: 2})
        assert [h.id for h in handles] == [
            "right-target-1",
            "right-source-1",
            "top-target-1",
            "top-source-1",
        ]

    def test_layout_is_pure(self):
        assert node_handles(WIDTH, HEIGHT) == node_handles(WIDTH, HEIGHT)

    def test_handle_id_format(self):
        assert handle_id(Side.RIGHT, HandleRole.SOURCE, 1) == "right-source-1"

    def test_find_handle(self):
        handles = node_handles(WIDTH, HEIGHT)
        assert find_handle(handles, "left-target-2").side == Side.LEFT
        assert find_handle(handles, "left-target-9") is None
        assert find_handle(handles, None) is None

    def test_hit_test_prefers_source(self):
        """Where a source and target overlap, the source wins."""
        handles = compute_handle_layout(Side.TOP, 10, WIDTH, HEIGHT)
        hit = hit_test(handles, 20.0, 0.0)
        assert hit is not None
        assert hit.id == "top-source-1"

    def test_hit_test_miss(self):
        handles = node_handles(WIDTH, HEIGHT)
        assert hit_test(handles, WIDTH / 2, HEIGHT / 2) is None


class TestAnchor:
    def test_right_anchor_on_outer_edge(self):
        node = Node(id="n", x=100, y=200)
        h = find_handle(node_handles(node.width, node.height), "right-source-1")
        assert h.anchor(node) == pytest.approx(
            (100 + h.left + h.width, 200 + h.top + h.height / 2)
        )

    def test_left_anchor(self):
        node = Node(id="n", x=100, y=200)
        h = find_handle(node_handles(node.width, node.height), "left-target-1")
        assert h.anchor(node) == pytest.approx((99.0, 200 + 5.0 + 10.0))

    def test_top_and_bottom_anchor(self):
        node = Node(id="n", x=0, y=0)
        handles = node_handles(node.width, node.height)
        top = find_handle(handles, "top-target-1")
        bottom = find_handle(handles, "bottom-target-1")
        assert top.anchor(node) == pytest.approx((top.left + top.width / 2, -3.0))
        assert bottom.anchor(node) == pytest.approx(
            (bottom.left + bottom.width / 2, bottom.top + bottom.height)
        )
