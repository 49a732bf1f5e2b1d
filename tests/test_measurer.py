"""Tests for FlowMeasurer."""

import math

import pytest

from flow_layout.core.box import SizedBox, ViewSpacing
from flow_layout.layout.geometry import ProposedSize, Size
from flow_layout.layout.measurer import FlowMeasurer, packing_limit
from flow_layout.layout.row import measure_item


def measure(boxes, width=None, spacing=None):
    return FlowMeasurer.size_that_fits(ProposedSize(width=width), boxes, spacing)


class TestSizeThatFits:
    def test_no_boxes(self):
        assert measure([], width=100, spacing=10) == Size(0, 0)

    def test_wraps_into_two_rows(self, three_boxes):
        # 100 + 10 + 100 = 210 fits in 220; the third box wraps
        assert measure(three_boxes, width=220, spacing=10) == Size(210, 90)

    def test_box_wider_than_proposal(self):
        assert measure([SizedBox(300, 50)], width=100, spacing=7) == Size(300, 50)

    def test_unspecified_width_does_not_wrap(self, three_boxes):
        assert measure(three_boxes, spacing=10) == Size(320, 40)

    def test_infinite_width_does_not_wrap(self, three_boxes):
        assert measure(three_boxes, width=math.inf, spacing=10) == Size(320, 40)

    def test_unbounded_proposal(self, three_boxes):
        size = FlowMeasurer.size_that_fits(ProposedSize.infinity(), three_boxes, 10)
        assert math.isinf(size.width) and math.isinf(size.height)

    def test_negotiated_spacing(self, three_boxes):
        # default preferences: 7 horizontal, 10 vertical
        assert measure(three_boxes, width=210) == Size(207, 90)

    def test_vertical_spacing_between_tallest_boxes(self):
        boxes = [
            SizedBox(100, 40, ViewSpacing(7, 25)),
            SizedBox(100, 10, ViewSpacing(7, 2)),
        ]
        assert measure(boxes, width=150) == Size(100, 75)

    def test_rounding_noise_does_not_wrap(self):
        boxes = [SizedBox(100, 40), SizedBox(100, 40)]
        assert measure(boxes, width=210 - 5e-12, spacing=10) == Size(210, 40)

    def test_mixed_boxes(self, mixed_boxes):
        assert measure(mixed_boxes, width=250, spacing=5) == Size(235, 140)

    def test_malformed_sizes_degrade_to_zero(self):
        boxes = [SizedBox(-5, 10), SizedBox(float("nan"), 20), SizedBox(math.inf, 5)]
        assert measure(boxes, spacing=0) == Size(0, 20)

    def test_idempotent(self, random_boxes):
        boxes = random_boxes(25)
        assert measure(boxes, width=393) == measure(boxes, width=393)


class TestPackingLimit:
    def test_clamped_to_widest_box(self):
        items = [measure_item(SizedBox(w, 1), i) for i, w in enumerate([30, 80])]
        assert packing_limit(items, 50, spacing=0) == 80

    def test_natural_width_when_unspecified(self):
        items = [measure_item(SizedBox(w, 1), i) for i, w in enumerate([30, 80])]
        assert packing_limit(items, None, spacing=5) == 115

    @pytest.mark.parametrize("proposed", [200.0, 1e6])
    def test_proposal_kept_when_wide_enough(self, proposed):
        items = [measure_item(SizedBox(30, 1), 0)]
        assert packing_limit(items, proposed, spacing=0) == proposed
