"""Property checks over random inputs: measuring and placing must agree."""

import numpy as np
import pytest

from flow_layout import (
    FlowComposer,
    ProposedSize,
    Rect,
    SizedBox,
    ViewSpacing,
    measure,
    place,
    union_all,
)


SEEDS = range(25)
SPACINGS = [None, 0.0, 7.5, 250.0]
PROPOSED_WIDTH = 393.0
TOLERANCE = 1e-7


def random_case(seed: int):
    rng = np.random.default_rng(seed)
    n = int(rng.integers(0, 30))
    return [
        SizedBox(
            float(rng.uniform(0, 410)),
            float(rng.uniform(0, 1000)),
            ViewSpacing(float(rng.uniform(0, 20)), float(rng.uniform(0, 20))),
        )
        for _ in range(n)
    ]


@pytest.mark.parametrize("spacing", SPACINGS, ids=lambda s: f"spacing={s}")
@pytest.mark.parametrize("seed", SEEDS)
class TestMeasureMatchesPlacement:
    def test_bounding_box_equals_measured_size(self, seed, spacing, alignment):
        boxes = random_case(seed)
        size = measure(boxes, PROPOSED_WIDTH, spacing, alignment)
        rects = place(boxes, Rect(0, 0, size.width, size.height), spacing, alignment)
        assert len(rects) == len(boxes)
        if not boxes:
            assert (size.width, size.height) == (0, 0)
            return
        bounding = union_all(rects)
        assert (bounding.x, bounding.y) == pytest.approx((0, 0), abs=TOLERANCE)
        assert (bounding.width, bounding.height) == pytest.approx(
            (size.width, size.height), abs=TOLERANCE
        )

    def test_rows_stay_within_bounds(self, seed, spacing, alignment):
        boxes = random_case(seed)
        spec = FlowComposer(alignment, spacing).compute(
            boxes, ProposedSize(width=PROPOSED_WIDTH)
        )
        for row in range(spec.n_rows):
            members = [r for r, i in zip(spec.placements, spec.row_indices) if i == row]
            left = min(r.x for r in members)
            right = max(r.right for r in members)
            if len(members) > 1:
                assert right - left <= spec.bounds.width + TOLERANCE
            assert left >= spec.bounds.x - TOLERANCE
            assert right <= spec.bounds.right + TOLERANCE
            # left edges advance within a row
            xs = [r.x for r in members]
            assert xs == sorted(xs)


@pytest.mark.parametrize("seed", SEEDS)
def test_measure_is_idempotent(seed, alignment):
    boxes = random_case(seed)
    assert measure(boxes, PROPOSED_WIDTH, None, alignment) == measure(
        boxes, PROPOSED_WIDTH, None, alignment
    )


@pytest.mark.parametrize("seed", SEEDS)
def test_rows_never_exceed_proposal(seed):
    boxes = random_case(seed)
    spec = FlowComposer(spacing=7.5).compute(boxes, ProposedSize(width=PROPOSED_WIDTH))
    limit = max([PROPOSED_WIDTH] + [box.width for box in boxes])
    for row in range(spec.n_rows):
        members = [r for r, i in zip(spec.placements, spec.row_indices) if i == row]
        width = max(r.right for r in members) - min(r.x for r in members)
        if len(members) > 1:
            assert width <= limit + TOLERANCE
