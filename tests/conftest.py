"""Shared test fixtures for flow-layout."""

import numpy as np
import pytest

from flow_layout.core.box import SizedBox, ViewSpacing
from flow_layout.layout.alignment import Alignment


def _random_boxes(rng: np.random.Generator, n: int) -> list[SizedBox]:
    """n boxes with widths in [0, 410] and heights in [0, 1000]."""
    widths = rng.uniform(0, 410, n)
    heights = rng.uniform(0, 1000, n)
    spacings = rng.uniform(0, 20, (n, 2))
    return [
        SizedBox(float(w), float(h), ViewSpacing(float(sh), float(sv)))
        for w, h, (sh, sv) in zip(widths, heights, spacings)
    ]


@pytest.fixture
def three_boxes():
    """Three 100x40 boxes."""
    return SizedBox.from_sizes([(100, 40)] * 3)


@pytest.fixture
def mixed_boxes():
    """Boxes of varying size, like tags of different lengths."""
    return SizedBox.from_sizes([
        (60, 20), (120, 30), (45, 20), (200, 25), (80, 40), (30, 20), (150, 30),
    ])


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture(params=list(Alignment), ids=lambda a: a.value)
def alignment(request):
    return request.param


@pytest.fixture
def random_boxes(rng):
    """Factory for n random boxes with random spacing preferences."""
    def make(n: int) -> list[SizedBox]:
        return _random_boxes(rng, n)
    return make
