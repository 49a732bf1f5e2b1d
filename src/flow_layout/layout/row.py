"""Row: the run of boxes being packed onto one line of a flow layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from ..core.box import Box
from ..core.validation import sanitize_size
from .geometry import ProposedSize, Size

log = logging.getLogger("flow_layout.row")


# Width sums within this distance of the limit still fit (rounding noise)
OVERFLOW_TOLERANCE = 1e-11


@dataclass(frozen=True)
class RowItem:
    """One box in a row, with its input index and sanitised intrinsic size."""

    index: int
    box: Box
    size: Size


def measure_item(box: Box, index: int) -> RowItem:
    """Query a box's intrinsic size once."""
    size = sanitize_size(box.size_that_fits(ProposedSize.unspecified()), index)
    return RowItem(index=index, box=box, size=size)


@dataclass
class Row:
    """Boxes tentatively assigned to one output line.

    Lives for a single packing pass. With ``spacing`` None the gap
    between two boxes is negotiated from their spacing preferences.
    """

    spacing: float | None = None
    items: list[RowItem] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def indices(self) -> list[int]:
        return [item.index for item in self.items]

    def _gap(self, left: RowItem, right: RowItem) -> float:
        if self.spacing is not None:
            return self.spacing
        return left.box.spacing.distance(right.box.spacing, "horizontal")

    def _minimum_width(self, items: Sequence[RowItem]) -> float:
        if not items:
            return 0.0
        width = items[0].size.width
        for left, right in zip(items, items[1:]):
            width += self._gap(left, right) + right.size.width
        return width

    def gaps(self) -> np.ndarray:
        """Spacing between each pair of consecutive boxes, shape (n - 1,)."""
        return np.array(
            [self._gap(left, right) for left, right in zip(self.items, self.items[1:])],
            dtype=np.float64,
        )

    def widths(self) -> np.ndarray:
        return np.array([item.size.width for item in self.items], dtype=np.float64)

    def minimum_width(self) -> float:
        """Width of the row as composed: box widths plus interior spacing."""
        return self._minimum_width(self.items)

    def minimum_width_if_appending(self, item: RowItem) -> float:
        """Width the row would have with one more box, without appending it."""
        return self._minimum_width(self.items + [item])

    def max_height(self) -> float:
        return max((item.size.height for item in self.items), default=0.0)

    def would_overflow(self, item: RowItem, limit: float) -> bool:
        """True when appending would exceed limit. An empty row takes anything."""
        if not self.items:
            return False
        return self.minimum_width_if_appending(item) - limit > OVERFLOW_TOLERANCE

    def append(self, item: RowItem) -> None:
        self.items.append(item)

    def tallest(self) -> RowItem | None:
        """First box with the row's maximum height."""
        tallest = None
        for item in self.items:
            if tallest is None or item.size.height > tallest.size.height:
                tallest = item
        return tallest

    def vertical_spacing_to(self, previous: Row) -> float:
        """Gap inserted above this row when it follows ``previous``."""
        if self.spacing is not None:
            return self.spacing
        mine, theirs = self.tallest(), previous.tallest()
        if mine is None or theirs is None:
            return 0.0
        return theirs.box.spacing.distance(mine.box.spacing, "vertical")

    def average_spacing(self) -> float:
        """Fixed spacing, or the summed negotiated gaps spread over every box.

        An empty row has no spacing.
        """
        if self.spacing is not None:
            return self.spacing
        if not self.items:
            return 0.0
        return float(self.gaps().sum()) / len(self.items)


def widest_item_width(items: Sequence[RowItem]) -> float:
    return max((item.size.width for item in items), default=0.0)


def pack_rows(
    items: Sequence[RowItem],
    limit: float,
    spacing: float | None = None,
) -> list[Row]:
    """Greedily pack items into rows no wider than limit.

    Rows are contiguous runs in input order. A box wider than the
    limit gets a row of its own.
    """
    rows: list[Row] = []
    row = Row(spacing=spacing)
    for item in items:
        if row.would_overflow(item, limit):
            log.debug(
                "Row %d closed at width %.3f before box %d (limit %.3f)",
                len(rows), row.minimum_width(), item.index, limit,
            )
            rows.append(row)
            row = Row(spacing=spacing)
        row.append(item)
    if row.items:
        rows.append(row)
    return rows
