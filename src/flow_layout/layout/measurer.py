"""FlowMeasurer: bounding size of a packed flow layout."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..core.box import Box
from .geometry import ProposedSize, Size
from .row import Row, RowItem, measure_item, pack_rows, widest_item_width

log = logging.getLogger("flow_layout.measurer")


def natural_width(items: Sequence[RowItem], spacing: float | None) -> float:
    """Width of all items on a single unwrapped line."""
    return Row(spacing=spacing, items=list(items)).minimum_width()


def packing_limit(
    items: Sequence[RowItem],
    proposed_width: float | None,
    spacing: float | None,
) -> float:
    """Width at which rows wrap.

    An unspecified or unbounded proposal packs everything on one line.
    The limit never drops below the widest box so every box fits a row.
    """
    if proposed_width is None or math.isinf(proposed_width):
        limit = natural_width(items, spacing)
    else:
        limit = proposed_width
    return max(limit, widest_item_width(items))


def stack_height(rows: Sequence[Row]) -> float:
    """Total height of rows stacked with their inter-row spacing."""
    height = 0.0
    previous = None
    for row in rows:
        if previous is not None:
            height += row.vertical_spacing_to(previous)
        height += row.max_height()
        previous = row
    return height


class FlowMeasurer:
    """Computes the minimal bounding size of a flow layout."""

    @staticmethod
    def size_that_fits(
        proposal: ProposedSize,
        boxes: Sequence[Box],
        spacing: float | None = None,
    ) -> Size:
        """Measure the packed layout.

        Parameters
        ----------
        proposal : space offered by the host. Only the width drives
                   wrapping; both dimensions unbounded asks for an
                   unbounded answer.
        boxes : boxes in input order
        spacing : fixed spacing, or None to negotiate per pair
        """
        if not boxes:
            return Size.zero()
        if proposal.is_unbounded:
            return Size(math.inf, math.inf)

        items = [measure_item(box, i) for i, box in enumerate(boxes)]
        limit = packing_limit(items, proposal.width, spacing)
        rows = pack_rows(items, limit, spacing)

        width = max(row.minimum_width() for row in rows)
        height = stack_height(rows)
        log.debug(
            "Measured %d boxes into %d rows: %.3f x %.3f (limit %.3f)",
            len(items), len(rows), width, height, limit,
        )
        return Size(width, height)
