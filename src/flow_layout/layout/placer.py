"""FlowPlacer: concrete placement rectangles for a flow layout."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.box import Box
from ..core.validation import InvalidLayoutError
from .alignment import Alignment, DEFAULT_ALIGNMENT, row_offsets, vertical_offset
from .geometry import Point, Rect
from .row import Row, measure_item, pack_rows, widest_item_width

log = logging.getLogger("flow_layout.placer")


class FlowPlacer:
    """Places boxes row by row inside concrete bounds.

    Rows are packed exactly as FlowMeasurer packs them, so placing into
    the measured size reproduces the measured bounding box.
    """

    @staticmethod
    def place_row(
        row: Row,
        bounds: Rect,
        row_top: float,
        alignment: Alignment,
    ) -> list[tuple[int, Rect]]:
        """Place one closed row whose top edge sits at row_top.

        Returns (input index, rect) pairs in row order.
        """
        widths = row.widths()
        offsets = row_offsets(
            widths,
            row.gaps(),
            row_width=row.minimum_width(),
            container_width=bounds.width,
            alignment=alignment,
            spacing=row.average_spacing(),
        )
        row_height = row.max_height()
        placed = []
        for item, dx in zip(row.items, offsets):
            origin = Point(
                float(dx), vertical_offset(alignment, row_height, item.size.height)
            ).offset(dy=row_top)
            rect = Rect.from_origin(origin, item.size).offset(dx=bounds.x)
            placed.append((item.index, rect))
        return placed

    @staticmethod
    def place(
        boxes: Sequence[Box],
        bounds: Rect,
        spacing: float | None = None,
        alignment: Alignment = DEFAULT_ALIGNMENT,
    ) -> list[Rect]:
        """Compute one rect per box, index-aligned with boxes.

        Parameters
        ----------
        boxes : boxes in input order
        bounds : region granted by the host (usually the measured size)
        spacing : fixed spacing, or None to negotiate per pair
        alignment : row alignment policy
        """
        if not boxes:
            return []

        items = [measure_item(box, i) for i, box in enumerate(boxes)]
        limit = max(bounds.width, widest_item_width(items))
        rows = pack_rows(items, limit, spacing)

        rects: list[Rect | None] = [None] * len(items)
        cursor_y = bounds.y
        previous = None
        for row in rows:
            if previous is not None:
                cursor_y += row.vertical_spacing_to(previous)
            for index, rect in FlowPlacer.place_row(row, bounds, cursor_y, alignment):
                if rects[index] is not None:
                    raise InvalidLayoutError(f"Box {index} was placed twice.")
                rects[index] = rect
            cursor_y += row.max_height()
            previous = row

        missing = [i for i, rect in enumerate(rects) if rect is None]
        if missing:
            raise InvalidLayoutError(f"Boxes {missing[:5]} were never placed.")
        log.debug(
            "Placed %d boxes in %d rows within %s (%s)",
            len(items), len(rows), bounds, alignment.value,
        )
        return rects
