"""FlowComposer: measures and places boxes into a final flow layout specification."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import pandas as pd

from ..core.box import Box
from ..core.validation import InvalidLayoutError, validate_boxes, validate_spacing
from .alignment import Alignment, DEFAULT_ALIGNMENT, resolve_alignment
from .geometry import ProposedSize, Rect, Size, union_all
from .measurer import FlowMeasurer
from .placer import FlowPlacer
from .row import measure_item, pack_rows, widest_item_width


# Default spacing: None negotiates between each pair of boxes
DEFAULT_SPACING = None


@dataclass
class FlowSpec:
    """Complete flow layout: measured size and one rect per box."""

    size: Size
    bounds: Rect
    placements: list[Rect]
    alignment: Alignment = DEFAULT_ALIGNMENT
    spacing: float | None = DEFAULT_SPACING

    # Row number of each box, index-aligned with placements
    row_indices: list[int] = field(default_factory=list)

    @property
    def n_boxes(self) -> int:
        return len(self.placements)

    @property
    def n_rows(self) -> int:
        return max(self.row_indices) + 1 if self.row_indices else 0

    @property
    def bounding_rect(self) -> Rect:
        """Union of all placements (zero rect when there are none)."""
        return union_all(self.placements)

    def to_dict(self) -> dict:
        """Serialize to a dict for JSON transfer to a host."""
        return {
            "size": self.size.to_dict(),
            "bounds": self.bounds.to_dict(),
            "alignment": self.alignment.value,
            "spacing": self.spacing,
            "nRows": self.n_rows,
            "placements": [rect.to_dict() for rect in self.placements],
            "rowIndices": list(self.row_indices),
        }

    def to_frame(self) -> pd.DataFrame:
        """One row per box: its placement rect and row number."""
        return pd.DataFrame(
            {
                "x": [r.x for r in self.placements],
                "y": [r.y for r in self.placements],
                "width": [r.width for r in self.placements],
                "height": [r.height for r in self.placements],
                "row": self.row_indices,
            },
            index=pd.RangeIndex(self.n_boxes, name="box"),
            dtype=float,
        ).astype({"row": int})


class FlowComposer:
    """Computes the full flow layout for a list of boxes."""

    def __init__(
        self,
        alignment: Alignment | str = DEFAULT_ALIGNMENT,
        spacing: float | None = DEFAULT_SPACING,
    ) -> None:
        self._alignment = resolve_alignment(alignment)
        self._spacing = validate_spacing(spacing)

    @property
    def alignment(self) -> Alignment:
        return self._alignment

    @property
    def spacing(self) -> float | None:
        return self._spacing

    def size_that_fits(self, proposal: ProposedSize, boxes: Sequence[Box]) -> Size:
        boxes = validate_boxes(boxes)
        return FlowMeasurer.size_that_fits(proposal, boxes, self._spacing)

    def place(self, boxes: Sequence[Box], bounds: Rect) -> list[Rect]:
        boxes = validate_boxes(boxes)
        rects = FlowPlacer.place(boxes, bounds, self._spacing, self._alignment)
        if len(rects) != len(boxes):
            raise InvalidLayoutError(
                f"Placed {len(rects)} rects for {len(boxes)} boxes."
            )
        return rects

    def compute(
        self,
        boxes: Sequence[Box],
        proposal: ProposedSize | None = None,
        bounds: Rect | None = None,
    ) -> FlowSpec:
        """Measure the boxes, then place them.

        Parameters
        ----------
        boxes : boxes in input order
        proposal : space offered by the host (default: unspecified)
        bounds : region to place into (default: the measured size at the origin)
        """
        boxes = validate_boxes(boxes)
        proposal = proposal if proposal is not None else ProposedSize.unspecified()
        size = self.size_that_fits(proposal, boxes)
        if bounds is None:
            placed = size
            if not (math.isfinite(size.width) and math.isfinite(size.height)):
                # Unbounded answer: place at the ideal size instead
                placed = self.size_that_fits(ProposedSize.unspecified(), boxes)
            bounds = Rect(0.0, 0.0, placed.width, placed.height)
        placements = self.place(boxes, bounds)
        return FlowSpec(
            size=size,
            bounds=bounds,
            placements=placements,
            alignment=self._alignment,
            spacing=self._spacing,
            row_indices=self._row_indices(boxes, bounds),
        )

    def _row_indices(self, boxes: Sequence[Box], bounds: Rect) -> list[int]:
        items = [measure_item(box, i) for i, box in enumerate(boxes)]
        limit = max(bounds.width, widest_item_width(items))
        indices = [0] * len(items)
        for row_number, row in enumerate(pack_rows(items, limit, self._spacing)):
            for index in row.indices:
                indices[index] = row_number
        return indices
