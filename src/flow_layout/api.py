"""Flow: the main user-facing API."""

from __future__ import annotations

from typing import Callable, Sequence

from .core.box import Box
from .layout.alignment import Alignment, DEFAULT_ALIGNMENT
from .layout.composer import DEFAULT_SPACING, FlowComposer, FlowSpec
from .layout.geometry import ProposedSize, Rect, Size


class Flow:
    """Arranges boxes in lines, wrapping at the edge like words in a paragraph.

    Usage::

        import flow_layout as fl

        flow = fl.Flow(alignment="center", spacing=7)
        size = flow.size_that_fits(fl.ProposedSize(width=393), boxes)
        rects = flow.place(boxes, fl.Rect(0, 0, size.width, size.height))

    ``spacing`` is applied between boxes and between rows, never before
    the first or after the last box of a row. With spacing None each
    pair of neighbours negotiates its own distance.
    """

    def __init__(
        self,
        alignment: Alignment | str = DEFAULT_ALIGNMENT,
        spacing: float | None = DEFAULT_SPACING,
    ) -> None:
        self._composer = FlowComposer(alignment=alignment, spacing=spacing)

    @property
    def alignment(self) -> Alignment:
        return self._composer.alignment

    @property
    def spacing(self) -> float | None:
        return self._composer.spacing

    def size_that_fits(self, proposal: ProposedSize, boxes: Sequence[Box]) -> Size:
        """Minimal bounding size of the boxes for a proposal."""
        return self._composer.size_that_fits(proposal, boxes)

    def place(self, boxes: Sequence[Box], bounds: Rect) -> list[Rect]:
        """Placement rects inside bounds, index-aligned with boxes."""
        return self._composer.place(boxes, bounds)

    def compute(
        self,
        boxes: Sequence[Box],
        proposal: ProposedSize | None = None,
        bounds: Rect | None = None,
    ) -> FlowSpec:
        return self._composer.compute(boxes, proposal=proposal, bounds=bounds)

    def place_subviews(
        self,
        bounds: Rect,
        boxes: Sequence[Box],
        apply: Callable[[Box, Rect], None],
    ) -> None:
        """Place boxes and hand each rect back to the host, in input order."""
        boxes = list(boxes)
        for box, rect in zip(boxes, self.place(boxes, bounds)):
            apply(box, rect)

    def __repr__(self) -> str:
        return f"Flow(alignment={self.alignment.value!r}, spacing={self.spacing!r})"


def measure(
    boxes: Sequence[Box],
    proposed_width: float | None = None,
    spacing: float | None = DEFAULT_SPACING,
    alignment: Alignment | str = DEFAULT_ALIGNMENT,
) -> Size:
    """Bounding size of boxes packed at proposed_width (None: no wrapping)."""
    flow = Flow(alignment=alignment, spacing=spacing)
    return flow.size_that_fits(ProposedSize(width=proposed_width), boxes)


def place(
    boxes: Sequence[Box],
    bounds: Rect,
    spacing: float | None = DEFAULT_SPACING,
    alignment: Alignment | str = DEFAULT_ALIGNMENT,
) -> list[Rect]:
    """Placement rects of boxes inside bounds, index-aligned with boxes."""
    return Flow(alignment=alignment, spacing=spacing).place(boxes, bounds)
