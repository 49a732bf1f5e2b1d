"""Alignment policy: where boxes sit within their row."""

from __future__ import annotations

from enum import Enum

import numpy as np


class Alignment(Enum):
    """Row justification and vertical anchor of a flow layout.

    The policy never changes which boxes share a row; it only moves
    boxes within the width and height their row was given.
    """

    TOP_LEADING = "top_leading"
    TOP_TRAILING = "top_trailing"
    BOTTOM_LEADING = "bottom_leading"
    BOTTOM_TRAILING = "bottom_trailing"
    CENTER = "center"
    CENTER_DISTRIBUTE = "center_distribute"
    CENTER_JUSTIFY = "center_justify"


DEFAULT_ALIGNMENT = Alignment.TOP_LEADING

# Fraction of (row height - box height) added below the row top.
# 0 = top anchor, 1 = bottom anchor, 0.5 = vertically centred
VERTICAL_ANCHORS: dict[Alignment, float] = {
    Alignment.TOP_LEADING: 0.0,
    Alignment.TOP_TRAILING: 0.0,
    Alignment.BOTTOM_LEADING: 1.0,
    Alignment.BOTTOM_TRAILING: 1.0,
    Alignment.CENTER: 0.5,
    Alignment.CENTER_DISTRIBUTE: 0.5,
    Alignment.CENTER_JUSTIFY: 0.5,
}


def resolve_alignment(alignment: Alignment | str) -> Alignment:
    """Convert an alignment name to its enum member."""
    if isinstance(alignment, Alignment):
        return alignment
    try:
        return Alignment(alignment)
    except ValueError:
        valid = ", ".join(f"'{a.value}'" for a in Alignment)
        raise ValueError(
            f"Unknown alignment {alignment!r}. Use one of {valid}."
        ) from None


def horizontal_distribution(
    alignment: Alignment,
    unused_width: float,
    n_boxes: int,
    spacing: float,
) -> tuple[float, float]:
    """Resolve where a row starts and how much each interior gap grows.

    Parameters
    ----------
    alignment : row alignment
    unused_width : container width minus row width, clamped at 0
    n_boxes : number of boxes in the row
    spacing : spacing used by ``center_distribute`` to size the row ends

    Returns (start offset, extra width per interior gap).
    """
    if alignment in (Alignment.TOP_LEADING, Alignment.BOTTOM_LEADING):
        return 0.0, 0.0
    if alignment in (Alignment.TOP_TRAILING, Alignment.BOTTOM_TRAILING):
        return unused_width, 0.0
    if alignment == Alignment.CENTER:
        return unused_width * 0.5, 0.0
    if alignment == Alignment.CENTER_DISTRIBUTE:
        if unused_width > spacing * 2:
            extra = (unused_width - spacing * 2) / (n_boxes + 1)
            return spacing + extra, extra
        return unused_width * 0.5, 0.0
    if alignment == Alignment.CENTER_JUSTIFY:
        # A single box has no interior gap to stretch: keep it flush start
        if n_boxes < 2:
            return 0.0, 0.0
        return 0.0, unused_width / (n_boxes - 1)
    raise ValueError(f"Unhandled alignment {alignment!r}.")


def row_offsets(
    widths: np.ndarray,
    gaps: np.ndarray,
    row_width: float,
    container_width: float,
    alignment: Alignment,
    spacing: float,
) -> np.ndarray:
    """Compute the x offset of each box from the container's leading edge.

    Parameters
    ----------
    widths : box widths in row order, shape (n,)
    gaps : spacing between consecutive boxes, shape (n - 1,)
    row_width : minimum width of the row (widths plus gaps)
    container_width : width available to the row
    alignment : row alignment
    spacing : fixed or average row spacing (see ``horizontal_distribution``)
    """
    n = len(widths)
    if n == 0:
        return np.empty(0, dtype=np.float64)
    unused = max(0.0, container_width - row_width)
    start, extra = horizontal_distribution(alignment, unused, n, spacing)
    advances = widths[:-1] + gaps + extra
    offsets = np.empty(n, dtype=np.float64)
    offsets[0] = start
    offsets[1:] = start + np.cumsum(advances)
    return offsets


def vertical_offset(alignment: Alignment, row_height: float, box_height: float) -> float:
    """Offset of a box's top edge below its row's top edge."""
    return (row_height - box_height) * VERTICAL_ANCHORS[alignment]
