"""Input validation and sanitising for flow layout calls."""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Sequence

from ..layout.geometry import Size

log = logging.getLogger("flow_layout.validation")


class InvalidLayoutError(RuntimeError):
    """Raised when layout bookkeeping is structurally inconsistent.

    This signals a bug in the layout code, never a problem with the
    sizes supplied by the host.
    """


def sanitize_dimension(value: float) -> float:
    """Return value as a float, or 0.0 when it is negative or not finite."""
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def sanitize_size(size: Size, index: int | None = None) -> Size:
    """Treat negative or non-finite dimensions as zero instead of failing."""
    width = sanitize_dimension(size.width)
    height = sanitize_dimension(size.height)
    if width != size.width or height != size.height:
        log.debug(
            "Box %s reported size (%r, %r); using (%r, %r)",
            index, size.width, size.height, width, height,
        )
        return Size(width, height)
    return size


def validate_spacing(spacing: Any) -> float | None:
    """Validate a fixed spacing value. None means negotiated per pair."""
    if spacing is None:
        return None
    if isinstance(spacing, bool) or not isinstance(spacing, Real):
        raise TypeError(
            f"Spacing must be a number or None, got {type(spacing).__name__}."
        )
    spacing = float(spacing)
    if not math.isfinite(spacing) or spacing < 0:
        raise ValueError(
            f"Spacing must be a finite, non-negative number, got {spacing!r}. "
            "Pass None to use each box's preferred spacing."
        )
    return spacing


def validate_boxes(boxes: Any) -> Sequence:
    """Validate that every element exposes the box capability interface.

    Returns the boxes as a list (unchanged elements).
    """
    if isinstance(boxes, (str, bytes)):
        raise TypeError("Boxes must be a sequence of Box objects, got a string.")
    boxes = list(boxes)
    for i, box in enumerate(boxes):
        if not callable(getattr(box, "size_that_fits", None)):
            raise TypeError(
                f"Box at index {i} ({type(box).__name__}) has no size_that_fits(); "
                "wrap plain sizes with SizedBox(width, height)."
            )
        if not hasattr(box, "spacing"):
            raise TypeError(
                f"Box at index {i} ({type(box).__name__}) has no spacing preference."
            )
    return boxes
