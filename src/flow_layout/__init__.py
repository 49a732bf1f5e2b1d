"""flow-layout: wrap boxes into rows and place them, like words in a paragraph."""

import logging

from ._version import __version__
from .api import Flow, measure, place
from .core.box import Box, SizedBox, ViewSpacing
from .core.validation import InvalidLayoutError
from .layout.alignment import Alignment
from .layout.composer import FlowComposer, FlowSpec
from .layout.geometry import Point, ProposedSize, Rect, Size, union_all

logging.getLogger("flow_layout").addHandler(logging.NullHandler())


__all__ = [
    "__version__",
    "Flow",
    "measure",
    "place",
    "Alignment",
    "Box",
    "SizedBox",
    "ViewSpacing",
    "InvalidLayoutError",
    "FlowComposer",
    "FlowSpec",
    "Point",
    "ProposedSize",
    "Rect",
    "Size",
    "union_all",
]
