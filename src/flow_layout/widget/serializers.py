"""Serializers: convert layout results to host-transferable formats."""

from __future__ import annotations

import json
from typing import Any, Sequence

from ..layout.composer import FlowSpec
from ..layout.geometry import Rect, Size


def serialize_size(size: Size) -> str:
    """Serialize a measured size as JSON string."""
    return json.dumps(size.to_dict())


def serialize_placements(placements: Sequence[Rect]) -> str:
    """Serialize index-aligned placement rects as JSON string."""
    return json.dumps([rect.to_dict() for rect in placements])


def serialize_flow_spec(spec: FlowSpec, **extra: Any) -> str:
    """Serialize a full flow layout as JSON string."""
    return json.dumps({**spec.to_dict(), **extra})


def deserialize_placements(payload: str) -> list[Rect]:
    """Parse placement rects produced by ``serialize_placements``."""
    return [
        Rect(float(d["x"]), float(d["y"]), float(d["width"]), float(d["height"]))
        for d in json.loads(payload)
    ]
