"""Tests for widget serializers."""

import json

from flow_layout.layout.composer import FlowComposer
from flow_layout.layout.geometry import ProposedSize, Rect, Size
from flow_layout.widget.serializers import (
    deserialize_placements,
    serialize_flow_spec,
    serialize_placements,
    serialize_size,
)


class TestSerializeSize:
    def test_json(self):
        assert json.loads(serialize_size(Size(210, 90))) == {"width": 210, "height": 90}


class TestSerializePlacements:
    def test_json_list(self):
        s = serialize_placements([Rect(0, 0, 100, 40), Rect(110, 0, 100, 40)])
        d = json.loads(s)
        assert len(d) == 2
        assert d[1] == {"x": 110, "y": 0, "width": 100, "height": 40}

    def test_roundtrip(self, three_boxes):
        rects = FlowComposer(spacing=10).place(three_boxes, Rect(0, 0, 210, 90))
        assert deserialize_placements(serialize_placements(rects)) == rects

    def test_empty(self):
        assert serialize_placements([]) == "[]"


class TestSerializeFlowSpec:
    def test_json_roundtrip(self, three_boxes):
        spec = FlowComposer(alignment="center", spacing=10).compute(
            three_boxes, ProposedSize(width=220)
        )
        d = json.loads(serialize_flow_spec(spec))
        assert d["nRows"] == 2
        assert d["alignment"] == "center"
        assert d["placements"][2]["x"] == 55
        assert d["rowIndices"] == [0, 0, 1]

    def test_extra_fields(self, three_boxes):
        spec = FlowComposer().compute(three_boxes)
        d = json.loads(serialize_flow_spec(spec, containerId="tags"))
        assert d["containerId"] == "tags"
        assert d["spacing"] is None
