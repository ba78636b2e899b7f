"""
Tests for the columnar quad codec.
"""

import polars as pl
import pytest

from rdf_starstring.columnar import QUAD_COLUMNS, frame_to_quads, quads_to_frame
from rdf_starstring.factory import make_literal
from rdf_starstring.terms import BlankNode, DEFAULT_GRAPH, NamedNode, Quad


@pytest.fixture
def quads():
    inner = Quad(NamedNode("ex:s"), NamedNode("ex:p"), NamedNode("ex:o"))
    return [
        Quad(NamedNode("ex:a"), NamedNode("ex:p"), make_literal("one two", language="en")),
        Quad(inner, NamedNode("ex:certainty"), make_literal("0.9"), NamedNode("ex:g")),
        Quad(BlankNode("b1"), NamedNode("ex:p"), inner),
    ]


class TestQuadsToFrame:
    def test_columns(self, quads):
        df = quads_to_frame(quads)
        assert df.columns == list(QUAD_COLUMNS)
        assert all(dtype == pl.Utf8 for dtype in df.dtypes)
        assert len(df) == 3

    def test_values(self, quads):
        df = quads_to_frame(quads)
        assert df["subject"].to_list() == ["ex:a", "<<ex:s ex:p ex:o>>", "_:b1"]
        assert df["object"][0] == '"one two"@en'
        assert df["graph"].to_list() == ["", "ex:g", ""]

    def test_empty(self):
        df = quads_to_frame([])
        assert df.columns == list(QUAD_COLUMNS)
        assert len(df) == 0


class TestFrameToQuads:
    def test_round_trip(self, quads):
        assert frame_to_quads(quads_to_frame(quads)) == quads

    def test_without_graph_column(self):
        df = pl.DataFrame({
            "subject": ["ex:s"],
            "predicate": ["ex:p"],
            "object": ['"o"'],
        })
        [quad] = frame_to_quads(df)
        assert quad.graph == DEFAULT_GRAPH

    def test_null_graph(self):
        df = pl.DataFrame({
            "subject": ["ex:s", "ex:s"],
            "predicate": ["ex:p", "ex:p"],
            "object": ["ex:o", "ex:o"],
            "graph": [None, "ex:g"],
        })
        quads = frame_to_quads(df)
        assert quads[0].graph == DEFAULT_GRAPH
        assert quads[1].graph == NamedNode("ex:g")

    def test_missing_column(self):
        df = pl.DataFrame({"subject": ["ex:s"], "object": ["ex:o"]})
        with pytest.raises(ValueError, match="missing quad columns: predicate"):
            frame_to_quads(df)
