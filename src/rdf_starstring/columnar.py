"""
Columnar Quad Codec.

Encodes batches of quads into a polars DataFrame with one Utf8 column
per quad position, and decodes such frames back into quads. Useful for
bulk hashing, joins and persistence of string quads.
"""

import logging
from typing import Any, Iterable, List, Optional

import polars as pl

from rdf_starstring.codec import quad_to_string_quad, string_quad_to_quad
from rdf_starstring.config import CodecConfig
from rdf_starstring.factory import TermFactory
from rdf_starstring.models import StringQuad
from rdf_starstring.terms import Quad

logger = logging.getLogger(__name__)

QUAD_COLUMNS = ("subject", "predicate", "object", "graph")
REQUIRED_COLUMNS = ("subject", "predicate", "object")


def quads_to_frame(quads: Iterable[Quad]) -> pl.DataFrame:
    """
    Encode quads into a DataFrame.

    Args:
        quads: Quads to encode

    Returns:
        DataFrame with Utf8 columns subject, predicate, object, graph.
        The default graph is encoded as "".
    """
    columns = {name: [] for name in QUAD_COLUMNS}
    for quad in quads:
        string_quad = quad_to_string_quad(quad)
        columns["subject"].append(string_quad.subject)
        columns["predicate"].append(string_quad.predicate)
        columns["object"].append(string_quad.object)
        columns["graph"].append(string_quad.graph)

    logger.debug(f"Encoded {len(columns['subject'])} quads to frame")
    return pl.DataFrame({
        name: pl.Series(name, values, dtype=pl.Utf8)
        for name, values in columns.items()
    })


def frame_to_quads(
    frame: pl.DataFrame,
    factory: Optional[TermFactory] = None,
    config: Optional[CodecConfig] = None,
) -> List[Any]:
    """
    Decode a DataFrame of string quads.

    Args:
        frame: DataFrame with subject, predicate, object and optionally graph columns
        factory: Term constructors to use
        config: Decoding limits

    Returns:
        List of quads built by the factory, in row order. Rows without a
        graph column or with a null graph are placed in the default graph.

    Raises:
        ValueError: If a required column is missing
    """
    missing = [name for name in REQUIRED_COLUMNS if name not in frame.columns]
    if missing:
        raise ValueError(f"Frame is missing quad columns: {', '.join(missing)}")

    selected = [name for name in QUAD_COLUMNS if name in frame.columns]
    quads = [
        string_quad_to_quad(StringQuad(**row), factory, config)
        for row in frame.select(selected).iter_rows(named=True)
    ]
    logger.debug(f"Decoded {len(quads)} quads from frame")
    return quads
