"""
rdf-starstring: string codec for RDF terms and RDF-star quads.

Converts terms to compact strings (for logging, hashing and map keys)
and parses such strings back into terms through a pluggable term factory.
"""

__version__ = "0.1.0"

from rdf_starstring.terms import (
    TermType,
    Direction,
    NamedNode,
    BlankNode,
    Literal,
    Variable,
    DefaultGraph,
    Quad,
    Term,
    DEFAULT_GRAPH,
    XSD_STRING,
    RDF_LANG_STRING,
    RDF_DIR_LANG_STRING,
)
from rdf_starstring.factory import TermFactory, DEFAULT_FACTORY
from rdf_starstring.config import CodecConfig, DEFAULT_CONFIG
from rdf_starstring.errors import (
    TermStringError,
    MalformedLiteralError,
    InvalidDirectionError,
    UnbalancedTagError,
    QuadArityError,
    UnsupportedCapabilityError,
    NestingDepthError,
    ConfigValidationError,
)
from rdf_starstring.models import StringQuad
from rdf_starstring.literals import (
    get_literal_value,
    get_literal_type,
    get_literal_language,
    get_literal_direction,
    literal_to_string,
)
from rdf_starstring.tokenizer import is_quoted_term, split_quoted_term
from rdf_starstring.codec import (
    term_to_string,
    string_to_term,
    quad_to_string_quad,
    string_quad_to_quad,
)
from rdf_starstring.columnar import quads_to_frame, frame_to_quads

__all__ = [
    # Terms
    "TermType",
    "Direction",
    "NamedNode",
    "BlankNode",
    "Literal",
    "Variable",
    "DefaultGraph",
    "Quad",
    "Term",
    "DEFAULT_GRAPH",
    "XSD_STRING",
    "RDF_LANG_STRING",
    "RDF_DIR_LANG_STRING",
    # Factory and config
    "TermFactory",
    "DEFAULT_FACTORY",
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Errors
    "TermStringError",
    "MalformedLiteralError",
    "InvalidDirectionError",
    "UnbalancedTagError",
    "QuadArityError",
    "UnsupportedCapabilityError",
    "NestingDepthError",
    "ConfigValidationError",
    # Codec
    "StringQuad",
    "get_literal_value",
    "get_literal_type",
    "get_literal_language",
    "get_literal_direction",
    "literal_to_string",
    "is_quoted_term",
    "split_quoted_term",
    "term_to_string",
    "string_to_term",
    "quad_to_string_quad",
    "string_quad_to_quad",
    # Columnar
    "quads_to_frame",
    "frame_to_quads",
]
