"""
Term String Codec.

Converts between terms and their compact string form:

    Named nodes:   http://example.org
    Blank nodes:   _:b1
    Variables:     ?v1
    Literals:      "abc", "abc"@en, "abc"@en--ltr, "3"^^http://www.w3.org/2001/XMLSchema#integer
    Default graph: (empty string)
    Quoted quads:  <<ex:s ex:p ex:o>>, <<ex:s ex:p ex:o ex:g>>

Quads are exchanged as ``StringQuad`` records with one string per position.

Decoding builds terms through a ``TermFactory``; encoding reads the
``term_type`` tag of each term. No state is kept between calls.
"""

import logging
from typing import Any, Mapping, Optional, Union

from rdf_starstring.config import CodecConfig, DEFAULT_CONFIG, MAX_NESTING_DEPTH_CEILING
from rdf_starstring.errors import NestingDepthError, UnsupportedCapabilityError
from rdf_starstring.factory import DEFAULT_FACTORY, TermFactory
from rdf_starstring.literals import (
    get_literal_direction,
    get_literal_language,
    get_literal_type,
    get_literal_value,
    literal_to_string,
)
from rdf_starstring.models import StringQuad
from rdf_starstring.terms import Quad, Term, TermType
from rdf_starstring.tokenizer import is_quoted_term, split_quoted_term

logger = logging.getLogger(__name__)


# =============================================================================
# Encoding
# =============================================================================

def term_to_string(term: Optional[Term]) -> Optional[str]:
    """
    Convert a term to its string representation.

    Args:
        term: A term, or None

    Returns:
        The string form, or None when no term is given. The default
        graph gives the empty string.
    """
    if term is None:
        return None

    term_type = term.term_type
    if term_type == TermType.NAMED_NODE:
        return term.value
    if term_type == TermType.BLANK_NODE:
        return "_:" + term.value
    if term_type == TermType.LITERAL:
        return literal_to_string(term)
    if term_type == TermType.VARIABLE:
        return "?" + term.value
    if term_type == TermType.DEFAULT_GRAPH:
        return ""
    if term_type == TermType.QUAD:
        parts = [
            term_to_string(term.subject),
            term_to_string(term.predicate),
            term_to_string(term.object),
        ]
        if term.graph is not None and term.graph.term_type != TermType.DEFAULT_GRAPH:
            parts.append(term_to_string(term.graph))
        return "<<" + " ".join(parts) + ">>"

    raise TypeError(f"Unsupported term type: {term_type!r}")


def quad_to_string_quad(quad: Quad) -> StringQuad:
    """
    Convert a quad to a string quad.

    The graph is always set; the default graph becomes "".
    """
    return StringQuad(
        subject=term_to_string(quad.subject),
        predicate=term_to_string(quad.predicate),
        object=term_to_string(quad.object),
        graph=term_to_string(quad.graph),
    )


# =============================================================================
# Decoding
# =============================================================================

def string_to_term(
    value: Optional[str],
    factory: Optional[TermFactory] = None,
    config: Optional[CodecConfig] = None,
) -> Any:
    """
    Convert a string to a term.

    Args:
        value: String form of a term; empty or None gives the default graph
        factory: Term constructors to use (defaults to DEFAULT_FACTORY)
        config: Decoding limits (defaults to DEFAULT_CONFIG)

    Returns:
        The term built by the factory

    Raises:
        MalformedLiteralError: On a literal without quote pair or with a bad suffix
        InvalidDirectionError: On a literal direction other than ltr/rtl
        UnbalancedTagError: On unmatched brackets inside a quoted term
        QuadArityError: On a quoted term without 3 or 4 terms
        NestingDepthError: On quoted terms nested beyond config.max_nesting_depth
            (never more than MAX_NESTING_DEPTH_CEILING)
        UnsupportedCapabilityError: On a variable when the factory has no variable constructor
    """
    factory = factory or DEFAULT_FACTORY
    config = config or DEFAULT_CONFIG
    max_depth = min(config.max_nesting_depth, MAX_NESTING_DEPTH_CEILING)
    return _decode(value, factory, max_depth, 0)


def _decode(value: Optional[str], factory: TermFactory, max_depth: int, depth: int) -> Any:
    if not value:
        return factory.default_graph()

    marker = value[0]
    if marker == "_":
        return factory.blank_node(value[2:])
    if marker == "?":
        if not factory.supports_variables:
            logger.debug(f"Factory cannot build variable {value}")
            raise UnsupportedCapabilityError(
                "Missing 'variable' constructor on the given term factory", value
            )
        return factory.variable(value[1:])
    if marker == '"':
        return _decode_literal(value, factory)
    if is_quoted_term(value):
        return _decode_quoted(value, factory, max_depth, depth + 1)
    return factory.named_node(value)


def _decode_literal(value: str, factory: TermFactory) -> Any:
    language = get_literal_language(value)
    direction = get_literal_direction(value)
    datatype = get_literal_type(value)
    lexical = get_literal_value(value)
    if language:
        return factory.literal(lexical, language=language, direction=direction)
    return factory.literal(lexical, datatype=factory.named_node(datatype))


def _decode_quoted(value: str, factory: TermFactory, max_depth: int, depth: int) -> Any:
    if depth > max_depth:
        logger.debug(f"Rejecting quoted term nested {depth} levels deep: {value}")
        raise NestingDepthError(
            f"Quoted terms nested deeper than {max_depth} levels in {value}", value
        )

    terms = split_quoted_term(value)
    subject = _decode(terms[0], factory, max_depth, depth)
    predicate = _decode(terms[1], factory, max_depth, depth)
    obj = _decode(terms[2], factory, max_depth, depth)
    if len(terms) == 4:
        graph = _decode(terms[3], factory, max_depth, depth)
    else:
        graph = factory.default_graph()
    return factory.quad(subject, predicate, obj, graph)


def string_quad_to_quad(
    string_quad: Union[StringQuad, Mapping[str, Optional[str]]],
    factory: Optional[TermFactory] = None,
    config: Optional[CodecConfig] = None,
) -> Any:
    """
    Convert a string quad to a quad.

    Args:
        string_quad: StringQuad, or a mapping with subject/predicate/object and optional graph
        factory: Term constructors used for all four positions
        config: Decoding limits

    Returns:
        The quad built by the factory. A missing graph gives the default graph.
    """
    if not isinstance(string_quad, StringQuad):
        string_quad = StringQuad.model_validate(string_quad)

    factory = factory or DEFAULT_FACTORY
    config = config or DEFAULT_CONFIG
    return factory.quad(
        string_to_term(string_quad.subject, factory, config),
        string_to_term(string_quad.predicate, factory, config),
        string_to_term(string_quad.object, factory, config),
        string_to_term(string_quad.graph, factory, config),
    )
