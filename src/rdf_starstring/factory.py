"""
Term Factory Capability.

The decoder never builds terms itself; it calls the constructors of a
``TermFactory``. Callers that keep their own term classes inject a
factory built from their constructors. ``DEFAULT_FACTORY`` builds the
terms defined in ``rdf_starstring.terms``.

Variable construction is optional: a factory without it still decodes
every other kind of term.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from rdf_starstring.terms import (
    BlankNode,
    DEFAULT_GRAPH,
    DefaultGraph,
    Direction,
    Literal,
    NamedNode,
    Quad,
    RDF_DIR_LANG_STRING_NODE,
    RDF_LANG_STRING_NODE,
    Term,
    Variable,
    XSD_STRING_NODE,
)


@dataclass(frozen=True)
class TermFactory:
    """
    Set of term constructors consumed by the decoder.

    Attributes:
        named_node: ``named_node(iri)``
        blank_node: ``blank_node(label)``
        literal: ``literal(value, datatype=None, language="", direction=Direction.NONE)``
        default_graph: ``default_graph()``
        quad: ``quad(subject, predicate, object, graph)``; the codec always
            passes the graph, using ``default_graph()`` for triples
        variable: ``variable(label)``, or None when unsupported
    """
    named_node: Callable[[str], Any]
    blank_node: Callable[[str], Any]
    literal: Callable[..., Any]
    default_graph: Callable[[], Any]
    quad: Callable[..., Any]
    variable: Optional[Callable[[str], Any]] = None

    @property
    def supports_variables(self) -> bool:
        """Whether this factory can construct variables."""
        return self.variable is not None


def make_literal(
    value: str,
    datatype: Optional[NamedNode] = None,
    language: str = "",
    direction: Direction = Direction.NONE,
) -> Literal:
    """
    Create a literal, choosing the datatype implied by language and direction.

    Args:
        value: Lexical form
        datatype: Explicit datatype, ignored for language-tagged literals
        language: Language tag
        direction: Base direction (requires a language)

    Returns:
        Literal term
    """
    direction = Direction(direction or Direction.NONE)
    if language:
        if direction != Direction.NONE:
            return Literal(value, RDF_DIR_LANG_STRING_NODE, language, direction)
        return Literal(value, RDF_LANG_STRING_NODE, language)
    if direction != Direction.NONE:
        raise ValueError(f"Literal {value!r} has a direction but no language")
    return Literal(value, datatype or XSD_STRING_NODE)


def make_default_graph() -> DefaultGraph:
    """Return the default graph singleton."""
    return DEFAULT_GRAPH


def make_quad(subject: Term, predicate: Term, object: Term, graph: Term = DEFAULT_GRAPH) -> Quad:
    """Create a quad; the graph defaults to the default graph."""
    return Quad(subject, predicate, object, graph)


DEFAULT_FACTORY = TermFactory(
    named_node=NamedNode,
    blank_node=BlankNode,
    literal=make_literal,
    default_graph=make_default_graph,
    quad=make_quad,
    variable=Variable,
)
