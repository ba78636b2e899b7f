"""
RDF Term Model.

Immutable value objects for the six term variants handled by the codec:
named nodes, blank nodes, literals, variables, the default graph, and
quads. Quads may appear in subject or object position of other quads
(RDF-star quoted triples), nested to any depth.

Each class carries its variant tag as the class attribute ``term_type``,
so code consuming terms can branch on the tag instead of on the class.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


# =============================================================================
# Vocabulary
# =============================================================================

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"

XSD_STRING = f"{XSD_NS}string"
RDF_LANG_STRING = f"{RDF_NS}langString"
RDF_DIR_LANG_STRING = f"{RDF_NS}dirLangString"


class TermType(str, Enum):
    """Tag identifying a term variant."""
    NAMED_NODE = "NamedNode"
    BLANK_NODE = "BlankNode"
    LITERAL = "Literal"
    VARIABLE = "Variable"
    DEFAULT_GRAPH = "DefaultGraph"
    QUAD = "Quad"


class Direction(str, Enum):
    """Base direction of a language-tagged literal."""
    NONE = ""
    LTR = "ltr"
    RTL = "rtl"


# =============================================================================
# Term Variants
# =============================================================================

@dataclass(frozen=True, slots=True)
class NamedNode:
    """An IRI."""
    value: str

    term_type: ClassVar[TermType] = TermType.NAMED_NODE


@dataclass(frozen=True, slots=True)
class BlankNode:
    """A blank node, identified by a local label."""
    value: str

    term_type: ClassVar[TermType] = TermType.BLANK_NODE


@dataclass(frozen=True, slots=True)
class Variable:
    """A query variable. The label is stored without the ``?`` marker."""
    value: str

    term_type: ClassVar[TermType] = TermType.VARIABLE


@dataclass(frozen=True, slots=True)
class DefaultGraph:
    """The default graph. Always has the empty string as value."""
    value: str = ""

    term_type: ClassVar[TermType] = TermType.DEFAULT_GRAPH


DEFAULT_GRAPH = DefaultGraph()

XSD_STRING_NODE = NamedNode(XSD_STRING)
RDF_LANG_STRING_NODE = NamedNode(RDF_LANG_STRING)
RDF_DIR_LANG_STRING_NODE = NamedNode(RDF_DIR_LANG_STRING)


@dataclass(frozen=True, slots=True)
class Literal:
    """
    An RDF literal.

    Attributes:
        value: Lexical form
        datatype: Datatype IRI (xsd:string when not given)
        language: Language tag, empty when absent
        direction: Base direction, only for language-tagged literals
    """
    value: str
    datatype: NamedNode = XSD_STRING_NODE
    language: str = ""
    direction: Direction = Direction.NONE

    term_type: ClassVar[TermType] = TermType.LITERAL

    def __post_init__(self):
        if self.datatype is None:
            raise ValueError(f"Literal {self.value!r} has no datatype")
        if self.direction != Direction.NONE:
            if not self.language:
                raise ValueError(f"Literal {self.value!r} has a direction but no language")
            if self.datatype.value != RDF_DIR_LANG_STRING:
                raise ValueError(
                    f"Literal {self.value!r} with a direction must have datatype {RDF_DIR_LANG_STRING}"
                )
        elif self.language and self.datatype.value != RDF_LANG_STRING:
            raise ValueError(
                f"Literal {self.value!r} with a language must have datatype {RDF_LANG_STRING}"
            )


@dataclass(frozen=True, slots=True)
class Quad:
    """
    A subject-predicate-object-graph statement.

    A quad in the default graph is a triple. Subject and object may
    themselves be quads (quoted triples).
    """
    subject: "Term"
    predicate: "Term"
    object: "Term"
    graph: "Term" = DEFAULT_GRAPH

    term_type: ClassVar[TermType] = TermType.QUAD


Term = Union[NamedNode, BlankNode, Literal, Variable, DefaultGraph, Quad]
