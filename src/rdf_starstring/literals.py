"""
Literal String Grammar.

A literal is written as the quoted lexical form followed by an optional
suffix:

    "value"
    "value"^^http://example.org/datatype
    "value"@en
    "value"@en--ltr

The lexical form is taken as-is: nothing is unescaped, and it may
contain quotes of its own.
"""

import logging
import re

from rdf_starstring.errors import InvalidDirectionError, MalformedLiteralError
from rdf_starstring.terms import (
    Direction,
    Literal,
    RDF_DIR_LANG_STRING,
    RDF_LANG_STRING,
    XSD_STRING,
)


_VALUE_RE = re.compile(r'"(.*)"', re.DOTALL)
_TYPE_RE = re.compile(r'".*"(?:\^\^([^"]+)|(@)[^@"]+)?', re.DOTALL)
_LANGUAGE_RE = re.compile(r'".*"(?:@([^@"]+)|\^\^[^"]+)?', re.DOTALL)

DIRECTION_MARKER = "--"

logger = logging.getLogger(__name__)

# Datatypes implied by the literal form and therefore never written out
IMPLICIT_DATATYPES = frozenset({XSD_STRING, RDF_LANG_STRING, RDF_DIR_LANG_STRING})


def _not_a_literal(literal_value: str) -> MalformedLiteralError:
    logger.debug(f"Rejecting malformed literal {literal_value}")
    return MalformedLiteralError(f"{literal_value} is not a literal", literal_value)


def get_literal_value(literal_value: str) -> str:
    """
    Get the lexical form of a literal.

    Args:
        literal_value: A literal string starting with '"'

    Returns:
        The content between the first and the last quote

    Raises:
        MalformedLiteralError: If the quote pair is missing
    """
    match = _VALUE_RE.match(literal_value)
    if not match:
        raise _not_a_literal(literal_value)
    return match.group(1)


def get_literal_type(literal_value: str) -> str:
    """
    Get the datatype IRI of a literal.

    Language-tagged literals report rdf:langString and untyped literals
    report xsd:string.

    Raises:
        MalformedLiteralError: If the suffix is neither ^^datatype nor @language
    """
    match = _TYPE_RE.fullmatch(literal_value)
    if not match:
        raise _not_a_literal(literal_value)
    if match.group(1):
        return match.group(1)
    return RDF_LANG_STRING if match.group(2) else XSD_STRING


def get_literal_language(literal_value: str) -> str:
    """
    Get the lower-cased language tag of a literal, without its direction.

    Returns:
        Language tag, or "" when the literal has none

    Raises:
        MalformedLiteralError: If the suffix is malformed (e.g. a bare '@')
    """
    match = _LANGUAGE_RE.fullmatch(literal_value)
    if not match:
        raise _not_a_literal(literal_value)
    if not match.group(1):
        return ""
    language = match.group(1).lower()
    marker = language.find(DIRECTION_MARKER)
    if marker >= 0:
        language = language[:marker]
    return language


def get_literal_direction(literal_value: str) -> Direction:
    """
    Get the base direction of a literal.

    Only a '--' after the last quote counts as a direction marker.

    Returns:
        Direction.LTR, Direction.RTL, or Direction.NONE if no marker is present

    Raises:
        InvalidDirectionError: If the marker is followed by anything but ltr/rtl
    """
    start = max(literal_value.rfind('"'), 0)
    marker = literal_value.find(DIRECTION_MARKER, start)
    if marker < 0:
        return Direction.NONE
    direction = literal_value[marker + len(DIRECTION_MARKER):]
    if direction == Direction.LTR.value:
        return Direction.LTR
    if direction == Direction.RTL.value:
        return Direction.RTL
    logger.debug(f"Rejecting literal direction {direction!r} in {literal_value}")
    raise InvalidDirectionError(
        f"{literal_value} is not a literal with a valid direction", literal_value
    )


def literal_to_string(literal: Literal) -> str:
    """
    Write a literal as a string.

    The datatype is only written when it is not implied by the literal
    form. The direction marker always comes last.
    """
    parts = ['"', literal.value, '"']
    datatype = literal.datatype
    if datatype is not None and datatype.value not in IMPLICIT_DATATYPES:
        parts.append("^^" + datatype.value)
    if literal.language:
        parts.append("@" + literal.language)
    direction = Direction(literal.direction or Direction.NONE)
    if direction != Direction.NONE:
        parts.append(DIRECTION_MARKER + direction.value)
    return "".join(parts)
