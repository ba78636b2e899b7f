"""
Quoted Term Tokenizer.

Splits the body of a quoted term such as

    << <<ex:s ex:p ex:o>> ex:p "a b"@en >>

into its top-level terms. Spaces only separate terms when they are
outside any nested ``<...>`` and outside a literal's quotes. Runs of
spaces count as a single separator.
"""

import logging
from typing import List, Tuple

from rdf_starstring.errors import QuadArityError, UnbalancedTagError

logger = logging.getLogger(__name__)


QUOTED_TERM_OPEN = "<<"
QUOTED_TERM_CLOSE = ">>"

# A quoted term holds a triple or a quad
VALID_ARITIES = (3, 4)


def is_quoted_term(value: str) -> bool:
    """Check whether a string is written as a quoted term ``<<...>>``."""
    return (
        len(value) > 4
        and value.startswith(QUOTED_TERM_OPEN)
        and value.endswith(QUOTED_TERM_CLOSE)
    )


def _is_escaped(text: str, pos: int) -> bool:
    """Check whether the character at pos follows an odd run of backslashes."""
    escaped = False
    i = pos - 1
    while i >= 0 and text[i] == "\\":
        escaped = not escaped
        i -= 1
    return escaped


def scan_top_level_spans(terms: str, source: str) -> List[Tuple[int, int]]:
    """
    Find the spans of the top-level terms in a quoted term body.

    Args:
        terms: Body of the quoted term, without the outer << >> and trimmed
        source: Full input, used in error messages

    Returns:
        List of (start, end) offsets into terms

    Raises:
        UnbalancedTagError: If a '>' has no matching '<' or a '<' is never closed
    """
    spans = []
    depth = 0
    in_quote = False
    start = 0
    i = 0
    length = len(terms)

    while i < length:
        char = terms[i]
        if char == "<":
            depth += 1
        elif char == ">":
            if depth == 0:
                logger.debug(f"Unbalanced closing tag at offset {i} in {source}")
                raise UnbalancedTagError(f"Found closing tag without opening tag in {source}", source)
            depth -= 1
        elif char == '"':
            if not _is_escaped(terms, i):
                in_quote = not in_quote
        elif char == " " and not in_quote and depth == 0:
            spans.append((start, i))
            while i + 1 < length and terms[i + 1] == " ":
                i += 1
            start = i + 1
        i += 1

    if depth != 0:
        logger.debug(f"Unclosed opening tag in {source}")
        raise UnbalancedTagError(f"Found opening tag without closing tag in {source}", source)

    spans.append((start, length))
    return spans


def unwrap_iri(term: str) -> str:
    """Strip the angle brackets of an ``<iri>`` term; other terms are returned as-is."""
    if term.startswith("<") and " " not in term and not is_quoted_term(term):
        return term[1:-1]
    return term


def split_quoted_term(value: str) -> List[str]:
    """
    Split a quoted term into the strings of its subject, predicate, object and graph.

    Args:
        value: A quoted term string, ``<<s p o>>`` or ``<<s p o g>>``

    Returns:
        Three or four term strings, with bracketed IRIs unwrapped

    Raises:
        UnbalancedTagError: If nested brackets do not match
        QuadArityError: If there are not exactly 3 or 4 top-level terms
    """
    terms = value[len(QUOTED_TERM_OPEN):-len(QUOTED_TERM_CLOSE)].strip()
    spans = scan_top_level_spans(terms, value)
    if len(spans) not in VALID_ARITIES:
        logger.debug(f"Quoted term has {len(spans)} terms: {value}")
        raise QuadArityError(f"Nested quad syntax error {value}", value)
    return [unwrap_iri(terms[start:end]) for start, end in spans]
