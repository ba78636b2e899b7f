"""
Tests for the quoted term tokenizer.
"""

import pytest

from rdf_starstring.errors import QuadArityError, UnbalancedTagError
from rdf_starstring.tokenizer import (
    is_quoted_term,
    scan_top_level_spans,
    split_quoted_term,
    unwrap_iri,
)


def tokens(terms: str):
    return [terms[start:end] for start, end in scan_top_level_spans(terms, terms)]


class TestIsQuotedTerm:
    def test_quoted(self):
        assert is_quoted_term("<<a b c>>")

    def test_too_short(self):
        assert not is_quoted_term("<<>>")

    def test_single_brackets(self):
        assert not is_quoted_term("<http://ex>")
        assert not is_quoted_term("http://ex")


class TestScanTopLevelSpans:
    def test_simple(self):
        assert tokens("a b c") == ["a", "b", "c"]

    def test_collapses_spaces(self):
        assert tokens("a   b  c") == ["a", "b", "c"]

    def test_nested_quoted_term_is_one_token(self):
        assert tokens("<<a b c>> p o") == ["<<a b c>>", "p", "o"]

    def test_spaces_in_literal(self):
        assert tokens('s p "a b c"') == ["s", "p", '"a b c"']

    def test_escaped_quote_in_literal(self):
        assert tokens(r's p "a \" b"') == ["s", "p", r'"a \" b"']

    def test_escaped_backslash_before_quote(self):
        assert tokens(r's p "a \\" o') == ["s", "p", r'"a \\"', "o"]

    def test_closing_without_opening(self):
        with pytest.raises(UnbalancedTagError, match="closing tag without opening tag in src"):
            scan_top_level_spans("a>", "src")

    def test_opening_without_closing(self):
        with pytest.raises(UnbalancedTagError, match="opening tag without closing tag in src"):
            scan_top_level_spans("<a", "src")


class TestUnwrapIri:
    def test_bracketed(self):
        assert unwrap_iri("<http://ex>") == "http://ex"

    def test_plain(self):
        assert unwrap_iri("ex:p") == "ex:p"

    def test_quoted_term_untouched(self):
        assert unwrap_iri("<<a b c>>") == "<<a b c>>"


class TestSplitQuotedTerm:
    def test_triple(self):
        assert split_quoted_term("<<ex:s ex:p ex:o>>") == ["ex:s", "ex:p", "ex:o"]

    def test_quad(self):
        assert split_quoted_term("<<ex:s ex:p ex:o ex:g>>") == ["ex:s", "ex:p", "ex:o", "ex:g"]

    def test_spaces_inside_brackets(self):
        assert split_quoted_term("<<  ex:s ex:p ex:o >>") == ["ex:s", "ex:p", "ex:o"]

    def test_bracketed_iris(self):
        assert split_quoted_term("<<<s> <p> <o>>>") == ["s", "p", "o"]

    def test_nested(self):
        assert split_quoted_term("<< <<a b c>> p <<d e f>> >>") == ["<<a b c>>", "p", "<<d e f>>"]

    def test_too_few(self):
        with pytest.raises(QuadArityError, match="Nested quad syntax error <<a b>>"):
            split_quoted_term("<<a b>>")

    def test_too_many(self):
        with pytest.raises(QuadArityError):
            split_quoted_term("<<a b c d e>>")
