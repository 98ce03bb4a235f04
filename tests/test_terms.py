"""Tests for term kinds and graph-model identifiers."""

import pytest
from rdflib import BNode, Literal, URIRef
from rdflib.term import Variable

from datamap.terms import BLANK, LITERAL, NAMED, is_blank_id, term_id, term_kind


def test_term_kinds():
    assert term_kind(URIRef("http://example.org/a")) == NAMED
    assert term_kind(BNode("b0")) == BLANK
    assert term_kind(Literal("x", lang="en")) == LITERAL
    with pytest.raises(TypeError):
        term_kind(Variable("x"))


def test_identifiers():
    assert term_id(URIRef("http://example.org/a")) == "http://example.org/a"
    assert term_id(BNode("b0")) == "_:b0"
    with pytest.raises(TypeError):
        term_id(Literal("x"))


def test_blank_ids():
    assert is_blank_id("_:b0")
    assert not is_blank_id("http://example.org/_:b0")
    assert not is_blank_id("")
    assert not is_blank_id(None)
