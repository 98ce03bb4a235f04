"""Tests for multilingual label and definition lookup."""

import pytest
from rdflib import BNode, Namespace
from rdflib.namespace import DCTERMS, RDFS

from datamap.labels import (
    LABEL_PREDICATES,
    capitalize_first,
    id_from_uri,
    resolve_definitions,
    resolve_label,
    resolve_labels,
)
from datamap.models import Multilingual

EX = Namespace("http://example.org/")
P = "@prefix ex: <http://example.org/> . @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> . " \
    "@prefix dct: <http://purl.org/dc/terms/> . @prefix skos: <http://www.w3.org/2004/02/skos/core#> .\n"


# ========== id_from_uri ==========

@pytest.mark.parametrize(
    "uri, expected",
    [
        ("http://x.org/a#B", "B"),
        ("http://x.org/a/B", "B"),
        ("plainstring", "plainstring"),
        ("http://x.org/a/", ""),
        ("http://x.org/a/b#", ""),
    ],
)
def test_id_from_uri(uri, expected):
    assert id_from_uri(uri) == expected


def test_capitalize_first():
    assert capitalize_first("acme corp") == "Acme corp"
    assert capitalize_first("") == ""


# ========== resolve_label ==========

class TestResolveLabel:
    def test_capitalizes_literal(self, turtle):
        g = turtle(P + 'ex:a rdfs:label "acme"@en .')
        assert resolve_label(g, EX.a, "en") == "Acme"

    def test_missing_language_is_none(self, turtle):
        g = turtle(P + 'ex:a rdfs:label "acme"@en .')
        assert resolve_label(g, EX.a, "sl") is None

    def test_untagged_and_non_literal_objects_ignored(self, turtle):
        g = turtle(P + 'ex:a rdfs:label "plain", ex:other .')
        assert resolve_label(g, EX.a, "en") is None

    def test_other_predicate(self, turtle):
        g = turtle(P + 'ex:a dct:title "naslov"@sl .')
        assert resolve_label(g, EX.a, "sl", DCTERMS.title) == "Naslov"
        assert resolve_label(g, EX.a, "sl") is None


# ========== resolve_labels ==========

class TestResolveLabels:
    def test_identifier_fallback(self, turtle):
        g = turtle(P + "ex:Thing a rdfs:Class .")
        assert resolve_labels(g, EX.Thing) == Multilingual(en="Thing", sl="Thing")

    def test_earlier_predicates_win(self, turtle):
        g = turtle(
            P
            + 'ex:a dct:title "title"@en ; rdfs:label "label"@en, "oznaka"@sl ; '
            + 'rdfs:comment "komentar"@sl .'
        )
        assert resolve_labels(g, EX.a) == Multilingual(en="Title", sl="Oznaka")

    def test_slovenian_mirrors_english(self, turtle):
        g = turtle(P + 'ex:a skos:prefLabel "only english"@en .')
        assert resolve_labels(g, EX.a) == Multilingual(en="Only english", sl="Only english")

    def test_english_falls_back_to_id_when_only_slovenian(self, turtle):
        g = turtle(P + 'ex:a rdfs:label "samo slovensko"@sl .')
        assert resolve_labels(g, EX.a) == Multilingual(en="a", sl="Samo slovensko")

    def test_single_predicate(self, turtle):
        g = turtle(P + 'ex:a rdfs:label "label"@en ; dct:title "title"@en .')
        assert resolve_labels(g, EX.a, RDFS.label).en == "Label"

    def test_skip_fallback_returns_none_when_empty(self, turtle):
        g = turtle(P + "ex:a a rdfs:Class .")
        assert resolve_labels(g, EX.a, LABEL_PREDICATES, skip_id_fallback=True) is None

    def test_skip_fallback_does_not_mirror(self, turtle):
        g = turtle(P + 'ex:a rdfs:label "oznaka"@sl .')
        result = resolve_labels(g, EX.a, skip_id_fallback=True)
        assert result == Multilingual(en=None, sl="Oznaka")

    def test_blank_subject_fallback_uses_node_id(self, turtle):
        g = turtle(P + 'ex:a ex:p [ ex:q "x" ] .')
        blank = next(o for o in g.objects(EX.a, EX.p))
        assert isinstance(blank, BNode)
        assert resolve_labels(g, blank).en == str(blank)


# ========== resolve_definitions ==========

class TestResolveDefinitions:
    def test_only_english_is_not_mirrored(self, turtle):
        g = turtle(P + 'ex:a skos:definition "a thing"@en .')
        result = resolve_definitions(g, EX.a)
        assert result.en == "a thing"
        assert result.sl is None
        assert result.to_dict() == {"en": "a thing"}

    def test_both_languages(self, turtle):
        g = turtle(P + 'ex:a skos:definition "a thing"@en, "stvar"@sl .')
        assert resolve_definitions(g, EX.a).to_dict() == {"en": "a thing", "sl": "stvar"}

    def test_missing_is_empty(self, turtle):
        g = turtle(P + 'ex:a rdfs:label "a"@en .')
        assert resolve_definitions(g, EX.a).is_empty()
