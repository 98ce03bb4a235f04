"""Multilingual label and definition lookup over a triple set.

Labels are read from language-tagged literals. A miss is never an error:
callers get ``None`` (single label) or an identifier-based fallback
(``resolve_labels``), as documented on each function.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence, Union

from rdflib import Graph as RDFGraph, Literal, URIRef
from rdflib.namespace import DCTERMS, FOAF, RDFS, SKOS
from rdflib.term import Node as RDFNode

from datamap.config import LANGUAGES
from datamap.models import Multilingual

LABEL_PREDICATES = (DCTERMS.title, RDFS.label, SKOS.prefLabel, RDFS.comment)
RANGE_LABEL_PREDICATES = (DCTERMS.title, RDFS.label, SKOS.prefLabel, FOAF.name, RDFS.comment)

_URI_TAIL_RE = re.compile(r"([/#])[^/#]*$")


def id_from_uri(uri: str) -> str:
    """Return the part of ``uri`` after the last ``/`` or ``#``.

    >>> id_from_uri("http://x.org/a#B")
    'B'
    >>> id_from_uri("plainstring")
    'plainstring'
    """
    match = _URI_TAIL_RE.search(uri)
    if not match:
        return uri
    return uri[match.start() + 1 :]


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def resolve_label(
    triples: RDFGraph,
    subject: RDFNode,
    language: str,
    predicate: URIRef = RDFS.label,
) -> Optional[str]:
    """Label of ``subject`` in ``language`` read from ``predicate``, capitalized."""
    candidates = [
        obj
        for obj in triples.objects(subject, predicate)
        if isinstance(obj, Literal) and obj.language == language
    ]
    if not candidates:
        return None
    value = str(min(candidates, key=str))
    return capitalize_first(value)


def resolve_labels(
    triples: RDFGraph,
    subject: RDFNode,
    predicates: Union[URIRef, Sequence[URIRef]] = LABEL_PREDICATES,
    skip_id_fallback: bool = False,
) -> Optional[Multilingual]:
    """English and Slovenian labels of ``subject``.

    Predicates are tried in order and the first hit per language wins. Unless
    ``skip_id_fallback`` is set, a missing English label falls back to the
    identifier tail and a missing Slovenian label mirrors the English one.
    Returns ``None`` when neither language resolves.
    """
    if isinstance(predicates, URIRef):
        predicates = [predicates]

    result = Multilingual()
    for predicate in predicates:
        label_en = resolve_label(triples, subject, "en", predicate)
        label_sl = resolve_label(triples, subject, "sl", predicate)
        if not result.en and label_en:
            result.en = label_en
        if not result.sl and label_sl:
            result.sl = label_sl

    if not skip_id_fallback:
        if not result.en:
            result.en = id_from_uri(str(subject))
        if not result.sl:
            result.sl = result.en

    if result.is_empty():
        return None
    return result


def resolve_definitions(triples: RDFGraph, subject: RDFNode) -> Multilingual:
    """SKOS definitions per language; missing languages stay unset."""
    result = Multilingual()
    for language in LANGUAGES:
        definitions = [
            obj
            for obj in triples.objects(subject, SKOS.definition)
            if isinstance(obj, Literal) and obj.language == language
        ]
        if definitions:
            setattr(result, language, str(min(definitions, key=str)))
    return result
