"""RDF term helpers: term kinds, vocabularies and graph-model identifiers."""

from __future__ import annotations

from typing import Union

from rdflib import BNode, Literal, Namespace, URIRef
from rdflib.term import Node as RDFNode

CSVW = Namespace("http://www.w3.org/ns/csvw#")

NAMED = "named"
BLANK = "blank"
LITERAL = "literal"

BLANK_PREFIX = "_:"


def term_kind(term: RDFNode) -> str:
    """Classify an rdflib term as named, blank or literal.

    Raises TypeError for any other term (variables, quoted triples, ...).
    """
    if isinstance(term, URIRef):
        return NAMED
    if isinstance(term, BNode):
        return BLANK
    if isinstance(term, Literal):
        return LITERAL
    raise TypeError(f"Unsupported RDF term: {term!r}")


def term_id(term: Union[URIRef, BNode]) -> str:
    """Graph-model identifier of a named or blank term."""
    if isinstance(term, BNode):
        return BLANK_PREFIX + str(term)
    if isinstance(term, URIRef):
        return str(term)
    raise TypeError(f"Only named and blank terms have identifiers, got {term!r}")


def is_blank_id(identifier: str) -> bool:
    return isinstance(identifier, str) and identifier.startswith(BLANK_PREFIX)