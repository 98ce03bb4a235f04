"""Shared fixtures: small schema and instance triple sets and a fake store client."""

from typing import Callable, List, Optional

import pytest
from rdflib import Graph as RDFGraph, Namespace

from datamap.errors import QueryExecutionFailure
from datamap.queries import build_query

EX = Namespace("http://example.org/")

PREFIXES = """
@prefix ex: <http://example.org/> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix skos: <http://www.w3.org/2004/02/skos/core#> .
@prefix dct: <http://purl.org/dc/terms/> .
@prefix foaf: <http://xmlns.com/foaf/0.1/> .
@prefix csvw: <http://www.w3.org/ns/csvw#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
"""

SCHEMA_TTL = PREFIXES + """
ex:Cat a owl:Class ;
    rdfs:label "cat"@en, "mačka"@sl ;
    skos:definition "A small domesticated feline."@en .

ex:Person a owl:Class ;
    rdfs:label "person"@en, "oseba"@sl .

ex:Kitten a owl:Class ;
    rdfs:subClassOf ex:Cat .

ex:name a owl:DatatypeProperty ;
    rdfs:domain ex:Cat ;
    rdfs:range xsd:string ;
    rdfs:label "name"@en, "ime"@sl .

ex:owner a owl:ObjectProperty ;
    rdfs:domain ex:Cat ;
    rdfs:range ex:Person ;
    rdfs:label "owner"@en, "lastnik"@sl .
"""

INSTANCE_TTL = PREFIXES + """
ex:tom a ex:Cat ;
    dct:title "tom"@en, "tomaž"@sl ;
    ex:name "Tom" ;
    ex:owner ex:ann ;
    ex:collar [ ex:colour "red" ] .

ex:ann a ex:Person ;
    foaf:name "Ann"@en .
"""


def parse_turtle(text: str) -> RDFGraph:
    triples = RDFGraph()
    triples.parse(data=text, format="turtle")
    return triples


class FakeClient:
    """Stands in for SparqlClient; answers the whole-schema query with the schema triples."""

    def __init__(
        self,
        schema_triples: RDFGraph,
        instance_triples: Optional[RDFGraph] = None,
        graphs: Optional[List[str]] = None,
        fail_on: Optional[Callable[[str], bool]] = None,
    ):
        self.schema_triples = schema_triples
        self.instance_triples = instance_triples if instance_triples is not None else RDFGraph()
        self.graphs = graphs or []
        self.fail_on = fail_on
        self.queries: List[str] = []
        self.endpoint = "http://fake.example.org/ds"

    def construct(self, query: str) -> RDFGraph:
        self.queries.append(query)
        if self.fail_on is not None and self.fail_on(query):
            raise QueryExecutionFailure("boom", query=query, endpoint=self.endpoint)
        if query == build_query():
            return self.schema_triples
        return self.instance_triples

    def list_graphs(self) -> List[str]:
        return list(self.graphs)


@pytest.fixture
def turtle():
    return parse_turtle


@pytest.fixture
def schema_triples() -> RDFGraph:
    return parse_turtle(SCHEMA_TTL)


@pytest.fixture
def instance_triples() -> RDFGraph:
    return parse_turtle(INSTANCE_TTL)


@pytest.fixture
def fake_client(schema_triples, instance_triples) -> FakeClient:
    return FakeClient(schema_triples, instance_triples, graphs=["http://example.org/g1", "http://example.org/g2"])


@pytest.fixture
def make_client(schema_triples):
    def _make(**kwargs) -> FakeClient:
        return FakeClient(schema_triples, **kwargs)

    return _make
