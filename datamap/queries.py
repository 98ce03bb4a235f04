"""SPARQL query construction for schema and instance neighbourhoods.

Queries are CONSTRUCT queries returning the raw ``?s ?p ?o`` triples of a
bounded neighbourhood around a focus. Nothing here filters results; the
projectors decide what becomes a node or an edge.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from datamap.terms import is_blank_id
from datamap.utils import collapse_whitespace

RDFS_PREFIX = "PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>"

GRAPH_DISCOVERY_QUERY = "SELECT DISTINCT ?graph WHERE { GRAPH ?graph { ?s ?p ?o } }"

EXPANSION_LEVELS = (0, 1, 2)

# Characters that may not appear inside an IRIREF (SPARQL 1.1, production 139).
_IRI_FORBIDDEN_RE = re.compile(r'[\x00-\x20<>"{}|^`\\]')


def check_iri(iri: str) -> str:
    """Return ``iri`` unchanged, or raise ValueError if it cannot sit inside ``<...>``."""
    match = _IRI_FORBIDDEN_RE.search(iri)
    if match:
        raise ValueError(f"Invalid IRI {iri!r}: character {match.group()!r} is not allowed.")
    return iri


def normalize_query(query: str) -> str:
    return collapse_whitespace(query)


def from_clause(named_graphs: Iterable[str]) -> str:
    return " ".join(f"FROM <{check_iri(graph)}>" for graph in named_graphs if graph)


# Schema neighbourhood of a class


def focus_as_subject(focus: str) -> str:
    return f"{{ BIND(<{focus}> AS ?s) . ?s ?p ?o }}"


def focus_as_object(focus: str) -> str:
    return f"{{ BIND(<{focus}> AS ?o) . ?s ?p ?o }}"


def properties_with_focus_as_domain(focus: str) -> str:
    return f"{{ ?s rdfs:domain <{focus}> . ?s ?p ?o }}"


def classes_in_range_of_focus_properties(focus: str) -> str:
    return f"{{ ?p1 rdfs:domain <{focus}> . ?p1 rdfs:range ?s . ?s ?p ?o }}"


def properties_with_focus_as_range(focus: str) -> str:
    return f"{{ ?s rdfs:range <{focus}> . ?s ?p ?o }}"


def classes_in_domain_of_properties_ranged_at_focus(focus: str) -> str:
    return f"{{ ?p1 rdfs:range <{focus}> . ?p1 rdfs:domain ?s . ?s ?p ?o }}"


# Instance neighbourhood of a record


def subjects_pointing_to_focus(focus: str) -> str:
    return f"{{ ?s ?p1 <{focus}> . ?s ?p ?o }}"


def objects_of_focus(focus: str) -> str:
    return f"{{ <{focus}> ?p1 ?s . ?s ?p ?o }}"


def two_hops_from_focus(focus: str) -> str:
    return f"{{ <{focus}> ?p1 ?s1 . ?s1 ?p2 ?s . ?s ?p ?o }}"


def schema_patterns(focus: str) -> List[str]:
    return [
        focus_as_subject(focus),
        properties_with_focus_as_domain(focus),
        classes_in_range_of_focus_properties(focus),
        properties_with_focus_as_range(focus),
        classes_in_domain_of_properties_ranged_at_focus(focus),
        focus_as_object(focus),
    ]


def instance_patterns(focus: str, expansion_level: int = 0) -> List[str]:
    patterns = [
        focus_as_subject(focus),
        focus_as_object(focus),
        subjects_pointing_to_focus(focus),
        objects_of_focus(focus),
    ]
    # Blank records nested two levels below a named anchor.
    if expansion_level == 2:
        patterns.append(two_hops_from_focus(focus))
    return patterns


def build_query(
    focus: Optional[str] = None,
    named_graphs: Iterable[str] = (),
    schema: bool = True,
    expansion_level: int = 0,
) -> str:
    """Build the normalized CONSTRUCT query for a focus and scope.

    Without a focus every triple in scope is fetched. With a focus, the
    schema view unions six patterns around a class and the instance view
    unions four (five at ``expansion_level`` 2) around a record.
    """
    if expansion_level not in EXPANSION_LEVELS:
        raise ValueError(f"Expansion level must be one of {EXPANSION_LEVELS}, got {expansion_level!r}")
    if focus is not None and is_blank_id(focus):
        raise ValueError(f"Blank identifier '{focus}' cannot be used as a query focus.")
    if focus:
        check_iri(focus)

    scope = from_clause(named_graphs)
    if not focus:
        return normalize_query(f"CONSTRUCT {{ ?s ?p ?o }} {scope} WHERE {{ ?s ?p ?o }}")

    if schema:
        patterns = schema_patterns(focus)
    else:
        patterns = instance_patterns(focus, expansion_level)

    union = " UNION ".join(patterns)
    query = f"""
        {RDFS_PREFIX}
        CONSTRUCT {{ ?s ?p ?o }}
        {scope}
        WHERE {{
          {union}
        }}"""
    return normalize_query(query)
