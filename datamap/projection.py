"""Projection of RDF triple sets into schema and instance graph models."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set, Tuple

from rdflib import BNode, Graph as RDFGraph, Literal, URIRef
from rdflib.namespace import DCTERMS, OWL, RDF, RDFS
from rdflib.term import Node as RDFNode

from datamap.errors import UnhandledObjectKind
from datamap.labels import RANGE_LABEL_PREDICATES, resolve_definitions, resolve_labels
from datamap.models import (
    CLASS,
    INSTANCE,
    ClassRef,
    DataProperty,
    GraphEdge,
    GraphModel,
    GraphNode,
    Multilingual,
    ObjectProperty,
)
from datamap.terms import BLANK, LITERAL, term_id, term_kind
from datamap.utils import dedupe_preserve, profile_time

CLASS_TYPES = (OWL.Class, RDFS.Class)
PROPERTY_TYPES = (OWL.ObjectProperty, OWL.DatatypeProperty)

SUBCLASS_LABEL = ("SubClassOf", "Podrazred")


def _term_key(term: RDFNode) -> Tuple[str, str, str, str]:
    language = getattr(term, "language", None) or ""
    datatype = getattr(term, "datatype", None) or ""
    return (type(term).__name__, str(term), language, str(datatype))


def _ordered(items: Iterable[Tuple[RDFNode, ...]]) -> List[Tuple[RDFNode, ...]]:
    """Triple sets are unordered; sort so repeated projections agree."""
    return sorted(items, key=lambda row: tuple(_term_key(term) for term in row))


def _identifier(term: RDFNode) -> str:
    if isinstance(term, (URIRef, BNode)):
        return term_id(term)
    return str(term)


def _first_object(triples: RDFGraph, subject: RDFNode, predicate: URIRef) -> Optional[RDFNode]:
    objects = sorted(triples.objects(subject, predicate), key=_term_key)
    return objects[0] if objects else None


def is_declared_class(triples: RDFGraph, term: Optional[RDFNode]) -> bool:
    if term is None or isinstance(term, Literal):
        return False
    return any((term, RDF.type, class_type) in triples for class_type in CLASS_TYPES)


# ------------------------------
# Schema view
# ------------------------------


def schema_classes(triples: RDFGraph) -> List[RDFNode]:
    subjects: List[RDFNode] = []
    for class_type in CLASS_TYPES:
        subjects.extend(sorted(triples.subjects(RDF.type, class_type), key=_term_key))
    return dedupe_preserve(subjects)


def _schema_class_node(triples: RDFGraph, cls: RDFNode) -> GraphNode:
    cls_id = _identifier(cls)
    data_properties: List[DataProperty] = []
    object_properties: List[ObjectProperty] = []

    for prop in sorted(triples.subjects(RDFS.domain, cls), key=_term_key):
        prop_range = _first_object(triples, prop, RDFS.range)
        range_id = _identifier(prop_range) if prop_range is not None else None
        label = resolve_labels(triples, prop)
        if (prop, RDF.type, OWL.DatatypeProperty) in triples:
            data_properties.append(DataProperty(id=_identifier(prop), range=range_id, label=label))
        else:
            object_properties.append(ObjectProperty(id=_identifier(prop), range=range_id, label=label))

    # Synthetic ids keep edges apart when several classes share a superclass.
    for parent in sorted(triples.objects(cls, RDFS.subClassOf), key=_term_key):
        parent_id = _identifier(parent)
        object_properties.append(
            ObjectProperty(
                id=f"{RDFS.subClassOf}_{cls_id}_{parent_id}",
                range=parent_id,
                label=Multilingual(*SUBCLASS_LABEL),
            )
        )

    definition = resolve_definitions(triples, cls)
    return GraphNode(
        kind=CLASS,
        id=cls_id,
        label=resolve_labels(triples, cls),
        definition=None if definition.is_empty() else definition,
        data_properties=data_properties,
        object_properties=object_properties,
    )


def schema_edges(triples: RDFGraph) -> List[GraphEdge]:
    properties: List[RDFNode] = []
    for prop_type in PROPERTY_TYPES:
        properties.extend(sorted(triples.subjects(RDF.type, prop_type), key=_term_key))

    edges: List[GraphEdge] = []
    for prop in dedupe_preserve(properties):
        prop_range = _first_object(triples, prop, RDFS.range)
        if not is_declared_class(triples, prop_range):
            continue
        for domain in sorted(triples.objects(prop, RDFS.domain), key=_term_key):
            if not is_declared_class(triples, domain):
                continue
            edges.append(
                GraphEdge(
                    id=_identifier(prop),
                    source=_identifier(domain),
                    target=_identifier(prop_range),
                    label=resolve_labels(triples, prop),
                    predicate=_identifier(prop),
                )
            )
    return edges


def project_schema(triples: RDFGraph) -> GraphModel:
    """Classes become nodes; properties between declared classes become edges."""
    nodes = [_schema_class_node(triples, cls) for cls in schema_classes(triples)]
    return GraphModel(nodes=nodes, edges=schema_edges(triples))


# ------------------------------
# Instance view
# ------------------------------


def instance_candidates(triples: RDFGraph) -> List[RDFNode]:
    """Typed subjects plus blank nodes reached as objects, first-seen order."""
    candidates: List[RDFNode] = []
    for subject, predicate, obj in _ordered(triples):
        if predicate == RDF.type:
            candidates.append(subject)
        if isinstance(obj, BNode):
            candidates.append(obj)
    return dedupe_preserve(candidates)


def _instance_node(triples: RDFGraph, subject: RDFNode) -> GraphNode:
    subject_id = _identifier(subject)
    classes: List[ClassRef] = []
    data_properties: List[DataProperty] = []
    object_properties: List[ObjectProperty] = []

    for predicate, obj in _ordered(triples.predicate_objects(subject)):
        if predicate == RDF.type:
            classes.append(ClassRef(id=_identifier(obj)))
            continue
        try:
            kind = term_kind(obj)
        except TypeError:
            exc = UnhandledObjectKind(subject_id, str(predicate), obj)
            logging.warning("Skipping triple during instance projection: %s", exc)
            continue

        if kind == LITERAL:
            data_properties.append(
                DataProperty(
                    id=str(predicate),
                    value=str(obj),
                    label=resolve_labels(triples, predicate),
                )
            )
        else:
            object_properties.append(
                ObjectProperty(
                    id=str(predicate),
                    range=term_id(obj),
                    label=resolve_labels(triples, predicate),
                    range_label=resolve_labels(
                        triples, obj, RANGE_LABEL_PREDICATES, skip_id_fallback=True
                    ),
                )
            )

    # Blank nodes carry no literal labels of their own.
    if term_kind(subject) == BLANK:
        label = Multilingual(en="", sl="")
    else:
        label = resolve_labels(triples, subject, DCTERMS.title)

    return GraphNode(
        kind=INSTANCE,
        id=subject_id,
        label=label,
        data_properties=data_properties,
        object_properties=object_properties,
        classes=classes,
    )


def instance_edges(triples: RDFGraph, candidates: List[RDFNode]) -> List[GraphEdge]:
    members: Set[RDFNode] = set(candidates)
    edges: List[GraphEdge] = []
    for subject, predicate, obj in _ordered(triples):
        if predicate == RDF.type or isinstance(obj, Literal):
            continue
        if subject not in members or obj not in members:
            continue
        source = _identifier(subject)
        target = _identifier(obj)
        edges.append(
            GraphEdge(
                id=f"{predicate}_{source}_{target}",
                source=source,
                target=target,
                label=resolve_labels(triples, predicate),
                predicate=str(predicate),
            )
        )
    return edges


def project_instances(triples: RDFGraph) -> GraphModel:
    """Records (named and blank) become nodes; links between records become edges."""
    candidates = instance_candidates(triples)
    nodes = [_instance_node(triples, subject) for subject in candidates]
    return GraphModel(nodes=nodes, edges=instance_edges(triples, candidates))


@profile_time
def project(triples: RDFGraph, schema: bool = True) -> GraphModel:
    graph = project_schema(triples) if schema else project_instances(triples)
    logging.info(
        "Projected %s triple(s) into %s node(s) and %s edge(s) (%s view).",
        len(triples),
        len(graph.nodes),
        len(graph.edges),
        "schema" if schema else "instance",
    )
    return graph
