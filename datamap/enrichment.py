"""Attach schema labels and definitions to a projected instance graph."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from datamap.labels import id_from_uri
from datamap.models import GraphModel, Multilingual


def _fallback(uri: str) -> Multilingual:
    return Multilingual.same(id_from_uri(uri))


def class_label(schema: GraphModel, uri: str) -> Multilingual:
    node = schema.find_node(uri)
    if node is not None and node.label is not None:
        return replace(node.label)
    return _fallback(uri)


def class_definition(schema: GraphModel, uri: str) -> Optional[Multilingual]:
    node = schema.find_node(uri)
    if node is None or node.definition is None:
        return None
    return replace(node.definition)


def property_label(schema: GraphModel, uri: str) -> Multilingual:
    """Label of a data property, else an object property, declared in the schema."""
    for node in schema.nodes:
        for prop in node.data_properties:
            if prop.id == uri and prop.label is not None:
                return replace(prop.label)
    for node in schema.nodes:
        for prop in node.object_properties:
            if prop.id == uri and prop.label is not None:
                return replace(prop.label)
    return _fallback(uri)


def connection_label(schema: GraphModel, predicate: str) -> Multilingual:
    for element in schema.elements():
        if element.id == predicate and element.label is not None:
            return replace(element.label)
    return _fallback(predicate)


def enrich_instances(graph: GraphModel, schema: GraphModel) -> GraphModel:
    """Replace raw instance labels with copies of the schema labels (in place)."""
    for node in graph.nodes:
        for class_ref in node.classes:
            class_ref.label = class_label(schema, class_ref.id)
            definition = class_definition(schema, class_ref.id)
            if definition is not None:
                class_ref.definition = definition
        for data_property in node.data_properties:
            data_property.label = property_label(schema, data_property.id)
        for object_property in node.object_properties:
            object_property.label = property_label(schema, object_property.id)
    for edge in graph.edges:
        edge.label = connection_label(schema, edge.predicate or edge.id)
    return graph
