"""Serialization of graph models for consumers (JSON elements, NetworkX)."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import networkx as nx

from datamap.models import GraphEdge, GraphModel, GraphNode, Multilingual


def _multilingual(value: Optional[Multilingual]) -> Optional[Dict[str, str]]:
    return value.to_dict() if value is not None else None


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value not in (None, [], {})}


def _serialize_node(node: GraphNode) -> Dict[str, Any]:
    data = {
        "type": node.kind,
        "id": node.id,
        "label": _multilingual(node.label),
        "definition": _multilingual(node.definition),
        "classes": [
            _compact(
                {
                    "id": c.id,
                    "label": _multilingual(c.label),
                    "definition": _multilingual(c.definition),
                }
            )
            for c in node.classes
        ],
        "dataProperties": [
            _compact(
                {
                    "id": p.id,
                    "value": p.value,
                    "range": p.range,
                    "label": _multilingual(p.label),
                }
            )
            for p in node.data_properties
        ],
        "objectProperties": [
            _compact(
                {
                    "id": p.id,
                    "range": p.range,
                    "label": _multilingual(p.label),
                    "rangeLabel": _multilingual(p.range_label),
                }
            )
            for p in node.object_properties
        ],
    }
    return {"data": _compact(data)}


def _serialize_edge(edge: GraphEdge) -> Dict[str, Any]:
    return {
        "data": _compact(
            {
                "id": edge.id,
                "source": edge.source,
                "target": edge.target,
                "label": _multilingual(edge.label),
                "predicate": edge.predicate,
            }
        )
    }


def graph_to_elements(graph: GraphModel) -> List[Dict[str, Any]]:
    """Nodes then edges, each wrapped as ``{"data": {...}}``."""
    return [_serialize_node(n) for n in graph.nodes] + [_serialize_edge(e) for e in graph.edges]


def graph_to_dict(graph: GraphModel) -> Dict[str, Any]:
    return {
        "nodes": [_serialize_node(n) for n in graph.nodes],
        "edges": [_serialize_edge(e) for e in graph.edges],
    }


def graph_to_json(graph: GraphModel, indent: Optional[int] = 2) -> str:
    return json.dumps(graph_to_dict(graph), ensure_ascii=False, indent=indent)


def graph_to_networkx(graph: GraphModel, language: str = "en") -> nx.MultiDiGraph:
    """Directed multigraph keyed by edge id; edges to unknown nodes are skipped."""
    G = nx.MultiDiGraph()
    for node in graph.nodes:
        label = node.label.get(language) if node.label is not None else None
        G.add_node(
            node.id,
            kind=node.kind,
            label=label or "",
            classes=[c.id for c in node.classes],
            data_properties={p.id: p.value for p in node.data_properties if p.value is not None},
        )
    for edge in graph.edges:
        if edge.source not in G or edge.target not in G:
            continue
        label = edge.label.get(language) if edge.label is not None else None
        G.add_edge(edge.source, edge.target, key=edge.id, label=label or "", predicate=edge.predicate)
    return G
