"""Find a re-queryable named ancestor for a blank instance node."""

from __future__ import annotations

from typing import NamedTuple, Optional

from datamap.models import GraphModel, GraphNode
from datamap.terms import is_blank_id

MAX_LEVELS = 2


class BlankAncestor(NamedTuple):
    uri: str
    level: int


def find_referencing_node(graph: GraphModel, target_id: str) -> Optional[GraphNode]:
    for node in graph.nodes:
        if any(prop.range == target_id for prop in node.object_properties):
            return node
    return None


def resolve_blank_ancestor(previous_graph: Optional[GraphModel], blank_id: str) -> Optional[BlankAncestor]:
    """Nearest named node that references ``blank_id``, at most two hops up.

    A named ``blank_id`` is returned as-is at level 0. Returns ``None`` when
    no named ancestor exists within two hops.
    """
    if not blank_id:
        return None
    if not is_blank_id(blank_id):
        return BlankAncestor(blank_id, 0)
    if previous_graph is None:
        return None

    current = blank_id
    for level in range(1, MAX_LEVELS + 1):
        referrer = find_referencing_node(previous_graph, current)
        if referrer is None:
            return None
        if not is_blank_id(referrer.id):
            return BlankAncestor(referrer.id, level)
        current = referrer.id
    return None
