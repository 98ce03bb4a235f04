"""Display text for graph elements (labels, property order, URIs).

These helpers only produce strings; layout and drawing belong to the
rendering layer.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, TypeVar, Union

from datamap.blank_nodes import find_referencing_node
from datamap.config import CONFIG, NAMESPACE_PREFIXES
from datamap.labels import id_from_uri
from datamap.models import INSTANCE, DataProperty, GraphModel, GraphNode, ObjectProperty
from datamap.terms import CSVW, is_blank_id

P = TypeVar("P", DataProperty, ObjectProperty)


def trim_with_dots(text: str, max_length: Optional[int] = None) -> str:
    """Shorten ``text`` to ``max_length`` by replacing its middle with ``...``."""
    max_length = max_length or CONFIG["LABEL_MAX_LENGTH"]
    if len(text) <= max_length:
        return text
    trim_length = max_length - 3
    start_length = math.ceil(trim_length / 2)
    end_length = math.floor(trim_length / 2)
    end = text[len(text) - end_length :] if end_length > 0 else ""
    return text[:start_length] + "..." + end


def split_into_lines(text: str, max_length: Optional[int] = None) -> List[str]:
    """Greedy word wrap; more than two lines collapse to first + ' ...' and last."""
    max_length = max_length or CONFIG["LABEL_MAX_LENGTH"]
    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        if len(current) + len(word) <= max_length:
            current += word + " "
        else:
            if current.strip():
                lines.append(current.strip())
            current = word + " "
    if current.strip():
        lines.append(current.strip())

    if len(lines) > 2:
        lines = [lines[0] + " ...", lines[-1]]
    return lines


def _data_value(node: GraphNode, property_id: str) -> Optional[str]:
    for prop in node.data_properties:
        if prop.id == property_id:
            return prop.value
    return None


def node_display_label(
    node: GraphNode,
    graph: Optional[GraphModel],
    language: Optional[str] = None,
    blank_as_data_property: bool = True,
    dots_for_lengthy: bool = True,
) -> str:
    """Text shown on a node.

    Nodes without a label in ``language`` fall back to their csvw:title,
    csvw:name or first data value. With ``blank_as_data_property`` off, blank
    instances still get that fallback when the node referencing them has few
    enough object properties.
    """
    language = language or CONFIG["LANGUAGE"]
    if not blank_as_data_property and is_blank_id(node.id) and node.kind == INSTANCE and graph is not None:
        referrer = find_referencing_node(graph, node.id)
        if referrer is not None and len(referrer.object_properties) <= CONFIG["MAX_CHILDREN_FOR_BLANK_LABEL"]:
            blank_as_data_property = True

    text = (node.label.get(language) if node.label is not None else None) or ""
    label = "\n".join(split_into_lines(text)).strip()

    if blank_as_data_property and not label and node.data_properties:
        fallback = (
            _data_value(node, str(CSVW.title))
            or _data_value(node, str(CSVW.name))
            or node.data_properties[0].value
            or ""
        )
        label = "\n".join(split_into_lines(fallback)).strip()

    if dots_for_lengthy and label and "\n" not in label:
        label = trim_with_dots(label)
    return label


def sort_properties(properties: Sequence[P], language: Optional[str] = None) -> List[P]:
    """Alphabetical by label, with the configured priority properties first."""
    language = "sl" if (language or CONFIG["LANGUAGE"]) == "sl" else "en"

    def _key(prop: Union[DataProperty, ObjectProperty]) -> str:
        if prop.label is None:
            return ""
        return (prop.label.get(language) or "").lower()

    ordered = sorted(properties, key=_key)
    for priority_id in reversed(CONFIG["PRIORITY_PROPERTIES"]):
        for index, prop in enumerate(ordered):
            if prop.id == priority_id:
                ordered.insert(0, ordered.pop(index))
                break
    return ordered


def format_uri(uri: str, hide_prefix: bool = False) -> str:
    """Local name only, or the URI shortened with a known namespace prefix."""
    if hide_prefix:
        return id_from_uri(uri)
    for namespace, prefix in NAMESPACE_PREFIXES.items():
        if uri.startswith(namespace) and len(uri) > len(namespace):
            return f"{prefix}:{uri[len(namespace):]}"
    return uri
