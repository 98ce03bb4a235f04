"""Data models for projected graph structures."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

CLASS = "class"
INSTANCE = "instance"


@dataclass
class Multilingual:
    en: Optional[str] = None
    sl: Optional[str] = None

    def get(self, language: str) -> Optional[str]:
        if language not in ("en", "sl"):
            return None
        return getattr(self, language)

    def is_empty(self) -> bool:
        return not self.en and not self.sl

    def to_dict(self) -> Dict[str, str]:
        return {lang: value for lang, value in (("en", self.en), ("sl", self.sl)) if value is not None}

    @classmethod
    def same(cls, value: str) -> "Multilingual":
        return cls(en=value, sl=value)


@dataclass
class DataProperty:
    id: str
    label: Optional[Multilingual] = None
    value: Optional[str] = None
    range: Optional[str] = None


@dataclass
class ObjectProperty:
    id: str
    range: Optional[str]
    label: Optional[Multilingual] = None
    range_label: Optional[Multilingual] = None


@dataclass
class ClassRef:
    id: str
    label: Optional[Multilingual] = None
    definition: Optional[Multilingual] = None


@dataclass
class GraphNode:
    kind: str
    id: str
    label: Optional[Multilingual] = None
    definition: Optional[Multilingual] = None
    data_properties: List[DataProperty] = field(default_factory=list)
    object_properties: List[ObjectProperty] = field(default_factory=list)
    classes: List[ClassRef] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Graph nodes need a non-empty id.")


@dataclass
class GraphEdge:
    id: str
    source: str
    target: str
    label: Optional[Multilingual] = None
    predicate: Optional[str] = None


@dataclass
class GraphModel:
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)

    def elements(self) -> Iterator[Union[GraphNode, GraphEdge]]:
        """Nodes first, then edges, in projection order."""
        yield from self.nodes
        yield from self.edges

    def find_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    def __len__(self) -> int:
        return len(self.nodes) + len(self.edges)

    def summary(self) -> Dict[str, Any]:
        return {"nodes": len(self.nodes), "edges": len(self.edges)}
