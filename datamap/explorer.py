"""Single entry point: fetch a bounded neighbourhood and project it to a graph."""

from __future__ import annotations

import copy
import logging
import threading
from typing import List, Optional

from datamap.blank_nodes import resolve_blank_ancestor
from datamap.enrichment import enrich_instances
from datamap.models import GraphModel
from datamap.projection import project
from datamap.queries import build_query
from datamap.store import SparqlClient
from datamap.terms import is_blank_id


class GraphExplorer:
    """Loads schema and instance graphs from one triple store.

    The explorer owns the graph produced by the last successful ``load`` (used
    to re-anchor blank-node focuses) and a cached whole-schema graph (used to
    label instance graphs). Loads are serialized, and a failed load leaves
    both untouched.
    """

    def __init__(
        self,
        client: Optional[SparqlClient] = None,
        schema_graph: Optional[GraphModel] = None,
    ):
        self.client = client if client is not None else SparqlClient()
        self._schema = schema_graph
        self._current: Optional[GraphModel] = None
        self._lock = threading.Lock()

    @property
    def current(self) -> Optional[GraphModel]:
        return self._current

    def reset(self) -> None:
        with self._lock:
            self._current = None
            self._schema = None

    def schema_model(self) -> GraphModel:
        """Whole-schema graph, fetched on first use and cached.

        Callers get their own copy; the cached graph is never handed out.
        """
        with self._lock:
            return copy.deepcopy(self._schema_model())

    def _schema_model(self) -> GraphModel:
        # Caller holds the lock.
        if self._schema is None:
            triples = self.client.construct(build_query())
            self._schema = project(triples, schema=True)
        return self._schema

    def _scope(self, named_graph: Optional[str], schema: bool) -> List[str]:
        if named_graph:
            return [named_graph]
        if not schema:
            return self.client.list_graphs()
        return []

    def load(
        self,
        focus: Optional[str] = None,
        named_graph: Optional[str] = None,
        schema: bool = True,
        expansion_level: int = 0,
    ) -> GraphModel:
        with self._lock:
            graph = self._load(focus, named_graph, schema, expansion_level)
            self._current = graph
            logging.info("Loaded graph %s.", graph.summary())
            return graph

    def _load(
        self,
        focus: Optional[str],
        named_graph: Optional[str],
        schema: bool,
        expansion_level: int,
    ) -> GraphModel:
        if focus and is_blank_id(focus):
            ancestor = resolve_blank_ancestor(self._current, focus)
            if ancestor is None:
                logging.warning("No named ancestor within two hops of blank node %s.", focus)
                return GraphModel()
            logging.info("Re-anchoring blank node %s at %s (level %s).", focus, ancestor.uri, ancestor.level)
            focus, expansion_level = ancestor.uri, ancestor.level

        if schema and not focus and not named_graph:
            return copy.deepcopy(self._schema_model())

        query = build_query(focus, self._scope(named_graph, schema), schema, expansion_level)
        triples = self.client.construct(query)
        graph = project(triples, schema=schema)
        if not schema:
            enrich_instances(graph, self._schema_model())
        return graph
