"""HTTP client for the triple store (Fuseki-style SPARQL endpoint)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
from rdflib import Graph as RDFGraph

from datamap.config import CONFIG, endpoint_url
from datamap.errors import QueryExecutionFailure
from datamap.queries import GRAPH_DISCOVERY_QUERY
from datamap.utils import profile_time


class SparqlClient:
    """Runs queries against ``<dataset>/sparql`` and parses the responses.

    CONSTRUCT results are requested as Turtle and parsed into an rdflib graph;
    SELECT results are returned as SPARQL JSON. Every transport, HTTP or parse
    problem is raised as ``QueryExecutionFailure``; nothing is retried.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = (endpoint or endpoint_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else CONFIG["REQUEST_TIMEOUT"]
        self.session = session

    @property
    def query_url(self) -> str:
        path = CONFIG["SPARQL_PATH"]
        if self.endpoint.endswith(path):
            return self.endpoint
        return self.endpoint + path

    def _get(self, query: str, accept: str) -> requests.Response:
        getter = self.session.get if self.session is not None else requests.get
        try:
            resp = getter(
                self.query_url,
                params={"query": query},
                headers={"Accept": accept},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise QueryExecutionFailure(
                f"SPARQL request to {self.query_url} failed: {exc}",
                query=query,
                endpoint=self.endpoint,
            ) from exc
        return resp

    @profile_time
    def construct(self, query: str) -> RDFGraph:
        resp = self._get(query, "text/turtle")
        triples = RDFGraph()
        try:
            triples.parse(data=resp.text, format="turtle", publicID=CONFIG["BASE_URI"])
        except Exception as exc:
            raise QueryExecutionFailure(
                f"Could not parse Turtle response from {self.query_url}: {exc}",
                query=query,
                endpoint=self.endpoint,
            ) from exc
        if CONFIG["DEBUG"]:
            logging.debug("SPARQL query      : %s", query)
            logging.debug("Number of results : %s", len(triples))
        return triples

    def select(self, query: str) -> Dict[str, Any]:
        resp = self._get(query, "application/sparql-results+json")
        try:
            return resp.json()
        except ValueError as exc:
            raise QueryExecutionFailure(
                f"Could not parse SPARQL JSON response from {self.query_url}: {exc}",
                query=query,
                endpoint=self.endpoint,
            ) from exc

    def list_graphs(self) -> List[str]:
        """Named graphs known to the store."""
        data = self.select(GRAPH_DISCOVERY_QUERY)
        try:
            bindings = data["results"]["bindings"]
            graphs = [row["graph"]["value"] for row in bindings if "graph" in row]
        except (KeyError, TypeError) as exc:
            raise QueryExecutionFailure(
                f"Unexpected graph listing from {self.query_url}: {exc}",
                query=GRAPH_DISCOVERY_QUERY,
                endpoint=self.endpoint,
            ) from exc
        logging.info("Discovered %s named graph(s) at %s.", len(graphs), self.endpoint)
        return graphs
