"""Exceptions raised while loading and projecting graphs."""

from __future__ import annotations

from typing import Any, Optional


class DataMapError(Exception):
    pass


class QueryExecutionFailure(DataMapError):
    """The triple store could not execute a query or its response could not be parsed."""

    def __init__(self, message: str, query: Optional[str] = None, endpoint: Optional[str] = None):
        super().__init__(message)
        self.query = query
        self.endpoint = endpoint


class UnhandledObjectKind(DataMapError):
    """An RDF object term of a kind the projectors do not know how to place."""

    def __init__(self, subject: str, predicate: str, term: Any):
        super().__init__(
            f"Unhandled object kind {type(term).__name__} for ({subject}, {predicate})"
        )
        self.subject = subject
        self.predicate = predicate
        self.term = term
