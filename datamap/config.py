"""Application configuration (endpoints, language, display limits)."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

LANGUAGES = ("en", "sl")

NAMESPACE_PREFIXES = {
    "http://www.w3.org/1999/02/22-rdf-syntax-ns#": "rdf",
    "http://www.w3.org/2000/01/rdf-schema#": "rdfs",
    "http://www.w3.org/2002/07/owl#": "owl",
    "http://www.w3.org/2004/02/skos/core#": "skos",
    "http://purl.org/dc/terms/": "dct",
    "http://xmlns.com/foaf/0.1/": "foaf",
    "http://www.w3.org/ns/csvw#": "csvw",
    "http://www.w3.org/ns/dcat#": "dcat",
}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


CONFIG: Dict[str, Any] = {
    "ENDPOINTS": {
        "local": "http://localhost:3030/pz",
        "remote": os.getenv("DATAMAP_SPARQL_ENDPOINT", "https://triplestore.lavbic.net/pz"),
    },
    "SELECTED_ENDPOINT": os.getenv("DATAMAP_ENDPOINT", "remote"),
    "SPARQL_PATH": "/sparql",
    "BASE_URI": "http://onto.mju.gov.si/podatkovni-zemljevid#",
    "REQUEST_TIMEOUT": float(os.getenv("DATAMAP_TIMEOUT", "60")),
    "DEBUG": _env_flag("DATAMAP_DEBUG", False),
    "LANGUAGE": os.getenv("DATAMAP_LANGUAGE", "sl"),
    "DISPLAY_SCHEMA": True,
    "INSTANCE_GRAPH": os.getenv("DATAMAP_INSTANCE_GRAPH", ""),
    "LABEL_MAX_LENGTH": 20,
    "MAX_CHILDREN_FOR_BLANK_LABEL": 25,
    "PRIORITY_PROPERTIES": [
        "http://purl.org/dc/terms/title",
        "http://purl.org/dc/terms/description",
        "http://purl.org/dc/terms/publisher",
    ],
}


def endpoint_url(config: Optional[Dict[str, Any]] = None) -> str:
    """Return the dataset URL of the selected endpoint."""
    cfg = config or CONFIG
    endpoints = cfg["ENDPOINTS"]
    selected = cfg.get("SELECTED_ENDPOINT", "remote")
    if selected not in endpoints:
        raise ValueError(f"Unknown endpoint '{selected}'. Choose one of: {', '.join(endpoints)}")
    return endpoints[selected].rstrip("/")
