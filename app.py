#!/usr/bin/env python
"""
Data Map Explorer - command line entrypoint.

Loads a schema or instance neighbourhood from the configured triple store and
prints the projected graph as JSON.
"""

import json
import logging
from typing import Optional

import click

from datamap.config import CONFIG, endpoint_url
from datamap.errors import QueryExecutionFailure
from datamap.explorer import GraphExplorer
from datamap.export import graph_to_dict, graph_to_elements
from datamap.store import SparqlClient


@click.command()
@click.option("--endpoint", default=None, help="Dataset URL of the triple store (defaults to the selected endpoint).")
@click.option("--graph", "named_graph", default=None, help="Named graph to restrict the query to.")
@click.option("--focus", default=None, help="Class or instance URI to centre the neighbourhood on.")
@click.option("--schema/--instances", default=None, help="Project the schema or the instance view (default: DISPLAY_SCHEMA).")
@click.option("--level", type=click.IntRange(0, 2), default=0, show_default=True, help="Expansion level for instance queries.")
@click.option("--elements", is_flag=True, help="Print a flat list of node and edge elements.")
@click.option("--output", type=click.Path(dir_okay=False, writable=True), default=None, help="Write JSON to a file.")
@click.option("--debug", is_flag=True, help="Log queries and result sizes.")
def main(
    endpoint: Optional[str],
    named_graph: Optional[str],
    focus: Optional[str],
    schema: Optional[bool],
    level: int,
    elements: bool,
    output: Optional[str],
    debug: bool,
) -> None:
    if debug:
        CONFIG["DEBUG"] = True
        logging.getLogger().setLevel(logging.DEBUG)
    if schema is None:
        schema = CONFIG["DISPLAY_SCHEMA"]
    if not named_graph and not schema:
        named_graph = CONFIG["INSTANCE_GRAPH"] or None

    explorer = GraphExplorer(SparqlClient(endpoint or endpoint_url()))
    try:
        graph = explorer.load(focus=focus, named_graph=named_graph, schema=schema, expansion_level=level)
    except QueryExecutionFailure as exc:
        raise click.ClickException(str(exc)) from exc
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    payload = graph_to_elements(graph) if elements else graph_to_dict(graph)
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
        click.echo(f"Wrote {len(graph.nodes)} node(s) and {len(graph.edges)} edge(s) to {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
