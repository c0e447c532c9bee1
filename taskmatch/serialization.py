# -*- coding: utf-8 -*-
"""Reading bipartite graphs from and writing matching results to JSON documents.

An input document looks like this::

    {"workers": 2, "tasks": 1, "edges": [{"from": 1, "to": 1}, {"from": 2, "to": 1}]}

The result document contains the size of the matching, the matched pairs and the trace of the algorithm::

    {"maxMatching": 1, "matches": [{"from": 1, "to": 1}], "steps": [...]}
"""
import json
import logging
from typing import IO, Any, Dict

from .matching.bipartite import BipartiteGraph
from .matching.common import MatchingResult

__all__ = ['load_graph', 'loads_graph', 'dump_result', 'dumps_result']

logger = logging.getLogger(__name__)


def _get_int(document: Dict[str, Any], key: str, where: str) -> int:
    try:
        value = document[key]
    except KeyError:
        raise ValueError("Missing {!r} in {}".format(key, where)) from None
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError("Expected an integer for {!r} in {}, got {!r}".format(key, where, value))
    return value


def graph_from_dict(document: Dict[str, Any]) -> BipartiteGraph:
    """Creates a `BipartiteGraph` from a decoded input document.

    Raises:
        ValueError:
            If the document is malformed or an edge references an unknown worker or task.
    """
    if not isinstance(document, dict):
        raise ValueError("The input document must be a JSON object")
    workers = _get_int(document, 'workers', 'input document')
    tasks = _get_int(document, 'tasks', 'input document')
    raw_edges = document.get('edges', [])
    if not isinstance(raw_edges, list):
        raise ValueError("Expected a list for 'edges'")
    edges = []
    for index, raw_edge in enumerate(raw_edges):
        where = 'edge #{:d}'.format(index)
        if not isinstance(raw_edge, dict):
            raise ValueError("Expected an object for {}".format(where))
        edges.append((_get_int(raw_edge, 'from', where), _get_int(raw_edge, 'to', where)))
    logger.debug("Read graph with %d workers, %d tasks and %d edges", workers, tasks, len(edges))
    return BipartiteGraph(workers, tasks, edges)


def loads_graph(text: str) -> BipartiteGraph:
    """Parses a JSON input document.

    >>> loads_graph('{"workers": 1, "tasks": 1, "edges": [{"from": 1, "to": 1}]}')
    BipartiteGraph(1, 1, [(1, 1)])
    """
    return graph_from_dict(json.loads(text))


def load_graph(fp: IO[str]) -> BipartiteGraph:
    """Reads a JSON input document from the file object *fp*."""
    return graph_from_dict(json.load(fp))


def result_to_dict(result: MatchingResult) -> Dict[str, Any]:
    return {
        'maxMatching': result.match_count,
        'matches': [{'from': worker, 'to': task} for worker, task in result.pairs],
        'steps': list(result.steps),
    }


def dumps_result(result: MatchingResult) -> str:
    """Encodes the *result* as an indented JSON document."""
    return json.dumps(result_to_dict(result), indent=2) + '\n'


def dump_result(result: MatchingResult, fp: IO[str]) -> None:
    """Writes the *result* as an indented JSON document to the file object *fp*."""
    fp.write(dumps_result(result))
