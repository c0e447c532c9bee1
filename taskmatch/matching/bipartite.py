# -*- coding: utf-8 -*-
"""Contains classes and functions related to bipartite graphs.

The `BipartiteGraph` class represents a bipartite instance of workers, tasks and the allowed pairings between them.
In particular, `BipartiteGraph.find_matching()` can be used to find a maximum matching in such a graph with any of
the algorithms registered in `ALGORITHMS`.
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple, Type

try:
    from graphviz import Graph
except ImportError:
    Graph = None

from .common import Matcher, MatchingResult, _check_count, _check_vertex
from .edmonds_karp import FlowMatcher
from .hopcroft_karp import LayeredMatcher

__all__ = ['ALGORITHMS', 'BipartiteGraph', 'get_matcher']

Edge = Tuple[int, int]

ALGORITHMS = {
    LayeredMatcher.name: LayeredMatcher,
    FlowMatcher.name: FlowMatcher,
}  # type: Dict[str, Type[Matcher]]

DEFAULT_ALGORITHM = LayeredMatcher.name


def get_matcher(name: str) -> Type[Matcher]:
    """Returns the matcher class registered for the algorithm *name*.

    >>> get_matcher('edmonds-karp')
    <class 'taskmatch.matching.edmonds_karp.FlowMatcher'>

    Raises:
        ValueError:
            If there is no algorithm with that name.
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            "Unknown algorithm {!r}, expected one of: {}".format(name, ', '.join(sorted(ALGORITHMS)))
        ) from None


class BipartiteGraph:
    """A bipartite graph of workers and tasks.

    Workers and tasks are numbered starting from 1. Each edge is a ``(worker, task)`` tuple. The graph cannot be
    changed after it has been constructed. Duplicate edges are kept, they do not change the matching.

    >>> graph = BipartiteGraph(2, 1, [(1, 1), (2, 1)])
    >>> (2, 1) in graph
    True
    >>> graph.find_matching().match_count
    1

    Raises:
        TypeError:
            If a count or a vertex id is not an integer.
        ValueError:
            If a count is negative or an edge references a vertex outside of the graph.
    """

    __slots__ = ('_worker_count', '_task_count', '_edges')

    def __init__(self, worker_count: int, task_count: int, edges: Iterable[Edge]=()) -> None:
        _check_count('worker', worker_count)
        _check_count('task', task_count)
        self._worker_count = worker_count
        self._task_count = task_count
        checked_edges = []
        for edge in edges:
            if not isinstance(edge, tuple) or len(edge) != 2:
                raise TypeError("The edge must be a 2-tuple")
            worker, task = edge
            _check_vertex('worker', worker, worker_count)
            _check_vertex('task', task, task_count)
            checked_edges.append(edge)
        self._edges = tuple(checked_edges)

    @property
    def worker_count(self) -> int:
        return self._worker_count

    @property
    def task_count(self) -> int:
        return self._task_count

    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self):
        return len(self._edges)

    def __contains__(self, edge):
        return edge in self._edges

    def __eq__(self, other):
        if not isinstance(other, BipartiteGraph):
            return NotImplemented
        return (self._worker_count, self._task_count, self._edges) == \
            (other._worker_count, other._task_count, other._edges)

    def __hash__(self):
        return hash((self._worker_count, self._task_count, self._edges))

    def __repr__(self):
        return '{!s}({!r}, {!r}, {!r})'.format(
            type(self).__name__, self._worker_count, self._task_count, list(self._edges)
        )

    def matcher(self, algorithm: str=DEFAULT_ALGORITHM) -> Matcher:
        """Returns a matcher for the given *algorithm* that has been fed all edges of this graph."""
        matcher = get_matcher(algorithm)(self._worker_count, self._task_count)
        for worker, task in self._edges:
            matcher.add_edge(worker, task)
        return matcher

    def find_matching(self, algorithm: str=DEFAULT_ALGORITHM) -> MatchingResult:
        """Finds a maximum matching in the bipartite graph.

        Args:
            algorithm:
                The name of the algorithm to use, either ``'hopcroft-karp'`` or ``'edmonds-karp'``.

        Returns:
            The size of the matching, the matched ``(worker, task)`` pairs and the trace of the algorithm.
        """
        return self.matcher(algorithm).run()

    def as_graph(self, matching: Optional[Iterable[Edge]]=None) -> Graph:
        """Returns a :class:`graphviz.Graph` representation of this bipartite graph.

        Edges contained in the given *matching* are highlighted.
        """
        if Graph is None:
            raise ImportError('The graphviz package is required to draw the graph.')
        matched = set(matching or ())
        graph = Graph(graph_attr={'rankdir': 'LR'})
        workers = Graph(graph_attr={'rank': 'same'})
        for worker in range(1, self._worker_count + 1):
            workers.node('w{:d}'.format(worker), label='W{:d}'.format(worker), shape='circle')
        tasks = Graph(graph_attr={'rank': 'same'})
        for task in range(1, self._task_count + 1):
            tasks.node('t{:d}'.format(task), label='T{:d}'.format(task), shape='box')
        graph.subgraph(workers)
        graph.subgraph(tasks)
        drawn = set()
        for edge in self._edges:
            if edge in drawn:
                continue
            drawn.add(edge)
            worker, task = edge
            if edge in matched:
                graph.edge('w{:d}'.format(worker), 't{:d}'.format(task), color='green', penwidth='2')
            else:
                graph.edge('w{:d}'.format(worker), 't{:d}'.format(task), color='gray')
        return graph
