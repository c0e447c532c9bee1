# -*- coding: utf-8 -*-
"""Contains the flow based matching algorithm.

The bipartite graph is turned into a flow network with a source connected to every worker and every task
connected to a sink. All arcs have a capacity of 1, so the maximum flow through the network is exactly the size
of a maximum matching. The flow is found with the Edmonds-Karp algorithm, i.e. by repeatedly augmenting along
shortest paths in the residual graph.
"""
import logging
from collections import deque
from enum import Enum
from typing import Deque, Dict, List, Optional, Tuple

from .common import Matcher, Pair

__all__ = ['EdgeKind', 'FlowMatcher']

logger = logging.getLogger(__name__)

Arc = Tuple[int, int]


class EdgeKind(Enum):
    """Provenance of an arc in the flow network."""

    source = 'source'
    assignment = 'assignment'
    sink = 'sink'

    def __repr__(self):
        return "{!s}.{!s}".format(type(self).__name__, self._name_)


class FlowMatcher(Matcher):
    """Maximum bipartite matching via maximum flow.

    The vertices of the network are numbered as follows:

    - ``0`` is the source,
    - ``1`` to ``worker_count`` are the workers,
    - ``worker_count + 1`` to ``worker_count + task_count`` are the tasks and
    - ``worker_count + task_count + 1`` is the sink.

    Every arc is stored together with its reverse arc, which starts with a residual capacity of 0. The kind of
    each original arc is recorded so that saturated worker-task arcs can be told apart from reverse arcs when
    the matching is extracted.

    >>> matcher = FlowMatcher(2, 2)
    >>> matcher.add_edge(1, 2)
    >>> matcher.source, matcher.sink
    (0, 5)
    >>> matcher.capacity(1, 4), matcher.capacity(4, 1)
    (1, 0)
    """

    name = 'edmonds-karp'

    def __init__(self, worker_count: int, task_count: int) -> None:
        super().__init__(worker_count, task_count)
        self.source = 0
        self.sink = worker_count + task_count + 1
        self._adjacency = [[] for _ in range(self.sink + 1)]  # type: List[List[int]]
        self._capacity = {}  # type: Dict[Arc, int]
        self._kinds = {}  # type: Dict[Arc, EdgeKind]
        self._trace("Create residual graph with source and sink")

        for worker in range(1, worker_count + 1):
            self.add_arc(self.source, worker, EdgeKind.source)
        self._trace("Source ({}) connected to all workers with capacity 1".format(self.source))

        for task in range(1, task_count + 1):
            self.add_arc(self._task_vertex(task), self.sink, EdgeKind.sink)
        self._trace("All tasks connected to sink with capacity 1")

    def _task_vertex(self, task: int) -> int:
        return self.worker_count + task

    def capacity(self, tail: int, head: int) -> int:
        """Returns the current residual capacity of the arc from *tail* to *head*."""
        return self._capacity.get((tail, head), 0)

    def kind(self, tail: int, head: int) -> Optional[EdgeKind]:
        """Returns the kind of the original arc from *tail* to *head* or ``None`` if there is none."""
        return self._kinds.get((tail, head))

    def add_arc(self, tail: int, head: int, kind: EdgeKind, capacity: int=1) -> None:
        """Adds an arc with the given *capacity* to the network.

        Both directions are registered in the adjacency, the reverse direction with a residual capacity of 0.
        Adding an arc that already exists does nothing.

        Raises:
            TypeError:
                If one of the vertices is not an integer.
            ValueError:
                If one of the vertices is not in the network or the arc is a loop.
            RuntimeError:
                If the matcher has already been run.
        """
        for vertex in (tail, head):
            if not isinstance(vertex, int) or isinstance(vertex, bool):
                raise TypeError("The vertex must be an integer, not {!r}".format(vertex))
            if not self.source <= vertex <= self.sink:
                raise ValueError("Invalid vertex {}: must be in range [{}, {}]".format(vertex, self.source, self.sink))
        if tail == head:
            raise ValueError("Invalid arc {} -> {}: loops are not allowed".format(tail, head))
        self._check_not_run()
        arc = (tail, head)
        if arc in self._kinds:
            logger.debug("Ignoring duplicate arc %d -> %d", tail, head)
            return
        self._adjacency[tail].append(head)
        self._adjacency[head].append(tail)
        self._kinds[arc] = kind
        self._capacity[arc] = capacity
        self._capacity.setdefault((head, tail), 0)

    def add_worker_task_edge(self, worker: int, task: int) -> None:
        """Adds the arc from *worker* to *task*, offsetting the task by the number of workers.

        Raises:
            TypeError:
                If one of the ids is not an integer.
            ValueError:
                If one of the ids is out of range.
            RuntimeError:
                If the matcher has already been run.
        """
        self._check_edge(worker, task)
        self._add_edge(worker, task)

    def _add_edge(self, worker: int, task: int) -> None:
        self.add_arc(worker, self._task_vertex(task), EdgeKind.assignment)

    def _bfs(self) -> Optional[Dict[int, int]]:
        """Finds a shortest augmenting path.

        Returns:
            The predecessor of every visited vertex or ``None`` if the sink cannot be reached.
        """
        parent = {self.source: self.source}  # type: Dict[int, int]
        vertex_queue = deque([self.source])  # type: Deque[int]
        while vertex_queue:
            tail = vertex_queue.popleft()
            for head in self._adjacency[tail]:
                if head in parent or self._capacity[tail, head] <= 0:
                    continue
                parent[head] = tail
                if head == self.sink:
                    return parent
                vertex_queue.append(head)
        return None

    def _path(self, parent: Dict[int, int]) -> List[Arc]:
        path = []
        head = self.sink
        while head != self.source:
            tail = parent[head]
            path.append((tail, head))
            head = tail
        return path

    def _augment(self, path: List[Arc]) -> int:
        bottleneck = min(self._capacity[arc] for arc in path)
        for tail, head in path:
            self._capacity[tail, head] -= bottleneck
            self._capacity[head, tail] += bottleneck
        return bottleneck

    def _run(self) -> int:
        self._trace("Workers connected to tasks based on input edges")
        self._trace("While there exists an augmenting path:")
        max_flow = 0
        iteration = 0
        while True:
            parent = self._bfs()
            if parent is None:
                break
            iteration += 1
            self._trace("Iteration {}: Found augmenting path using BFS".format(iteration))
            path = self._path(parent)
            bottleneck = self._augment(path)
            self._trace("  Bottleneck capacity: {}".format(bottleneck))
            self._trace("  Updated residual capacities")
            max_flow += bottleneck
            vertices = [tail for tail, _ in reversed(path)] + [self.sink]
            logger.debug("Augmenting path %s", ' -> '.join(map(str, vertices)))
            self._trace("  Current max flow: {}".format(max_flow))
        self._trace("Maximum flow: {}".format(max_flow))
        return max_flow

    def _matching(self) -> List[Pair]:
        pairs = []
        for worker in range(1, self.worker_count + 1):
            for vertex in sorted(self._adjacency[worker]):
                arc = (worker, vertex)
                if self._kinds.get(arc) is EdgeKind.assignment and self._capacity[arc] == 0:
                    pairs.append((worker, vertex - self.worker_count))
        return pairs
