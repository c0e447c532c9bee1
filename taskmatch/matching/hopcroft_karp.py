import logging
import math
from collections import deque
from typing import Deque, List

from .common import Matcher, Pair

__all__ = ['LayeredMatcher']

logger = logging.getLogger(__name__)

NIL = 0
INFINITY = math.inf


class LayeredMatcher(Matcher):
    """Implementation of the Hopcroft-Karp algorithm on a bipartite graph.

    The matching is kept directly on the bipartite adjacency. Each phase runs a layered breadth-first search
    from all free workers to find the length of the shortest augmenting paths, followed by a depth-first search
    from every free worker which realizes vertex-disjoint augmenting paths of exactly that length.

    The vertex id 0 is used as the ``NIL`` vertex that every unmatched worker and task is paired with. Reaching it
    means an augmenting path has been found.

    The internal algorithm does not use sets in order to keep identical results across different Python versions.
    """

    name = 'hopcroft-karp'

    def __init__(self, worker_count: int, task_count: int) -> None:
        super().__init__(worker_count, task_count)
        self._adjacency = [[] for _ in range(worker_count + 1)]  # type: List[List[int]]
        self._pair_worker = [NIL] * (worker_count + 1)  # type: List[int]
        self._pair_task = [NIL] * (task_count + 1)  # type: List[int]
        self._distance = [INFINITY] * (worker_count + 1)  # type: List[float]

    def _add_edge(self, worker: int, task: int) -> None:
        self._adjacency[worker].append(task)

    def _run(self) -> int:
        self._trace("Initialize all vertices as free")
        self._trace("While there exists an augmenting path:")
        matchings = 0
        phase = 0
        while self._bfs():
            phase += 1
            self._trace("  Found augmenting paths using BFS")
            for worker in range(1, self.worker_count + 1):
                if self._pair_worker[worker] == NIL and self._dfs(worker):
                    matchings += 1
            logger.debug("Phase %d: shortest augmenting path length %d", phase, self._distance[NIL])
            self._trace("  Updated matching using DFS (current size: {})".format(matchings))
        self._trace("Maximum bipartite matching size: {}".format(matchings))
        return matchings

    def _matching(self) -> List[Pair]:
        return [(worker, task) for worker, task in enumerate(self._pair_worker) if worker != NIL and task != NIL]

    def _bfs(self) -> bool:
        distance = self._distance
        vertex_queue = deque()  # type: Deque[int]
        for worker in range(1, self.worker_count + 1):
            if self._pair_worker[worker] == NIL:
                distance[worker] = 0
                vertex_queue.append(worker)
            else:
                distance[worker] = INFINITY
        distance[NIL] = INFINITY
        while vertex_queue:
            worker = vertex_queue.popleft()
            if distance[worker] >= distance[NIL]:
                continue
            for task in self._adjacency[worker]:
                other_worker = self._pair_task[task]
                if distance[other_worker] == INFINITY:
                    distance[other_worker] = distance[worker] + 1
                    if other_worker != NIL:
                        vertex_queue.append(other_worker)
        return distance[NIL] != INFINITY

    def _swap(self, worker: int, task: int) -> None:
        self._pair_worker[worker] = task
        self._pair_task[task] = worker

    def _dfs(self, root: int) -> bool:
        distance = self._distance
        # Each frame is a worker on the alternating path and the index of the next task to try
        stack = [[root, 0]]
        tasks = []  # type: List[int]
        while stack:
            frame = stack[-1]
            worker, index = frame
            adjacent = self._adjacency[worker]
            descended = False
            while index < len(adjacent):
                task = adjacent[index]
                index += 1
                other_worker = self._pair_task[task]
                if distance[other_worker] != distance[worker] + 1:
                    continue
                tasks.append(task)
                if other_worker == NIL:
                    for (path_worker, _), path_task in zip(stack, tasks):
                        self._swap(path_worker, path_task)
                    return True
                frame[1] = index
                stack.append([other_worker, 0])
                descended = True
                break
            if descended:
                continue
            distance[worker] = INFINITY
            stack.pop()
            if tasks:
                tasks.pop()
        return False
