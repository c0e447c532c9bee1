# -*- coding: utf-8 -*-
"""Contains the contract shared by all matching algorithms.

Every algorithm is a subclass of `Matcher`. A matcher is used for exactly one run:

>>> matcher = LayeredMatcher(2, 1)
>>> matcher.add_edge(1, 1)
>>> matcher.add_edge(2, 1)
>>> matcher.run().match_count
1
"""
import logging
from abc import ABCMeta, abstractmethod
from typing import List, NamedTuple, Optional, Tuple

__all__ = ['Matcher', 'MatchingResult']

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]

MatchingResult = NamedTuple('MatchingResult', [('match_count', int), ('pairs', List[Pair]), ('steps', List[str])])


def _check_count(name: str, count: int) -> None:
    if not isinstance(count, int) or isinstance(count, bool):
        raise TypeError("The {} count must be an integer, not {!r}".format(name, count))
    if count < 0:
        raise ValueError("The {} count cannot be negative".format(name))


def _check_vertex(name: str, vertex: int, count: int) -> None:
    if not isinstance(vertex, int) or isinstance(vertex, bool):
        raise TypeError("The {} id must be an integer, not {!r}".format(name, vertex))
    if not 1 <= vertex <= count:
        raise ValueError("Invalid {} id {}: must be in range [1, {}]".format(name, vertex, count))


class Matcher(metaclass=ABCMeta):
    """Base class for maximum bipartite matching algorithms.

    Workers and tasks are numbered starting from 1. Subclasses implement `_add_edge`, `_run` and `_matching`,
    the validation of vertex ids and the run-once protocol are handled here.

    Args:
        worker_count:
            The number of workers (left part of the graph).
        task_count:
            The number of tasks (right part of the graph).

    Raises:
        TypeError:
            If one of the counts is not an integer.
        ValueError:
            If one of the counts is negative.
    """

    name = None  # type: str

    def __init__(self, worker_count: int, task_count: int) -> None:
        _check_count('worker', worker_count)
        _check_count('task', task_count)
        self.worker_count = worker_count
        self.task_count = task_count
        self.steps = []  # type: List[str]
        self._result = None  # type: Optional[MatchingResult]

    def add_edge(self, worker: int, task: int) -> None:
        """Allows the given *worker* to be assigned to the given *task*.

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

    def _check_edge(self, worker: int, task: int) -> None:
        _check_vertex('worker', worker, self.worker_count)
        _check_vertex('task', task, self.task_count)
        self._check_not_run()

    def _check_not_run(self) -> None:
        if self._result is not None:
            raise RuntimeError("Cannot add edges to a matcher that has already been run")

    def run(self) -> MatchingResult:
        """Computes a maximum matching.

        The algorithm is only executed on the first call, subsequent calls return the same result.

        Returns:
            The size of the matching, the matched pairs ordered by worker and the trace of the run.
        """
        if self._result is None:
            logger.debug("Running %s on %d workers and %d tasks", self.name, self.worker_count, self.task_count)
            match_count = self._run()
            pairs = self._matching()
            assert len(pairs) == match_count, "Matching size does not match the number of augmentations"
            self._result = MatchingResult(match_count, pairs, list(self.steps))
        return self._result

    def matching(self) -> List[Pair]:
        """Returns the matched ``(worker, task)`` pairs of the run."""
        return list(self.run().pairs)

    def _trace(self, step: str) -> None:
        self.steps.append(step)
        logger.debug("%s: %s", self.name, step.strip())

    @abstractmethod
    def _add_edge(self, worker: int, task: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def _run(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def _matching(self) -> List[Pair]:
        raise NotImplementedError
