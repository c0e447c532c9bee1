# -*- coding: utf-8 -*-
from hopcroftkarp import HopcroftKarp

LEFT = 0
RIGHT = 1


def assert_valid_matching(pairs, edges, worker_count, task_count):
    workers = [worker for worker, _ in pairs]
    tasks = [task for _, task in pairs]
    assert len(set(workers)) == len(workers), "A worker is matched more than once"
    assert len(set(tasks)) == len(tasks), "A task is matched more than once"
    for pair in pairs:
        assert pair in set(edges), "Matching contains an edge that was not in the graph"
    assert len(pairs) <= min(worker_count, task_count)


def reference_matching_size(edges):
    """Returns the size of a maximum matching as computed by the ``hopcroftkarp`` package."""
    directed_graph = {}
    for worker, task in edges:
        directed_graph.setdefault((LEFT, worker), set()).add((RIGHT, task))
    if not directed_graph:
        return 0
    matching = HopcroftKarp(directed_graph).maximum_matching()
    return sum(1 for tail in matching if tail[0] == LEFT)


def build_matcher(matcher_class, worker_count, task_count, edges):
    matcher = matcher_class(worker_count, task_count)
    for worker, task in edges:
        matcher.add_edge(worker, task)
    return matcher
