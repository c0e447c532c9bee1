import pytest

from taskmatch.matching.hopcroft_karp import INFINITY, NIL, LayeredMatcher

from .utils import assert_valid_matching, build_matcher


class TestLayeredMatcher:
    """
    Testing the implementation of the Hopcroft Karp algorithm.
    """

    @pytest.mark.parametrize(
        '   worker_count,   task_count, graph,                                                          expected',
        [
            (5,             5,          {1: [1, 2], 2: [1, 5], 3: [3, 4], 4: [1, 5], 5: [1, 4]},        5),
            (7,             7,          {1: [1, 2], 2: [2, 3], 3: [2], 4: [3, 4, 5, 6], 5: [4, 7],
                                         6: [7], 7: [7]},                                               6),
            (4,             5,          {1: [1, 3], 2: [1, 3], 3: [3, 2], 4: [5]},                      4),
            (8,             8,          {1: [3, 4], 2: [3, 4], 3: [3], 4: [1, 5, 7], 5: [1, 2, 7],
                                         6: [2, 8], 7: [6], 8: [2, 4, 8]},                              7),
        ]
    )  # yapf: disable
    def test_hopcroft_karp(self, worker_count, task_count, graph, expected):
        edges = [(worker, task) for worker, tasks in graph.items() for task in tasks]
        matcher = build_matcher(LayeredMatcher, worker_count, task_count, edges)
        result = matcher.run()
        assert result.match_count == expected
        assert_valid_matching(result.pairs, edges, worker_count, task_count)

    def test_pairs_are_inverse(self):
        edges = [(1, 1), (1, 2), (2, 1), (3, 3), (4, 2), (4, 4)]
        matcher = build_matcher(LayeredMatcher, 4, 4, edges)
        matcher.run()
        for worker, task in enumerate(matcher._pair_worker):
            if worker != NIL and task != NIL:
                assert matcher._pair_task[task] == worker
        for task, worker in enumerate(matcher._pair_task):
            if task != NIL and worker != NIL:
                assert matcher._pair_worker[worker] == task

    def test_phases(self):
        edges = [(1, 1), (1, 2), (2, 1), (3, 3), (4, 2), (4, 4)]
        result = build_matcher(LayeredMatcher, 4, 4, edges).run()
        assert result.steps == [
            "Initialize all vertices as free",
            "While there exists an augmenting path:",
            "  Found augmenting paths using BFS",
            "  Updated matching using DFS (current size: 3)",
            "  Found augmenting paths using BFS",
            "  Updated matching using DFS (current size: 4)",
            "Maximum bipartite matching size: 4",
        ]

    def test_no_augmenting_path(self):
        result = LayeredMatcher(2, 2).run()
        assert result.steps == [
            "Initialize all vertices as free",
            "While there exists an augmenting path:",
            "Maximum bipartite matching size: 0",
        ]

    def test_failed_worker_is_pruned(self):
        matcher = build_matcher(LayeredMatcher, 2, 1, [(1, 1), (2, 1)])
        assert matcher._bfs()
        assert matcher._dfs(1)
        assert not matcher._dfs(2)
        assert matcher._distance[2] == INFINITY

    def test_long_alternating_path(self):
        # Every worker first takes the task of its successor, which leaves the last worker with a single
        # augmenting path through the whole chain.
        n = 3000
        edges = []
        for worker in range(1, n):
            edges.append((worker, worker + 1))
            edges.append((worker, worker))
        edges.append((n, n))
        matcher = build_matcher(LayeredMatcher, n, n, edges)
        result = matcher.run()
        assert result.match_count == n
        assert result.pairs == [(worker, worker) for worker in range(1, n + 1)]
