# -*- coding: utf-8 -*-
import pytest

from taskmatch.matching.bipartite import ALGORITHMS


def pytest_generate_tests(metafunc):
    if 'matcher_class' in metafunc.fixturenames:
        metafunc.parametrize('matcher_class', sorted(ALGORITHMS), indirect=True)
    if 'algorithm' in metafunc.fixturenames:
        metafunc.parametrize('algorithm', sorted(ALGORITHMS))


@pytest.fixture
def matcher_class(request):
    try:
        return ALGORITHMS[request.param]
    except KeyError:
        raise ValueError("Invalid internal test config")
