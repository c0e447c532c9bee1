# -*- coding: utf-8 -*-
import pytest

import taskmatch


@pytest.fixture(autouse=True)
def add_default_names(doctest_namespace):
    doctest_namespace['__name__'] = '__main__'

    for name in taskmatch.__all__:
        doctest_namespace[name] = getattr(taskmatch, name)
