# -*- coding: utf-8 -*-
"""Contains the maximum bipartite matching algorithms in the submodules."""

from . import common
from . import edmonds_karp
from . import hopcroft_karp
from . import bipartite

# pylint: disable=wildcard-import
from .common import *
from .edmonds_karp import *
from .hopcroft_karp import *
from .bipartite import *

__all__ = common.__all__ + edmonds_karp.__all__ + hopcroft_karp.__all__ + bipartite.__all__
