# -*- coding: utf-8 -*-
"""Contains all the necessary classes and functions for maximum bipartite matching."""

from importlib.metadata import PackageNotFoundError, version

# pylint: disable=wildcard-import
from . import matching
from . import serialization

from .matching import *
from .serialization import *

__all__ = matching.__all__ + serialization.__all__

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "dev"
