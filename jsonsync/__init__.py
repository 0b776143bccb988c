# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .identity import compare, IdentityConfig
from .diffing import difference, DiffConfig
from .merging import merge, MergeConfig
from .log import JsonSyncError, IdentityError
from .nodes import Missing


__all__ = [
    "__version__",
    "compare", "IdentityConfig",
    "difference", "DiffConfig",
    "merge", "MergeConfig",
    "JsonSyncError", "IdentityError",
    "Missing",
    ]
