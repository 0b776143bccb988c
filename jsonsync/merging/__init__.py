# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import MergeConfig
from .generic import merge

__all__ = ["merge", "MergeConfig"]
