# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from jsonsync import difference, merge


def normalized(value, id_key="id"):
    "Sort lists of records by identity, recursively, to compare trees regardless of list order."
    if isinstance(value, dict):
        return {k: normalized(v, id_key) for k, v in value.items()}
    elif isinstance(value, list):
        items = [normalized(v, id_key) for v in value]
        if items and all(isinstance(v, dict) and id_key in v for v in items):
            items.sort(key=lambda v: v[id_key])
        return items
    return value


def check_difference_and_merge(a, b):
    "Check that merge(a, difference(a, b)) updates the keys of a to the values of b."
    a = copy.deepcopy(a)
    b_before = copy.deepcopy(b)
    d = difference(a, b)
    if d is None:
        merged = a
    else:
        merged = merge(a, d)
    assert b == b_before
    if isinstance(merged, dict) and isinstance(b, dict):
        for key in merged:
            if key in b:
                assert normalized(merged[key]) == normalized(b[key])
    else:
        assert normalized(merged) == normalized(b)
    return d


def check_merge_idempotent(a, b, delete_if_missing=False):
    "Check that merging b into a twice gives the same result as merging once."
    once = merge(copy.deepcopy(a), b, delete_if_missing)
    twice = merge(merge(copy.deepcopy(a), b, delete_if_missing), b, delete_if_missing)
    assert once == twice
    return once
