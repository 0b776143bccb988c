# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Set operations on flat lists of json values.

Membership is tested with strictly_equal, so values do not need to be
hashable, and booleans are told apart from the numbers 0 and 1.
"""

from .nodes import Missing, strictly_equal


def _contains(sequence, value):
    return any(strictly_equal(value, item) for item in sequence)


def union(*sequences):
    """Ordered union of sequences.

    Keeps the order in which values are first seen, and drops
    repeated values.
    """
    result = []
    for seq in sequences:
        for value in seq:
            if not _contains(result, value):
                result.append(value)
    return result


def difference_of(a, b):
    "Values of a not present in b, keeping the order and repetitions of a."
    return [value for value in a if not _contains(b, value)]


def is_empty(value):
    if value is None or value is Missing:
        return True
    if isinstance(value, (dict, list, tuple, set, str)):
        return len(value) == 0
    return False
