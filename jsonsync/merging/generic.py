# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from ..identity import is_record_sequence
from ..log import debug, warning
from ..nodes import Missing, NodeKind, node_kind, strictly_equal
from ..sequences import union

from .config import MergeConfig

__all__ = ["merge"]


def merge(base, incoming, delete_if_missing=False, config=None):
    """Merge incoming into base, following 3 rules:

    - keep unchanged attributes
    - override base attributes with the ones of incoming
    - ignore attributes that don't exist in base

    Plus, an extra rule for lists of records:

    - if delete_if_missing is true, delete records of base that are
      missing in incoming
    - else, keep every record of base, and simply add the new ones

    When either side is a list, both are merged as lists, a value that
    is not a list counting as an empty one. A dict base is kept when
    incoming is not a dict.

    Dicts and lists of base are modified in place. The merged value is
    returned, which is base itself unless base has to be replaced as a
    whole. The incoming tree is never modified, and values taken from
    it are copied.
    """
    if config is None:
        config = MergeConfig()

    if incoming is Missing:
        return base

    kind = node_kind(base)
    incoming_kind = node_kind(incoming)
    if NodeKind.SEQUENCE in (kind, incoming_kind):
        if kind is not NodeKind.SEQUENCE:
            base = []
        if incoming_kind is not NodeKind.SEQUENCE:
            incoming = []
        merge_lists(base, incoming, delete_if_missing, config)
        return base
    elif kind is NodeKind.RECORD:
        if incoming_kind is NodeKind.RECORD:
            merge_dicts(base, incoming, delete_if_missing, config)
        else:
            debug("Keeping record, incoming value %r is not a record", incoming)
        return base

    # Scalar base
    if not strictly_equal(base, incoming):
        return copy.deepcopy(incoming)
    return base


def merge_dicts(base, incoming, delete_if_missing=False, config=None):
    """Merge dict incoming into dict base in place.

    Only keys already present in base are visited, keys only found in
    incoming are ignored.
    """
    if config is None:
        config = MergeConfig()

    if not isinstance(base, dict) or not isinstance(incoming, dict):
        raise TypeError('Arguments to merge_dicts need to be dicts, got %r and %r' % (base, incoming))

    for key in list(base.keys()):
        value = base[key]
        merged = merge(value, incoming.get(key, Missing), delete_if_missing, config)
        if merged is not value:
            base[key] = merged


def merge_lists(a1, a2, delete_if_missing=False, config=None):
    """Merge list a2 into list a1 in place.

    Lists of records are matched by identity: records of a2 missing in
    a1 are appended, matching records are merged recursively, and if
    delete_if_missing is true the records of a1 missing in a2 are
    deleted. Lists of scalars become the ordered union of both lists.
    """
    if config is None:
        config = MergeConfig()

    if delete_if_missing and not a2:
        del a1[:]
    elif is_record_sequence(a1, a2):
        _merge_record_lists(a1, a2, delete_if_missing, config)
    else:
        a1[:] = union(a1, copy.deepcopy(a2))


def _merge_record_lists(a1, a2, delete_if_missing, config):
    identity = config.identity
    compare = identity.compare
    key = identity.sort_key()

    # a1 is sorted in place, a2 belongs to the caller
    a1.sort(key=key)
    a2 = sorted(a2, key=key)

    n1 = len(a1)
    n2 = len(a2)
    i, j = 0, 0
    while j < n2:
        if i == n1:
            a1.append(copy.deepcopy(a2[j]))
            j += 1
            continue

        c = compare(a1[i], a2[j])
        if c > 0:
            a1.append(copy.deepcopy(a2[j]))
            j += 1
        elif c == 0:
            # Recurse to handle nested lists and records
            value = a1[i]
            merged = merge(value, a2[j], delete_if_missing, config)
            if merged is not value:
                a1[i] = merged
            i += 1
            j += 1
        elif c < 0:
            if delete_if_missing:
                del a1[i]
                n1 -= 1
            else:
                i += 1
        else:
            # Only reachable with unordered identities such as nan
            warning("Cannot match %r against %r, skipping incoming record", a1[i], a2[j])
            j += 1

    if delete_if_missing and config.prune_trailing and i < n1:
        debug("Pruning %d trailing records missing from incoming list", n1 - i)
        del a1[i:n1]
