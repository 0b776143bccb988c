# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..identity import is_record_sequence
from ..log import debug, warning
from ..nodes import Missing, NodeKind, node_kind, strictly_equal
from ..sequences import difference_of, is_empty

from .config import DiffConfig

__all__ = ["difference"]


def difference(a, b, add_if_equal=False, config=None):
    """Compare two json-like objects and return the differences.

    The result is a patch holding only the attributes of b that differ
    from a, or None if nothing changed. Records in patches keep their
    identity field, so that the patch can be merged back into a.

    When add_if_equal is true, records of lists that are equal in a and
    b are still added to the result as identity-only markers.

    Records of a missing in b are never part of the result, differences
    express additions and updates only. Neither a nor b are modified.
    """
    if config is None:
        config = DiffConfig()

    kind = node_kind(a)
    if kind is NodeKind.SEQUENCE and node_kind(b) is kind:
        result = diff_lists(a, b, [], add_if_equal, config)
    elif kind is NodeKind.RECORD and node_kind(b) is kind:
        result = diff_dicts(a, b, {}, config)
        if result:
            config.identity.tag(result, a)
    elif not strictly_equal(a, b):
        # Scalars, or values of different shapes
        return b
    else:
        return None

    if is_empty(result):
        return None
    return result


def diff_dicts(a, b, result, config=None):
    """Compute the modified attributes of dict b compared to dict a into result.

    The dicts are compared only if their identities are equal (or both
    missing). Only the keys of a are visited.
    """
    if config is None:
        config = DiffConfig()

    identity = config.identity
    if not identity.same_identity(a, b):
        debug("Not comparing records with different identities %r and %r",
              identity.get_identity(a), identity.get_identity(b))
        return result

    for key, avalue in a.items():
        bvalue = b.get(key, Missing)
        if bvalue is Missing:
            continue
        kind = node_kind(avalue)
        if kind is NodeKind.SEQUENCE and node_kind(bvalue) is kind:
            subresult = diff_lists(avalue, bvalue, [], True, config)
            # An emptied list is a change, an empty diff otherwise is not
            if subresult or (avalue and not bvalue):
                result[key] = subresult
        elif kind is NodeKind.RECORD and node_kind(bvalue) is kind:
            subresult = diff_dicts(avalue, bvalue, {}, config)
            if subresult:
                result[key] = identity.tag(subresult, avalue)
        elif not strictly_equal(avalue, bvalue):
            result[key] = bvalue

    return result


def diff_lists(a, b, result, add_if_equal=False, config=None):
    """Compute the modified items of list b compared to list a into result.

    Lists of records are matched by identity: new records of b are
    added as they are, matching records as patches. Lists of scalars
    give the values of b not found in a.
    """
    if config is None:
        config = DiffConfig()

    if not is_record_sequence(a, b):
        result.extend(difference_of(b, a))
        return result

    identity = config.identity
    compare = identity.compare
    key = identity.sort_key()
    a = sorted(a, key=key)
    b = sorted(b, key=key)

    n1 = len(a)
    n2 = len(b)
    i, j = 0, 0
    while j < n2:
        if i == n1:
            result.append(b[j])
            j += 1
            continue

        c = compare(a[i], b[j])
        if c > 0:
            # Records of b missing in a are added to the result
            result.append(b[j])
            j += 1
        elif c == 0:
            if isinstance(a[i], dict) and isinstance(b[j], dict):
                subresult = diff_dicts(a[i], b[j], {}, config)
                if subresult or add_if_equal:
                    result.append(identity.tag(subresult, a[i]))
            elif not strictly_equal(a[i], b[j]):
                result.append(b[j])
            i += 1
            j += 1
        elif c < 0:
            # Records of a missing in b are not added to the result
            i += 1
        else:
            warning("Cannot match %r against %r, skipping new record", a[i], b[j])
            j += 1

    return result
