# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from enum import Enum


class _MissingType(object):
    """Marks a key that is absent from a dict.

    None is a valid json value (null), so it cannot be used for this.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_MissingType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Missing"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


# Sentinel to allow None as a value
Missing = _MissingType()


class NodeKind(Enum):
    "The three shapes a json-like tree node can take."
    SCALAR = "scalar"
    RECORD = "record"
    SEQUENCE = "sequence"


def node_kind(value):
    "Classify a json-like value as record (dict), sequence (list) or scalar."
    if isinstance(value, dict):
        return NodeKind.RECORD
    elif isinstance(value, list):
        return NodeKind.SEQUENCE
    else:
        return NodeKind.SCALAR


def lookup(obj, key):
    """Get obj[key], or Missing if obj is not a dict or lacks the key."""
    if isinstance(obj, dict):
        return obj.get(key, Missing)
    return Missing


def strictly_equal(a, b):
    """Compare two json-like values without mixing up booleans and numbers.

    Plain == holds for 1 and True, or 0 and False, which are different
    json values. Containers are compared element by element.
    """
    kind = node_kind(a)
    if kind is not node_kind(b):
        return False
    if kind is NodeKind.RECORD:
        return a.keys() == b.keys() and all(strictly_equal(a[k], b[k]) for k in a)
    elif kind is NodeKind.SEQUENCE:
        return len(a) == len(b) and all(strictly_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b
