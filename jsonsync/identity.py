# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Identity of records inside sequences.

Records (dicts) may carry an identifying field, ``"id"`` by default.
Two records with the same identity are considered to be versions of
the same entity, and sequences of records are matched up by sorting
them on their identities and walking them side by side.
"""

import functools
import numbers

from .log import IdentityError, warning
from .nodes import Missing, lookup, strictly_equal


__all__ = ["IdentityConfig", "compare", "is_record_sequence"]


DEFAULT_ID_KEY = "id"


def _is_number(x):
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


class IdentityConfig:
    """How to extract and order the identity of records.

    In the default lenient mode, a record without identity has the same
    rank as any other record, and non-numeric identities are ordered
    naturally when possible. In strict mode both situations raise an
    IdentityError instead.
    """

    def __init__(self, key=DEFAULT_ID_KEY, strict=False):
        self.key = key
        self.strict = strict

    def get_identity(self, record):
        "Return the identity of record, or Missing if it has none."
        value = lookup(record, self.key)
        if value is None:
            return Missing
        return value

    def has_identity(self, record):
        return self.get_identity(record) is not Missing

    def same_identity(self, a, b):
        "True if a and b have equal identities, or both lack one."
        return strictly_equal(self.get_identity(a), self.get_identity(b))

    def compare(self, a, b):
        """Compare two records according to their identity.

        Returns 0 if equal, > 0 if a sorts after b and < 0 if a sorts before b.
        """
        ida = self.get_identity(a)
        idb = self.get_identity(b)
        if ida is Missing or idb is Missing:
            if self.strict:
                raise IdentityError(
                    "Record without identity field %r: %r" % (
                        self.key, a if ida is Missing else b))
            return 0

        if _is_number(ida) and _is_number(idb):
            return ida - idb

        if self.strict:
            raise IdentityError(
                "Identities must be numbers, got %r and %r" % (ida, idb))
        try:
            return (ida > idb) - (ida < idb)
        except TypeError:
            warning("Cannot order identities %r and %r, treating them as equal",
                    ida, idb)
            return 0

    def sort_key(self):
        "A key function for sorted() and list.sort() ordering records by identity."
        return functools.cmp_to_key(self.compare)

    def tag(self, patch, record):
        "Copy the identity of record into patch, if it has one."
        identity = self.get_identity(record)
        if identity is not Missing:
            patch[self.key] = identity
        return patch

    def __repr__(self):
        return "IdentityConfig(key=%r, strict=%r)" % (self.key, self.strict)


DefaultIdentity = IdentityConfig()


def compare(a, b, config=None):
    """Compare two records according to their identity.

    Note: if either record has no identity, the records are treated as identical.

    Result:
      0 if equal
      > 0 if a sorts after b
      < 0 if a sorts before b
    """
    if config is None:
        config = DefaultIdentity
    return config.compare(a, b)


def is_record_sequence(a1, a2):
    "Check whether the first item of either list is a record."
    for a in (a1, a2):
        if isinstance(a, list) and a and isinstance(a[0], dict):
            return True
    return False
