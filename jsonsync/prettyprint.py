# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .identity import IdentityConfig
from .nodes import Missing, strictly_equal


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            id_key='id',
            ):
        self.out = out
        self.use_color = use_color
        self.identity = IdentityConfig(id_key)

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


class Printer:
    "Writes text with print(), where pytest's capsys can capture it."
    def write(self, text):
        print(text, end="")


def file_timestamp(filename):
    "Return modification time for filename as a string."
    try:
        t = os.path.getmtime(filename)
    except OSError:
        return "(no timestamp)"
    return datetime.datetime.fromtimestamp(t).isoformat(" ")


def format_value(v):
    "Format simple value for printing. Uses pprint for non-strings."
    return v if isinstance(v, str) else pprint.pformat(v)


def write_lines(text, prefix, config):
    for line in text.splitlines() or [""]:
        config.out.write(prefix + line + "\n")


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly nested value with all lines prefixed.

    Dicts are printed as key/value lines, lists on a single line when
    they fit, and one item per line otherwise.
    """
    if isinstance(value, dict):
        pretty_print_dict(value, prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        write_lines(format_value(value), prefix, config)


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or "/", config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, (dict, list)):
        config.out.write("%s%s:\n" % (prefix, k))
        pretty_print_value(v, prefix + IND, config)
        return
    vstr = format_value(v)
    if "\n" in vstr:
        config.out.write("%s%s:\n" % (prefix, k))
        write_lines(vstr, prefix + IND, config)
    else:
        config.out.write("%s%s: %s\n" % (prefix, k, vstr))


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    fits = len(prefix) + len(listr) < MAXWIDTH
    if fits and "\n" not in listr and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for i, v in enumerate(li):
            pretty_print_item("item[%d]" % i, v, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys, sorted by key

    Instead of {'key': 'value'}, do

        key: value
        key:
          nested: value

    """
    for k in sorted(d):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_document(doc, config=DefaultConfig):
    "Pretty-print a json document."
    pretty_print_value(doc, "", config)


def pretty_print_replacement(a, b, path, config=DefaultConfig):
    if a is Missing:
        pretty_print_diff_action("added", path, config)
    else:
        if type(a) is not type(b):
            typechange = " (type changed from %s to %s)" % (
                a.__class__.__name__, b.__class__.__name__)
        else:
            typechange = ""
        pretty_print_diff_action("replaced" + typechange, path, config)
        pretty_print_value(a, config.REMOVE, config)
    pretty_print_value(b, config.ADD, config)
    config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_dict_patch(a, p, path, config=DefaultConfig):
    "Pretty-print a patch of a dict."
    identity = config.identity
    for key in sorted(p):
        aval = a.get(key, Missing)
        pval = p[key]
        if key == identity.key and strictly_equal(aval, pval):
            # Identity tag of the patch, not a change
            continue
        nextpath = "/".join((path, str(key)))
        if isinstance(aval, (dict, list)) and type(aval) is type(pval):
            pretty_print_patch(aval, pval, nextpath, config)
        else:
            pretty_print_replacement(aval, pval, nextpath, config)


class _IdentityIndex:
    """Positions of the records of a list, looked up by identity.

    Unhashable identities, such as lists, are searched linearly.
    """

    def __init__(self, records, identity):
        self.records = records
        self.identity = identity
        self.positions = {}
        for i, record in enumerate(records):
            value = identity.get_identity(record)
            if value is Missing:
                continue
            try:
                self.positions.setdefault(self._key(value), i)
            except TypeError:
                pass

    @staticmethod
    def _key(value):
        # Keeps True and 1 apart
        return (type(value) is bool, value)

    def find(self, record):
        "Position of the record with the identity of record, or None."
        value = self.identity.get_identity(record)
        if value is Missing:
            return None
        try:
            return self.positions.get(self._key(value))
        except TypeError:
            for i, other in enumerate(self.records):
                if strictly_equal(self.identity.get_identity(other), value):
                    return i
            return None


def pretty_print_list_patch(a, p, path, config=DefaultConfig):
    "Pretty-print a patch of a list, matching records by identity."
    identity = config.identity
    if not p:
        if a:
            pretty_print_diff_action("emptied", path, config)
            pretty_print_value(a, config.REMOVE, config)
            config.out.write(DIFF_ENTRY_END + config.RESET)
        return

    index = _IdentityIndex(a, identity)
    added = []
    for item in p:
        i = index.find(item)
        if i is None:
            added.append(item)
        else:
            pretty_print_patch(a[i], item, "/".join((path, str(i))), config)

    if added:
        pretty_print_diff_action("inserted", path, config)
        pretty_print_value(added, config.ADD, config)
        config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_patch(a, p, path="", config=DefaultConfig):
    "Pretty-print a patch computed by difference against its base a."
    if p is None:
        return
    if isinstance(a, dict) and isinstance(p, dict):
        pretty_print_dict_patch(a, p, path, config)
    elif isinstance(a, list) and isinstance(p, list):
        pretty_print_list_patch(a, p, path, config)
    else:
        pretty_print_replacement(a, p, path, config)


document_diff_header = """\
jsonsync diff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_document_patch(afn, bfn, a, p, config=DefaultConfig):
    """Pretty-print the patch between two documents

    Parameters
    ----------

    afn: str
        Filename of a, the base document
    bfn: str
        Filename of b, the target document
    a: dict or list
        The base document
    p: patch
        The patch describing the changes from a to b
    config: PrettyPrintConfig
        Config object determining how and where things get printed
    """
    if p is not None:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(document_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(a, p, "", config)
