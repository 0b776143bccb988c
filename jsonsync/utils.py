# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

import colorama

from .log import DocumentError

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_document(f, on_null='empty'):
    """Read and return a json document from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
        on_null: What to return when filename null
            "empty": return empty dict
            "none": return None
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null == 'empty':
            return {}
        elif on_null == 'none':
            return None
        else:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are "empty" or "none"' % (on_null,))
    try:
        if isinstance(f, str):
            with io.open(f, encoding='utf-8') as fo:
                return json.load(fo)
        return json.load(f)
    except ValueError as e:
        name = f if isinstance(f, str) else getattr(f, 'name', repr(f))
        raise DocumentError('Not a valid json document: %s (%s)' % (name, e))


def write_document(obj, f):
    "Write obj as indented json to filename or file-like object f."
    if isinstance(f, str):
        with io.open(f, 'w', encoding='utf-8') as fo:
            write_document(obj, fo)
        return
    json.dump(obj, f, indent=2, separators=(",", ": "))
    f.write("\n")


def setup_std_streams():
    """Setup sys.stdout/err for the command line entry points

    - characters the console encoding cannot represent are escaped,
      instead of raising errors
    - ANSI color escapes are translated by colorama on Windows
    """
    if not os.getenv('PYTHONIOENCODING'):
        for stream in (sys.stdout, sys.stderr):
            if stream is not sys.__stdout__ and stream is not sys.__stderr__:
                # captured or redirected output
                continue
            errors = getattr(stream, 'errors', None) or 'strict'
            if hasattr(stream, 'reconfigure') and (
                    errors == 'strict' or errors.startswith('surrogate')):
                stream.reconfigure(errors='backslashreplace')
    if sys.platform.startswith('win'):
        colorama.init()
