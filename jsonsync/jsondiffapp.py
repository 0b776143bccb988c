# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_output_args,
    ConfigBackedParser, diff_config_from_args, prettyprint_config_from_args,
    )
from .diffing import difference
from .log import DocumentError, IdentityError, error
from .prettyprint import pretty_print_document_patch
from .utils import EXPLICIT_MISSING_FILE, read_document, write_document, setup_std_streams


_description = "Compute the changes from a base json document to a target document."


def main_diff(args):
    """Main handler of diff CLI"""
    base_filename = args.base
    target_filename = args.target
    output = getattr(args, 'out', None)

    for fn in (base_filename, target_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_document(base_filename, on_null='empty')
        b = read_document(target_filename, on_null='empty')
    except DocumentError as e:
        error(str(e))
        return 1

    config = diff_config_from_args(args)
    try:
        d = difference(a, b, args.add_if_equal, config=config)
    except IdentityError as e:
        error(str(e))
        return 1

    if output:
        write_document(d, output)
    elif args.as_json:
        write_document(d, sys.stdout)
    else:
        ppconfig = prettyprint_config_from_args(args)
        pretty_print_document_patch(base_filename, target_filename, a, d, ppconfig)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsonsync-diff',
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_filename_args(parser, ["base", "target"])
    add_output_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
