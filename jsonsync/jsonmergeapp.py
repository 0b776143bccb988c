# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_merge_args, add_filename_args, add_output_args,
    ConfigBackedParser, merge_config_from_args, prettyprint_config_from_args,
    )
from .log import DocumentError, IdentityError, error, info
from .merging import merge
from .prettyprint import pretty_print_document
from .utils import EXPLICIT_MISSING_FILE, read_document, write_document, setup_std_streams


_description = ("Merge an incoming json document into a base document. "
                "Only attributes already present in base are updated.")


def main_merge(args):
    """Main handler of merge CLI"""
    base_filename = args.base
    incoming_filename = args.incoming
    output = getattr(args, 'out', None)

    for fn in (base_filename, incoming_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        base = read_document(base_filename, on_null='empty')
        incoming = read_document(incoming_filename, on_null='empty')
    except DocumentError as e:
        error(str(e))
        return 1

    config = merge_config_from_args(args)
    try:
        merged = merge(base, incoming, args.delete_if_missing, config=config)
    except IdentityError as e:
        error(str(e))
        return 1

    if output:
        write_document(merged, output)
        info("Merged document written to %s", output)
    elif args.as_json:
        write_document(merged, sys.stdout)
    else:
        ppconfig = prettyprint_config_from_args(args)
        pretty_print_document(merged, ppconfig)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the merge command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsonsync-merge',
        )
    add_generic_args(parser)
    add_merge_args(parser)
    add_filename_args(parser, ["base", "incoming"])
    add_output_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_merge(arguments)


if __name__ == "__main__":
    sys.exit(main())
