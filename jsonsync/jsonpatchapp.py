# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_identity_args, add_filename_args,
    add_output_args, merge_config_from_args, prettyprint_config_from_args,
    )
from .log import DocumentError, IdentityError, error
from .merging import merge
from .prettyprint import pretty_print_document
from .utils import EXPLICIT_MISSING_FILE, read_document, write_document, setup_std_streams


_description = "Apply a patch from jsonsync diff to a json document."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.out

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        before = read_document(base_filename, on_null='empty')
        patch = read_document(patch_filename, on_null='none')
    except DocumentError as e:
        error(str(e))
        return 1

    # A patch only adds and updates, it never deletes
    config = merge_config_from_args(args)
    if patch is None:
        # Empty patch from an unchanged document
        after = before
    else:
        try:
            after = merge(before, patch, False, config=config)
        except IdentityError as e:
            error(str(e))
            return 1

    if output_filename:
        write_document(after, output_filename)
    elif args.as_json:
        write_document(after, sys.stdout)
    else:
        config = prettyprint_config_from_args(args)
        pretty_print_document(after, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsonsync-patch',
        add_help=True,
        )
    add_generic_args(parser)
    add_identity_args(parser)
    add_filename_args(parser, ["base", "patch"])
    add_output_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
