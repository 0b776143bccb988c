# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    prettyprint_config_from_args,
    )
from .log import DocumentError, error
from .prettyprint import pretty_print_document
from .utils import read_document, setup_std_streams


_description = "Show a json document in a human-readable form."


def main_show(args):
    fn = args.document
    if not os.path.exists(fn):
        print("Missing file {}".format(fn))
        return 1

    try:
        doc = read_document(fn)
    except DocumentError as e:
        error(str(e))
        return 1

    config = prettyprint_config_from_args(args)
    pretty_print_document(doc, config)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the show command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsonsync-show',
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document"])
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
