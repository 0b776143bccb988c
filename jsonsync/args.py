# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .diffing import DiffConfig
from .identity import IdentityConfig
from .log import init_logging, set_jsonsync_log_level
from .merging import MergeConfig


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsonsync_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsonsync_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsonsync commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_identity_args(parser):
    """Adds a set of arguments controlling how records are identified.
    """
    parser.add_argument(
        '--id-key',
        default='id',
        help="the name of the field identifying records in lists.")
    parser.add_argument(
        '--strict-ids',
        action='store_true',
        default=False,
        help="fail on records without identity or with non-numeric "
             "identities, instead of treating them as equal.")


def add_diff_args(parser):
    """Adds a set of arguments for commands that compute differences.
    """
    add_identity_args(parser)
    parser.add_argument(
        '--add-if-equal',
        action='store_true',
        default=False,
        help="include identity-only entries for unchanged records "
             "of top-level lists.")


def add_merge_args(parser):
    """Adds a set of arguments for commands that perform merges.
    """
    add_identity_args(parser)
    parser.add_argument(
        '--delete-if-missing',
        action='store_true',
        default=False,
        help="delete records of base lists that are missing in the "
             "incoming lists.")
    parser.add_argument(
        '--keep-trailing',
        dest='prune_trailing',
        action='store_false',
        default=True,
        help="with --delete-if-missing, keep the base records "
             "sorting after the last incoming record.")


filename_help = {
    "document": "The json document filename.",
    "base":     "The base json document filename.",
    "target":   "The target json document filename.",
    "incoming": "The incoming json document filename.",
    "patch":    "The patch filename, output from jsonsync diff.",
    }


def add_filename_args(parser, names):
    """Add the base, target, incoming, and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_output_args(parser):
    parser.add_argument(
        '-o', '--out',
        default=None,
        help="if supplied, the result is written to this file. "
             "Otherwise it is printed to the terminal.")
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )
    parser.add_argument(
        '--json',
        dest='as_json',
        action="store_true",
        default=False,
        help="print the result as json instead of pretty-printing it.")


def identity_config_from_args(arguments):
    return IdentityConfig(
        key=getattr(arguments, 'id_key', 'id'),
        strict=getattr(arguments, 'strict_ids', False),
    )


def diff_config_from_args(arguments):
    return DiffConfig(identity=identity_config_from_args(arguments))


def merge_config_from_args(arguments):
    return MergeConfig(
        identity=identity_config_from_args(arguments),
        prune_trailing=getattr(arguments, 'prune_trailing', True),
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig, Printer
    kwargs.setdefault('out', Printer())
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        id_key=getattr(arguments, 'id_key', 'id'),
        **kwargs
    )
