# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__


# Command name -> module holding its main(args)
COMMANDS = {
    "show": "jsonsync.jsonshowapp",
    "diff": "jsonsync.jsondiffapp",
    "merge": "jsonsync.jsonmergeapp",
    "patch": "jsonsync.jsonpatchapp",
}

HELP_MESSAGE_VERBOSE = ("Usage: jsonsync [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: jsonsync --version\n"
                       "          jsonsync show -h\n"
                       "          jsonsync diff base.json target.json\n"
                       "          jsonsync merge --delete-if-missing base.json incoming.json\n"
                       % ", ".join(COMMANDS))


def print_all_config():
    "List the config options of every command, and their current values."
    from .args import modify_config_for_print
    from .config import build_config, entrypoint_configurables
    from .prettyprint import pretty_print_dict, PrettyPrintConfig

    print('All available config options, and their current values:\n',
          file=sys.stderr)
    for entrypoint, cls in entrypoint_configurables.items():
        config = build_config(entrypoint, True)
        pretty_print_dict(
            {cls.__name__: modify_config_for_print(config)},
            config=PrettyPrintConfig(out=sys.stderr),
        )
        print('', file=sys.stderr)


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd in COMMANDS:
        app = importlib.import_module(COMMANDS[cmd])
        return app.main(args)

    if cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    elif cmd == '--config':
        print_all_config()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s." % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # This is triggered by "python -m jsonsync <args>"
    sys.exit(main_dispatch())
