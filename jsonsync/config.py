# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Defaults of the command line options, read from config files.

Each command has a configurable class listing its options as traits.
Config files named ``jsonsync_config.json`` are looked up in the current
directory and in the Jupyter config path, and may hold one section per
configurable class, e.g.::

    {"Merge": {"delete_if_missing": true}, "_Identity": {"id_key": "uid"}}

A section applies to its class and all of its subclasses.
"""

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'jsonsync_config'


class JsonSyncConfigurable(HasTraits):

    def own_config(self, cls):
        "The values of the configurable traits declared by cls itself."
        return {name: getattr(self, name)
                for name in cls.class_own_traits(config=True)}


_config_cache = {}
def config_instance(cls):
    try:
        return _config_cache[cls]
    except KeyError:
        instance = _config_cache[cls] = cls()
        return instance


def config_search_path():
    "Directories searched for config files, highest priority first."
    return [os.getcwd()] + jupyter_config_path()


def load_config_files(basename=CONFIG_BASENAME, path=None):
    """Yield the config found in each directory of path.

    Lowest priority first, so that later configs override earlier ones.
    """
    if path is None:
        path = config_search_path()
    for directory in reversed(path):
        loader = JSONFileConfigLoader(basename + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def merge_config_dicts(target, new, include_none=False):
    """Update the nested dict target with new.

    Keys set to None in new are dropped from target, as are sections
    left empty, unless include_none is true.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            section = target.setdefault(key, {})
            merge_config_dicts(section, value, include_none)
            if not section and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value
    return target


def build_config(entrypoint, include_none=False):
    """Effective option values for the command registered as entrypoint.

    Walks the class hierarchy of its configurable from the base down,
    applying the trait defaults of each class, then the config file
    section of the same name.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, sorted(entrypoint_configurables)))

    sections = {}
    for c in load_config_files():
        merge_config_dicts(sections, c, include_none)

    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, JsonSyncConfigurable):
            continue
        merge_config_dicts(config, config_instance(cls).own_config(cls), include_none)
        if cls.__name__ in sections:
            merge_config_dicts(config, sections[cls.__name__], include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsonSyncConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Identity(Global):

    id_key = Unicode(
        'id',
        help="the name of the field identifying records in lists.",
    ).tag(config=True)

    strict_ids = Bool(
        False,
        help="fail on records without identity or with non-numeric "
             "identities, instead of treating them as equal.",
    ).tag(config=True)


class Diff(_Identity):

    add_if_equal = Bool(
        False,
        help="include identity-only entries for unchanged records "
             "of top-level lists.",
    ).tag(config=True)


class Merge(_Identity):

    delete_if_missing = Bool(
        False,
        help="delete records of base lists that are missing in the "
             "incoming lists.",
    ).tag(config=True)

    prune_trailing = Bool(
        True,
        help="with delete_if_missing, also delete base records sorting "
             "after the last incoming record.",
    ).tag(config=True)


class JsonDiff(Diff):
    pass

class JsonMerge(Merge):
    pass

class JsonPatch(_Identity):
    pass

class JsonShow(Global):
    pass


entrypoint_configurables = {
    'jsonsync-diff': JsonDiff,
    'jsonsync-merge': JsonMerge,
    'jsonsync-patch': JsonPatch,
    'jsonsync-show': JsonShow,
}
