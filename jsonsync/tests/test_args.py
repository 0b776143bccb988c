# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json

import pytest
from traitlets import Enum

from jsonsync.args import (
    ConfigBackedParser, LogLevelAction, add_generic_args, add_merge_args,
    add_diff_args, merge_config_from_args, diff_config_from_args,
    modify_config_for_print,
)
from jsonsync.config import Global, Merge, build_config, merge_config_dicts
from jsonsync import jsonmergeapp


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


class FixtureMergeConfig(Merge):
    pass


@pytest.mark.parametrize('entrypoint', [FixtureConfig], indirect=True)
def test_config_parser(entrypoint, isolated_config):
    parser = ConfigBackedParser(entrypoint)
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'


@pytest.mark.parametrize('entrypoint', [FixtureMergeConfig], indirect=True)
def test_config_file_defaults(entrypoint, isolated_config):
    isolated_config.join('jsonsync_config.json').write_text(
        json.dumps({
            'Merge': {
                'delete_if_missing': True,
                'id_key': 'uid',
            },
        }),
        encoding='utf-8'
    )

    parser = ConfigBackedParser(entrypoint)
    add_merge_args(parser)
    arguments = parser.parse_args([])
    assert arguments.delete_if_missing is True
    assert arguments.id_key == 'uid'
    assert arguments.prune_trailing is True

    config = merge_config_from_args(arguments)
    assert config.identity.key == 'uid'
    assert config.prune_trailing is True

    # Flags still override config
    arguments = parser.parse_args(['--id-key', 'name', '--keep-trailing'])
    assert arguments.id_key == 'name'
    config = merge_config_from_args(arguments)
    assert config.identity.key == 'name'
    assert config.prune_trailing is False


def test_config_file_per_command(isolated_config):
    isolated_config.join('jsonsync_config.json').write_text(
        json.dumps({
            'JsonMerge': {
                'strict_ids': True,
            },
            'Diff': {
                'add_if_equal': True,
            },
        }),
        encoding='utf-8'
    )
    merge_config = build_config('jsonsync-merge')
    assert merge_config['strict_ids'] is True
    assert merge_config['delete_if_missing'] is False

    diff_config = build_config('jsonsync-diff')
    assert diff_config['add_if_equal'] is True
    assert diff_config['strict_ids'] is False

    arguments = jsonmergeapp._build_arg_parser().parse_args(['a.json', 'b.json'])
    assert arguments.strict_ids is True


def test_build_config_unknown_entrypoint(isolated_config):
    with pytest.raises(ValueError):
        build_config('not-a-command')


def test_diff_config_from_args():
    parser = argparse.ArgumentParser()
    add_diff_args(parser)
    arguments = parser.parse_args(['--strict-ids', '--add-if-equal'])
    assert arguments.add_if_equal is True
    config = diff_config_from_args(arguments)
    assert config.identity.strict is True
    assert config.identity.key == 'id'


def test_generic_args_version(capsys):
    parser = argparse.ArgumentParser(prog='test-prog')
    add_generic_args(parser)
    with pytest.raises(SystemExit):
        parser.parse_args(['--version'])
    out, err = capsys.readouterr()
    assert out.startswith('test-prog ')


def test_modify_config_for_print():
    config = {'log_level': 'INFO', 'strict_ids': False, 'Nested': {}}
    assert modify_config_for_print(config) == {
        'log_level': '"INFO"',
        'strict_ids': 'false',
        'Nested': '{}',
    }


def test_merge_config_dicts():
    target = {'Merge': {'delete_if_missing': True, 'id_key': 'uid'}}
    merge_config_dicts(target, {'Merge': {'id_key': None}, 'Diff': {}})
    assert target == {'Merge': {'delete_if_missing': True}}

    target = {}
    merge_config_dicts(target, {'Merge': {'id_key': None}}, include_none=True)
    assert target == {'Merge': {'id_key': None}}
