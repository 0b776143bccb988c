# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from pytest import fixture

from jsonsync.config import entrypoint_configurables, _config_cache


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def base_filename(filespath):
    return os.path.join(filespath, "base.json")


@fixture
def target_filename(filespath):
    return os.path.join(filespath, "target.json")


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory, without user or system config files"""
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmpdir.join('jupyter_config')))
    monkeypatch.setenv('JUPYTER_CONFIG_PATH', '')
    monkeypatch.setenv('JUPYTER_NO_CONFIG', '1')
    monkeypatch.chdir(str(tmpdir))
    _config_cache.clear()
    yield tmpdir
    _config_cache.clear()


@fixture
def entrypoint(request):
    """Register a configurable class under the 'test-prog' entrypoint"""
    entrypoint_configurables['test-prog'] = request.param
    yield 'test-prog'
    del entrypoint_configurables['test-prog']
