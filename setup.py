#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONSYNC_PATH = HERE / "jsonsync"


def get_version(path):
    "Read __version__ from a _version.py file without importing the package."
    with open(path) as f:
        match = re.search(r'^__version__ = [\'"]([^\'"]*)[\'"]', f.read(), re.M)
    if match is None:
        raise RuntimeError("Unable to find version string in %s" % path)
    return match.group(1)


VERSION = get_version(JSONSYNC_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
        name='jsonsync',
        version=VERSION,
        description='Identity-aware comparing, diffing and merging of json documents',
        long_description=LONG_DESCRIPTION,
        long_description_content_type='text/markdown',
        author='Jupyter Development Team',
        license='BSD',
        packages=find_packages(include=['jsonsync', 'jsonsync.*']),
        package_data={'jsonsync.tests': ['files/*.json']},
        python_requires='>=3.7',
        install_requires=[
            'colorama',
            'jupyter_core',
            'traitlets>=5',
        ],
        extras_require={
            'test': [
                'pytest>=6.0',
            ],
        },
        entry_points={
            'console_scripts': [
                'jsonsync = jsonsync.__main__:main_dispatch',
                'jsonsync-show = jsonsync.jsonshowapp:main',
                'jsonsync-diff = jsonsync.jsondiffapp:main',
                'jsonsync-merge = jsonsync.jsonmergeapp:main',
                'jsonsync-patch = jsonsync.jsonpatchapp:main',
            ],
        },
        classifiers=[
            'Intended Audience :: Developers',
            'License :: OSI Approved :: BSD License',
            'Programming Language :: Python :: 3',
        ],
    )
