#!/usr/bin/python3

import os

from setuptools import setup, Command, find_packages


class CleanCommand(Command):
    user_options = []
    def initialize_options(self):
        #pylint: disable=attribute-defined-outside-init
        self.cwd = None
    def finalize_options(self):
        #pylint: disable=attribute-defined-outside-init
        self.cwd = os.getcwd()
    def run(self):
        assert os.getcwd() == self.cwd, 'Must be in package root: %s' % self.cwd
        os.system('rm -rf ./build ./dist ./*.pyc ./*.egg-info')

setup(
    name='cs-order',
    version='0.1.0',
    description='Order constraint declarations for Corosync/Pacemaker clusters',
    python_requires='>=3.9',
    packages=find_packages(exclude=["cs_order_test", "cs_order_test.*"]),
    install_requires=[
        'dacite',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    entry_points={
        'console_scripts': [
            'cs_order = cs_order.app:main',
        ],
    },
    cmdclass={
        'clean': CleanCommand,
    }
)
