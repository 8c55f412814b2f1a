# This file is part of ubuntunet. See LICENSE file for license information.

# Distutils magic for ubuntunet

import os
import sys

import setuptools

# Python-path here is a little unpredictable as setup.py could be run
# from a directory other than the root of the repo, so ensure we can find
# our utils
sys.path.insert(0, os.path.dirname(os.path.realpath(__file__)))
# isort: off
from setup_utils import get_version, read_requires  # noqa: E402

# isort: on
del sys.path[0]

requirements = read_requires()

setuptools.setup(
    name="ubuntunet",
    version=get_version(),
    description="Render network definitions for NetworkManager",
    packages=setuptools.find_packages(exclude=["tests.*", "tests"]),
    license="Dual-licensed under GPLv3 or Apache 2.0",
    install_requires=requirements,
    extras_require={
        "test": read_requires("test-requirements.txt"),
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "ubuntu-network-generate = ubuntunet.cmd.main:main",
        ],
    },
)
