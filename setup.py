# Copyright (C) 2019 Canonical Ltd.
# This file is part of ubuntu-advantage-esm.  See LICENSE file for license.

import setuptools

NAME = "ubuntu-advantage-esm"

INSTALL_REQUIRES = open("requirements.txt").read().rstrip("\n").split("\n")


def split_link_deps(reqs_filename):
    """Read requirements reqs_filename and split into pkgs and links

    :return: list of package defs and link defs
    """
    pkgs = []
    links = []
    for line in open(reqs_filename).readlines():
        if line.startswith("git") or line.startswith("http"):
            links.append(line)
        else:
            pkgs.append(line)
    return pkgs, links


TEST_REQUIRES, TEST_LINKS = split_link_deps("test-requirements.txt")


setuptools.setup(
    name=NAME,
    version="10",
    packages=setuptools.find_packages(
        exclude=[
            "*.testing",
            "tests.*",
            "*.tests",
            "tests",
        ]
    ),
    install_requires=INSTALL_REQUIRES,
    dependency_links=TEST_LINKS,
    extras_require=dict(test=TEST_REQUIRES),
    author="Ubuntu Server Team",
    author_email="ubuntu-server@lists.ubuntu.com",
    description=(
        "Enable and disable the Ubuntu Extended Security Maintenance "
        "repository"
    ),
    license="GPLv3",
    url="https://ubuntu.com/esm",
    entry_points={
        "console_scripts": [
            "ubuntu-advantage=uaesm.cli:main",
        ]
    },
)
