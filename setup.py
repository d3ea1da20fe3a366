#!/usr/bin/env python

# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import os
import re
import setuptools


ROOT = os.path.dirname(os.path.abspath(__file__))


def get_version():
    # Read it from the source instead of importing valuedump, so that setup.py
    # works before the dependencies are installed.
    with open(os.path.join(ROOT, "src", "valuedump", "__init__.py"), "r") as fh:
        match = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.MULTILINE)
    return match.group(1)


with open(os.path.join(ROOT, "DESCRIPTION.md"), "r") as fh:
    long_description = fh.read()


if __name__ == "__main__":
    setuptools.setup(
        name="valuedump",
        version=get_version(),
        description="Bounded, readable dumps of arbitrary Python values for terminals and browsers",  # noqa
        long_description=long_description,
        long_description_content_type="text/markdown",
        license="MIT",
        python_requires=">=3.11",
        classifiers=[
            "Development Status :: 4 - Beta",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: 3.13",
            "Topic :: Software Development :: Debuggers",
            "Operating System :: OS Independent",
            "License :: OSI Approved :: MIT License",
        ],
        package_dir={"": "src"},
        packages=setuptools.find_namespace_packages(where="src", include=["valuedump*"]),
        install_requires=["colorama"],
        extras_require={"tests": ["pytest", "pytest-timeout"]},
        entry_points={"console_scripts": ["valuedump = valuedump.cli:main"]},
    )
