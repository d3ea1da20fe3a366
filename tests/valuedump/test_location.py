# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import os
import sys

import valuedump.api
from valuedump.location import Location, _is_internal, caller_location


class Handler:
    def get(self):
        return caller_location()

    @classmethod
    def create(cls):
        return caller_location()


def test_location_str():
    location = Location("/src/app.py", 12, "main")
    assert str(location) == "/src/app.py:12"
    assert location.filename == "app.py"


def test_caller_location():
    location, line = caller_location(), sys._getframe().f_lineno

    assert os.path.normcase(location.path) == os.path.normcase(__file__)
    assert location.line == line
    assert location.scope == "test_caller_location"


def test_method_scope():
    assert Handler().get().scope == "Handler.get"
    assert Handler.create().scope == "Handler.create"


def test_skip():
    def inner():
        return caller_location(skip=1)

    assert inner().scope == "test_skip"


def test_internal_frames_are_skipped():
    assert _is_internal(valuedump.api.__file__)
    assert not _is_internal(__file__)
