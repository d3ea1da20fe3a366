# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import io
import pytest
import sys
import types

import valuedump
from tests.helpers import strip_colors
from valuedump import api
from valuedump.common import options
from valuedump.inspect.html import HtmlRenderer
from valuedump.inspect.traversal import MAX_DEPTH_MARKER


class ZMQInteractiveShell:
    pass


@pytest.fixture
def no_notebook(monkeypatch):
    monkeypatch.delitem(sys.modules, "IPython", raising=False)


@pytest.fixture
def notebook(monkeypatch):
    ipython = types.ModuleType("IPython")
    ipython.get_ipython = ZMQInteractiveShell
    monkeypatch.setitem(sys.modules, "IPython", ipython)


def test_dump():
    stream = io.StringIO()
    result = valuedump.dump(1, [2], channel="ansi", stream=stream)

    assert result == 1
    assert strip_colors(stream.getvalue()) == "1\n\nlist:1 [\n  0 => 2\n]\n"


def test_dump_nothing():
    stream = io.StringIO()
    assert valuedump.dump(channel="ansi", stream=stream) is None
    assert stream.getvalue() == ""


def test_dump_options():
    stream = io.StringIO()
    valuedump.dump("x" * 20, channel="ansi", stream=stream, max_string_length=5)

    assert strip_colors(stream.getvalue()) == '"xxxxx... [truncated]" (20)\n'
    assert api.defaults.max_string_length == 1000


def test_configure():
    valuedump.configure(maxDepth=0, colorScheme="dark")
    assert api.defaults.max_depth == 0
    assert api.defaults.extra == {"colorScheme": "dark"}

    stream = io.StringIO()
    valuedump.dump([[1]], channel="ansi", stream=stream)
    assert MAX_DEPTH_MARKER in stream.getvalue()


def test_channel_from_environment(monkeypatch, no_notebook):
    monkeypatch.setattr(options, "channel", "html")
    monkeypatch.setattr(HtmlRenderer, "_assets_emitted", True)

    stream = io.StringIO()
    valuedump.dump(1, stream=stream)
    output = stream.getvalue()

    assert output.startswith('<div class="vdump">')
    assert '<span class="vdump-location-scope">test_channel_from_environment</span>' in output
    assert ">test_api.py:" in output


def test_invalid_channel_from_environment(monkeypatch):
    monkeypatch.setattr(options, "channel", "pdf")
    with pytest.raises(AssertionError):
        api.detect_channel()


def test_default_channel(no_notebook):
    assert not api.in_notebook()
    assert api.detect_channel() == "ansi"


def test_notebook_channel(notebook):
    assert api.in_notebook()
    assert api.detect_channel() == "html"


def test_dump_and_exit():
    stream = io.StringIO()
    with pytest.raises(SystemExit) as exc_info:
        valuedump.dump_and_exit({"a": 1}, channel="ansi", stream=stream)

    assert exc_info.value.code == 0
    assert '"a" => 1' in strip_colors(stream.getvalue())


def test_dump_and_exit_fallback():
    stream = io.StringIO()
    with pytest.raises(SystemExit) as exc_info:
        valuedump.dump_and_exit([1, 2], "x", channel="pdf", stream=stream)

    assert exc_info.value.code == 1
    assert stream.getvalue() == "[1, 2]\n'x'\n"
