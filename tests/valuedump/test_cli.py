# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import io
import json
import os
import pytest
import sys

import valuedump
from tests.helpers import strip_colors
from valuedump import cli
from valuedump.common import log, options
from valuedump.inspect import Options
from valuedump.inspect.html import HtmlRenderer


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"a": [1, "b"]}), encoding="utf-8")
    return path


def test_parse_defaults():
    settings = cli.parse(["data.json"])
    assert settings.channel == "ansi"
    assert settings.target == "data.json"
    assert settings.options == Options()


def test_parse_all_switches():
    settings = cli.parse(
        [
            "--html",
            "--max-depth",
            "3",
            "--max-string-length",
            "0",
            "--max-sequence-elements",
            "7",
            "--no-protected",
            "--no-private",
            "-",
        ]
    )

    assert settings.channel == "html"
    assert settings.target == "-"
    assert settings.options == Options(
        max_depth=3,
        max_string_length=0,
        max_sequence_elements=7,
        include_protected_fields=False,
        include_private_fields=False,
    )


def test_parse_log_switches(tmp_path):
    cli.parse(["--log-dir", str(tmp_path), "--log-stderr", "data.json"])
    assert options.log_dir == str(tmp_path)
    assert log.stderr_levels == set(log.LEVELS)


@pytest.mark.parametrize(
    "args, error",
    [
        ([], "missing target"),
        (["--bogus", "data.json"], "unrecognized switch --bogus"),
        (["--html", "--html", "data.json"], "duplicate switch --html"),
        (["--max-depth"], "--max-depth: missing <n>"),
        (["--max-depth", "0", "data.json"], "invalid --max-depth <n>: must be >= 1"),
        (["--max-depth", "many", "data.json"], "invalid --max-depth <n>"),
        (["data.json", "more.json"], "unexpected arguments"),
    ],
)
def test_parse_errors(args, error):
    with pytest.raises(ValueError) as exc_info:
        cli.parse(args)
    assert error in str(exc_info.value)


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.parse(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out == valuedump.__version__ + "\n"


def test_main(data_file, capsys):
    cli.main([str(data_file)])
    assert strip_colors(capsys.readouterr().out) == (
        "dict:1 {\n"
        '  "a" => list:2 [\n'
        "    0 => 1\n"
        '    1 => "b" (1)\n'
        "  ]\n"
        "}\n"
    )


def test_main_html(data_file, capsys, monkeypatch):
    monkeypatch.setattr(HtmlRenderer, "_assets_emitted", True)
    cli.main(["--html", str(data_file)])
    output = capsys.readouterr().out
    assert output.startswith('<div class="vdump">')
    assert "vdump-location" not in output


def test_main_options(data_file, capsys):
    cli.main(["--max-depth", "1", "--max-sequence-elements", "1", str(data_file)])
    output = strip_colors(capsys.readouterr().out)
    assert "list:2 [" in output
    assert "… and 1 more elements" in output


def test_main_python_literal(tmp_path, capsys):
    path = tmp_path / "data.py"
    path.write_text("{'a': (1, None)}", encoding="utf-8")
    cli.main([str(path)])
    output = strip_colors(capsys.readouterr().out)
    assert '"a" => tuple:2 (' in output
    assert "1 => None" in output


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("[true, null]"))
    cli.main(["-"])
    output = strip_colors(capsys.readouterr().out)
    assert output == "list:2 [\n  0 => True\n  1 => None\n]\n"


def test_main_log_dir(data_file, tmp_path, capsys):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    cli.main(["--log-dir", str(log_dir), str(data_file)])

    log.file.flush()
    output = (log_dir / f"valuedump-{os.getpid()}.log").read_text(encoding="utf-8")
    assert "(while handling" not in output
    assert "valuedump " + repr(["--log-dir", str(log_dir), str(data_file)]) in output


def test_main_bad_file(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("not [valid", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path)])

    assert exc_info.value.code == 1
    assert "Error: can't load" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(tmp_path / "missing.json")])
    assert exc_info.value.code == 1


def test_main_bad_args(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--bogus"])

    assert exc_info.value.code == 2
    err = capsys.readouterr().err
    assert err.startswith("valuedump " + valuedump.__version__)
    assert "Error: unrecognized switch --bogus" in err
