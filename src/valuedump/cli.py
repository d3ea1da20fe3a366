# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import ast
import json
import sys

import valuedump
from valuedump.common import log, options
from valuedump.inspect import Options
from valuedump.inspect.factory import create_renderer


TARGET = "<filename> | -"

HELP = """valuedump {0}

Dumps a JSON document, or a Python literal, read from a file or from stdin.

Usage: valuedump [--html]
                 [--max-depth <n>] [--max-string-length <n>]
                 [--max-sequence-elements <n>]
                 [--no-protected] [--no-private]
                 [--log-dir <path>] [--log-stderr]
                 {1}
""".format(
    valuedump.__version__, TARGET
)


class Settings:
    """What to dump, and how. Populated by parse()."""

    def __init__(self):
        self.channel = "ansi"
        self.target = None
        self.options = Options()


def in_range(parser, start, stop):
    def parse(s):
        n = parser(s)
        if start is not None and n < start:
            raise ValueError("must be >= {0}".format(start))
        if stop is not None and n >= stop:
            raise ValueError("must be < {0}".format(stop))
        return n

    return parse


count = in_range(int, 0, None)

depth = in_range(int, 1, None)


def print_help_and_exit(settings, arg, it):
    print(HELP, file=sys.stderr)
    sys.exit(0)


def print_version_and_exit(settings, arg, it):
    print(valuedump.__version__)
    sys.exit(0)


def set_const(varname, value):
    def do(settings, arg, it):
        setattr(settings, varname, value)

    return do


def set_option(name, parser):
    def do(settings, arg, it):
        settings.options.set(name, parser(next(it)))

    return do


def set_option_const(name, value):
    def do(settings, arg, it):
        settings.options.set(name, value)

    return do


def set_log_dir(settings, arg, it):
    options.log_dir = next(it)


def set_log_stderr(settings, arg, it):
    log.stderr_levels |= set(log.LEVELS)


def set_target(settings, arg, it):
    settings.target = arg


# fmt: off
switches = [
    # Switch                        Placeholder     Action
    # ======                        ===========     ======
    (("-?", "-h", "--help"),        None,           print_help_and_exit),
    (("-V", "--version"),           None,           print_version_and_exit),
    ("--html",                      None,           set_const("channel", "html")),
    ("--max-depth",                 "<n>",          set_option("max_depth", depth)),
    ("--max-string-length",         "<n>",          set_option("max_string_length", count)),
    ("--max-sequence-elements",     "<n>",          set_option("max_sequence_elements", count)),
    ("--no-protected",              None,           set_option_const("include_protected_fields", False)),
    ("--no-private",                None,           set_option_const("include_private_fields", False)),
    ("--log-dir",                   "<path>",       set_log_dir),
    ("--log-stderr",                None,           set_log_stderr),

    # The "" entry corresponds to the positional argument; "-" is stdin.
    ("",                            "<filename>",   set_target),
]
# fmt: on


def parse(args, settings=None):
    if settings is None:
        settings = Settings()
    seen = set()
    it = iter(args)

    while settings.target is None:
        try:
            arg = next(it)
        except StopIteration:
            raise ValueError("missing target: " + TARGET)

        switch = arg if arg.startswith("-") and arg != "-" else ""
        for i, (sw, placeholder, action) in enumerate(switches):
            if not isinstance(sw, tuple):
                sw = (sw,)
            if switch in sw:
                break
        else:
            raise ValueError("unrecognized switch " + switch)

        if i in seen:
            raise ValueError("duplicate switch " + switch)
        else:
            seen.add(i)

        try:
            action(settings, arg, it)
        except StopIteration:
            assert placeholder is not None
            raise ValueError("{0}: missing {1}".format(switch, placeholder))
        except Exception as exc:
            raise ValueError("invalid {0} {1}: {2}".format(switch, placeholder, exc))

    rest = list(it)
    if rest:
        raise ValueError("unexpected arguments after {0}: {1!r}".format(TARGET, rest))

    return settings


def load(target):
    """Reads the value to dump from target, which is a filename or "-" for stdin."""
    if target == "-":
        text = sys.stdin.read()
    else:
        with open(target, "r", encoding="utf-8") as f:
            text = f.read()

    try:
        return json.loads(text)
    except ValueError:
        log.debug("{0} is not JSON; trying it as a Python literal.", target)
    return ast.literal_eval(text)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    try:
        settings = parse(args)
    except Exception as exc:
        print(HELP + "\nError: " + str(exc), file=sys.stderr)
        sys.exit(2)

    log.to_file()
    log.info("valuedump {0!r}", args)

    with log.handling(settings.target):
        try:
            value = load(settings.target)
        except (OSError, ValueError, SyntaxError) as exc:
            log.exception("Can't load {0}", settings.target, level="debug")
            print("Error: can't load {0}: {1}".format(settings.target, exc), file=sys.stderr)
            sys.exit(1)

        renderer = create_renderer(settings.channel, settings.options, sys.stdout)
        renderer.render([value])
