# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import re

from valuedump.inspect.ansi import AnsiRenderer


_escape_codes = re.compile(r"\x1b\[[0-9;]*m")


def strip_colors(text):
    return _escape_codes.sub("", text)


def render_plain(*values, **options):
    """Renders values on the ansi channel, and returns the output without colors."""
    renderer = AnsiRenderer()
    for key, value in options.items():
        renderer.set_option(key, value)
    return strip_colors(renderer.render_to_string(values))
