# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

from typing import Optional, TextIO

from valuedump.inspect import CHANNELS, Options
from valuedump.inspect.ansi import AnsiRenderer
from valuedump.inspect.html import HtmlRenderer
from valuedump.inspect.traversal import Renderer


def create_renderer(
    channel: str, options: Optional[Options] = None, stream: Optional[TextIO] = None
) -> Renderer:
    match channel:
        case "ansi":
            return AnsiRenderer(options, stream)
        case "html":
            return HtmlRenderer(options, stream)
        case _:
            raise ValueError(f"channel must be one of {CHANNELS}, not {channel!r}")
