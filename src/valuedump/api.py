# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import sys
import threading
from typing import NoReturn, Optional, TextIO

from valuedump.common import log, options
from valuedump.inspect import CHANNELS, Options
from valuedump.inspect.factory import create_renderer
from valuedump.location import caller_location


_lock = threading.Lock()

defaults = Options()
"""Options used by every dump() call, unless overridden for that call."""


def configure(**kwargs) -> None:
    with _lock:
        for key, value in kwargs.items():
            defaults.set(key, value)


def in_notebook() -> bool:
    """Whether this code is running inside a Jupyter kernel."""
    ipython = sys.modules.get("IPython")
    if ipython is None:
        return False
    try:
        shell = ipython.get_ipython()
    except Exception:
        return False
    return type(shell).__name__ == "ZMQInteractiveShell"


def detect_channel() -> str:
    if options.channel is not None:
        if options.channel not in CHANNELS:
            raise log.error(
                "VALUEDUMP_CHANNEL must be one of {0}, not {1!r}",
                CHANNELS,
                options.channel,
            )
        return options.channel
    return "html" if in_notebook() else "ansi"


def dump(
    *values, channel: Optional[str] = None, stream: Optional[TextIO] = None, **kwargs
):
    log.to_file()

    if channel is None:
        channel = detect_channel()
    with _lock:
        call_options = defaults.copy()
    for key, value in kwargs.items():
        call_options.set(key, value)

    location = caller_location()
    log.debug(
        "Dumping {0} value(s) from {1} to the {2} channel.", len(values), location, channel
    )

    renderer = create_renderer(channel, call_options, stream)
    if channel == "html" and stream is None and in_notebook():
        from IPython.display import HTML, display

        display(HTML(renderer.render_to_string(values, location)))
    else:
        renderer.render(values, location)

    return values[0] if values else None


def dump_and_exit(*values, stream: Optional[TextIO] = None, **kwargs) -> NoReturn:
    try:
        dump(*values, stream=stream, **kwargs)
    except Exception:
        log.exception("dump() failed; falling back to repr().", level="warning")
        if stream is None:
            stream = sys.stdout
        for value in values:
            try:
                text = repr(value)
            except Exception as exc:
                text = f"<repr() error: {exc}>"
            stream.write(text + "\n")
        raise SystemExit(1)
    raise SystemExit(0)
