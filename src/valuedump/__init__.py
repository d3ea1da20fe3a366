# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Bounded, readable dumps of arbitrary Python values, for terminals and browsers.

    import valuedump
    valuedump.dump(request.headers, user)
"""

__all__ = [
    "__version__",
    "configure",
    "dump",
    "dump_and_exit",
]

__version__ = "1.0.0"


# Docstrings for public API members must be formatted according to PEP 8 - no more
# than 72 characters per line! - and must be readable when retrieved via help().


def dump(*values, channel=None, stream=None, **options):
    """Writes a readable rendering of every value in values.

    channel is "ansi" for colored terminal text, or "html" for a
    collapsible markup fragment. If None, it is picked based on the
    VALUEDUMP_CHANNEL environment variable and on whether the code is
    running in a notebook.

    stream is where output is written; sys.stdout if None.

    options override the defaults set by configure() for this call,
    e.g. max_depth=3.

    Returns the first value, so that dump() can wrap an expression.
    """
    from valuedump import api

    return api.dump(*values, channel=channel, stream=stream, **options)


def dump_and_exit(*values, **kwargs):
    """Same as dump(), but raises SystemExit afterwards.

    If rendering fails, falls back to printing repr() of every value,
    and the exit status is 1 instead of 0.
    """
    from valuedump import api

    api.dump_and_exit(*values, **kwargs)


def configure(**options):
    """Changes the default options for subsequent dump() calls.

    Recognized options are max_depth, max_string_length,
    max_sequence_elements, include_protected_fields and
    include_private_fields; their camelCase spellings are also accepted.
    """
    from valuedump import api

    api.configure(**options)
