# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import enum
import inspect
import io
import mmap
import socket
from collections.abc import Collection, Mapping


class Kind(enum.Enum):
    """The category a value falls into for rendering purposes."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    SEQUENCE = "sequence"
    RECORD = "record"
    EXTERNAL_HANDLE = "handle"
    UNSUPPORTED = "unsupported"

    @property
    def is_composite(self) -> bool:
        return self in (Kind.SEQUENCE, Kind.RECORD)


HANDLE_TYPES = (io.IOBase, socket.socket, mmap.mmap)
"""Types of objects that wrap an OS resource, and are shown as opaque handles."""


def _is_routine_or_namespace(value: object) -> bool:
    return (
        inspect.isroutine(value)
        or inspect.ismodule(value)
        or inspect.isclass(value)
        or inspect.isframe(value)
        or inspect.iscode(value)
        or inspect.istraceback(value)
    )


def classify(value: object) -> Kind:
    """Returns the Kind of value. Never raises; Kind.UNSUPPORTED is the fallback."""
    try:
        return _classify(value)
    except Exception:
        return Kind.UNSUPPORTED


def _classify(value: object) -> Kind:
    # Order matters: bool is a subclass of int, str is a Collection, and mmap is
    # sized and iterable.
    match value:
        case None:
            return Kind.NULL
        case bool():
            return Kind.BOOLEAN
        case int():
            return Kind.INTEGER
        case float():
            return Kind.FLOAT
        case str() | bytes() | bytearray():
            return Kind.STRING
        case _ if _is_routine_or_namespace(value):
            return Kind.UNSUPPORTED
        case _ if isinstance(value, HANDLE_TYPES):
            return Kind.EXTERNAL_HANDLE
        case Mapping() | Collection():
            return Kind.SEQUENCE
        case _:
            return Kind.RECORD
