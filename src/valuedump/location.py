# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Finds out where in user code dump() was called from."""

import os
import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    path: str
    line: int
    scope: Optional[str] = None
    """Name of the enclosing function, qualified with the class name if known."""

    def __str__(self):
        return f"{self.path}:{self.line}"

    @property
    def filename(self) -> str:
        return os.path.basename(self.path)


_package_dir = os.path.dirname(os.path.abspath(__file__))


def _is_internal(path: str) -> bool:
    path = os.path.abspath(path)
    return path == _package_dir or path.startswith(_package_dir + os.sep)


def _scope_of(frame) -> str:
    code = frame.f_code
    name = getattr(code, "co_qualname", code.co_name)
    if "." in name or name.startswith("<"):
        return name
    f_locals = frame.f_locals
    owner = f_locals.get("self", f_locals.get("cls"))
    if owner is None:
        return name
    cls = owner if isinstance(owner, type) else type(owner)
    return f"{cls.__name__}.{name}"


def caller_location(skip: int = 0) -> Optional[Location]:
    """
    Returns the location of the innermost stack frame that is not inside valuedump,
    skipping that many additional frames, or None if there is no such frame.
    """
    try:
        frame = sys._getframe(1)
    except ValueError:
        return None
    while frame is not None and _is_internal(frame.f_code.co_filename):
        frame = frame.f_back
    for _ in range(skip):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return None
    return Location(frame.f_code.co_filename, frame.f_lineno, _scope_of(frame))
