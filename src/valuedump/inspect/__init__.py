# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""
Object inspection: classifying values, enumerating record fields, and rendering
bounded trees of values for the html and ansi channels.

This package has no knowledge of how or where it is invoked, so that it can be
unit-tested in isolation. valuedump.api wraps it with channel detection and caller
location lookup.
"""

import dataclasses
from dataclasses import dataclass, field


CHANNELS = ("ansi", "html")


@dataclass
class Options:
    max_depth: int = 10
    """
    How many levels below the top-level value are rendered. Values nested deeper
    than that are replaced with the max-depth marker.
    """

    max_string_length: int = 1000
    """Strings longer than this are shown truncated. Their length is still reported
    in full."""

    max_sequence_elements: int = 100
    """Sequences and records with more entries than this only show the first ones,
    followed by a count of the remaining entries."""

    include_protected_fields: bool = True
    """Whether record fields named _x are shown."""

    include_private_fields: bool = True
    """Whether record fields named __x are shown."""

    extra: dict = field(default_factory=dict)
    """Options that are not recognized. Stored, but have no effect."""

    # Accepted spellings for set_option(), mapped to attribute names.
    KEYS = {
        "maxDepth": "max_depth",
        "maxStringLength": "max_string_length",
        "maxSequenceElements": "max_sequence_elements",
        "includeProtectedFields": "include_protected_fields",
        "includePrivateFields": "include_private_fields",
    }

    def set(self, key: str, value: object) -> None:
        name = self.KEYS.get(key, key)
        if name in self.KEYS.values():
            setattr(self, name, value)
        else:
            self.extra[key] = value

    def copy(self) -> "Options":
        return dataclasses.replace(self, extra=dict(self.extra))
