# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Colors used to tell the categories of rendered values apart, per channel."""

from colorama import Fore, Style


RESET = Style.RESET_ALL

# fmt: off
COLORS = {
    # Category      html            ansi
    # ========      ====            ====
    "string":       ("#d14",        Fore.RED),
    "integer":      ("#005cc5",     Fore.CYAN),
    "float":        ("#005cc5",     Fore.CYAN),
    "boolean":      ("#6f42c1",     Fore.MAGENTA),
    "null":         ("#6a737d",     Fore.LIGHTBLACK_EX),
    "sequence":     ("#e36209",     Fore.YELLOW),
    "record":       ("#28a745",     Fore.GREEN),
    "key":          ("#032f62",     Fore.BLUE),
    "field":        ("#6f42c1",     Fore.MAGENTA),
    "handle":       ("#fd7e14",     Fore.WHITE),
}
# fmt: on

_COLUMNS = {"html": 0, "ansi": 1}


def color_for(channel: str, category: str) -> str:
    """Returns the html color or the terminal escape code for category.

    Unknown categories get the color of "null".
    """
    row = COLORS.get(category, COLORS["null"])
    return row[_COLUMNS[channel]]


def colorize(text: str, category: str) -> str:
    """Wraps text in the terminal escape code for category, followed by a reset."""
    return color_for("ansi", category) + text + RESET
