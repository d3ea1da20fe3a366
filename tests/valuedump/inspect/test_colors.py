# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import pytest
from colorama import Fore, Style

from valuedump.inspect.colors import COLORS, RESET, color_for, colorize


def test_reset_is_explicit():
    assert RESET == Style.RESET_ALL == "\x1b[0m"


@pytest.mark.parametrize("category", sorted(COLORS))
def test_every_category_has_both_channels(category):
    assert color_for("html", category).startswith("#")
    assert color_for("ansi", category).startswith("\x1b[")


def test_unknown_category_falls_back_to_null():
    assert color_for("html", "nonsense") == color_for("html", "null")
    assert color_for("ansi", "nonsense") == Fore.LIGHTBLACK_EX


def test_colorize():
    assert colorize("abc", "string") == Fore.RED + "abc" + Style.RESET_ALL
