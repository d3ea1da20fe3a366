# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""pytest configuration.
"""

import pytest

from valuedump import api
from valuedump.common import log, options
from valuedump.inspect import Options


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """Restores process-wide settings that tests may change."""
    monkeypatch.setattr(options, "log_dir", None)
    monkeypatch.setattr(options, "channel", None)
    monkeypatch.setattr(log, "file", None)
    monkeypatch.setattr(log, "stderr_levels", set(log.stderr_levels))
    monkeypatch.setattr(api, "defaults", Options())
    yield
    if log.file is not None:
        log.file.close()
