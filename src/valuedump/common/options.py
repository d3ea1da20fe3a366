# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Global options that are set via environment variables or the command line.
"""

import os


log_dir = os.getenv("VALUEDUMP_LOG_DIR")
"""If not None, valuedump logs its activity to a file named valuedump-<pid>.log in
the specified directory, where <pid> is the return value of os.getpid().
"""

channel = os.getenv("VALUEDUMP_CHANNEL") or None
"""One of: None, 'ansi', or 'html'.

If None, the channel is picked automatically for every dump() call, based on the
output stream and on whether the code is running inside a notebook kernel.
"""
