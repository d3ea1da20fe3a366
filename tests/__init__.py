# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""valuedump tests.

Test modules mirror the layout of src/valuedump.
"""
