# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

if __name__ == "__main__":
    from valuedump import cli

    cli.main()
