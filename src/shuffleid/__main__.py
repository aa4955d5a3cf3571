# SPDX-License-Identifier: MIT
"""Allow ``python -m shuffleid``."""

from shuffleid.cli.main import main

main()
