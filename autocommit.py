#!/usr/bin/env python
"""
Thin wrapper script to invoke the vc_autocommit CLI.

Running ``python autocommit.py`` is equivalent to running the
``autocommit`` console script installed via ``pyproject.toml``.
"""

from vc_autocommit.cli import main


if __name__ == "__main__":
    main(prog_name="autocommit")
