"""Module entry point so ``python -m lib_console_rich`` runs the CLI.

Purpose
-------
Mirror the ``lib_console_rich`` console script for environments where the
script is not on ``PATH``.

Contents
--------
* Delegates to :func:`lib_console_rich.cli.main` and exits with its code.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
