"""Main entry point for running tinyexpr_pkg as a module.

This allows running tinyexpr with:
    python -m tinyexpr_pkg
    python -m tinyexpr_pkg -e "2+2"
    python -m tinyexpr_pkg -e "x*y" --var x=3 --var y=4

This is equivalent to running:
    python tinyexpr.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
