#!/usr/bin/env python3
"""
tinyexpr - Arithmetic Expression Evaluator

Main entry point for the tinyexpr command-line evaluator.
This file serves as a thin wrapper that delegates all functionality
to the tinyexpr_pkg package.

Usage:
    python tinyexpr.py                          # Interactive REPL
    python tinyexpr.py -e "2+2"                 # Evaluate expression
    python tinyexpr.py -e "x^2" --var x=3       # Evaluate with variables
    python tinyexpr.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for tinyexpr.

    Delegates to the tinyexpr_pkg.cli module, which handles argument
    parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from tinyexpr_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
