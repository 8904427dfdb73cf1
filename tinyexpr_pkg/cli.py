"""Command-line front end for tinyexpr."""

from __future__ import annotations

import argparse
import json
import math
import sys
from typing import Any

from .api import evaluate_safely
from .config import LOG_LEVEL, OUTPUT_PRECISION, VAR_NAME_RE, VERSION
from .logging_config import get_logger, setup_logging
from .types import EvalResult

logger = get_logger("cli")

REPL_EXIT_COMMANDS = {"quit", "exit"}


def format_number(val: Any, precision: int = OUTPUT_PRECISION) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    try:
        fval = float(val)
    except (ValueError, TypeError, OverflowError):
        return str(val)
    if math.isnan(fval):
        return "nan"
    if math.isinf(fval):
        return "inf" if fval > 0 else "-inf"
    fmt = "{:." + str(int(precision)) + "g}"
    return fmt.format(fval)


def parse_assignment(text: str) -> tuple[str, float]:
    """Parse ``NAME=VALUE`` into a name and a float.

    Raises:
        ValueError: if the name is not an identifier or the value is not a number
    """
    name, sep, value = text.partition("=")
    name = name.strip()
    if not sep or not VAR_NAME_RE.match(name):
        raise ValueError(f"Invalid variable binding: {text!r} (expected NAME=VALUE)")
    return name, float(value.strip())


def print_result(result: EvalResult, output_format: str, precision: int) -> None:
    if output_format == "json":
        print(json.dumps(result.to_dict()))
    elif result.ok:
        print(format_number(result.result, precision))
    else:
        print(f"Error: {result.error}")


def repl_loop(
    variables: dict[str, float],
    pow_from_right: bool | None,
    output_format: str,
    precision: int,
) -> int:
    """Read expressions from stdin until EOF or ``quit``.

    ``NAME = EXPR`` evaluates EXPR and binds the result to NAME.
    """
    while True:
        try:
            line = input(">>> ")
        except EOFError:
            print()
            return 0
        line = line.strip()
        if not line:
            continue
        if line.lower() in REPL_EXIT_COMMANDS:
            return 0

        target = None
        name, sep, rest = line.partition("=")
        if sep and VAR_NAME_RE.match(name.strip()):
            target = name.strip()
            line = rest

        result = evaluate_safely(line, variables, pow_from_right=pow_from_right)
        if result.ok and target is not None:
            variables[target] = result.result
            logger.debug(f"Bound {target} = {result.result!r}")
        print_result(result, output_format, precision)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the tinyexpr CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="tinyexpr")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a variable (repeatable)",
    )
    parser.add_argument(
        "--pow-from-right",
        action="store_true",
        default=None,
        help="Treat ^ as right-associative (2^3^2 = 512)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(f"tinyexpr {VERSION}")
        return 0

    precision = args.precision if args.precision is not None else OUTPUT_PRECISION

    variables: dict[str, float] = {}
    for binding in args.var:
        try:
            name, value = parse_assignment(binding)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        variables[name] = value

    if args.eval_expr is None:
        return repl_loop(variables, args.pow_from_right, args.format, precision)

    result = evaluate_safely(
        args.eval_expr, variables, pow_from_right=args.pow_from_right
    )
    print_result(result, args.format, precision)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main_entry())
