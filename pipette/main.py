#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/main.py

import argparse
import sys

from pipette import __version__
from pipette.subcommands.command_registry import SUBCOMMANDS
from pipette.shared.logger import exit_with_error, PipetteArgumentParser
from pipette.shared.preview import ensure_truecolor


def get_main_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = PipetteArgumentParser(
        prog="pipette",
        description="pipette: parse and format colors across textual notations",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pipette {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=f"one of: {', '.join(SUBCOMMANDS)}",
    )
    return parser


def main() -> None:
    """Main entry point for pipette CLI"""
    # Subcommand Routing
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getattr(module, f"get_{name}_parser")().print_help()
        sys.exit(0)

    if args.command:
        exit_with_error(
            f"unrecognized command or argument: '{args.command}'",
            hint=f"available commands: {', '.join(SUBCOMMANDS)}",
        )

    parser.print_help()


if __name__ == "__main__":
    main()
