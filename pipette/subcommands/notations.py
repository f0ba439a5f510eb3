#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/subcommands/notations.py

import argparse
import sys

from pipette.core import config as c
from pipette.notation import Notation
from pipette.shared.logger import PipetteArgumentParser


def get_notations_parser() -> argparse.ArgumentParser:
    """Create argument parser for the notations command."""
    parser = PipetteArgumentParser(
        prog="pipette notations",
        description="pipette notations: list the supported color notations",
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
    return parser


def main() -> None:
    parser = get_notations_parser()
    parser.parse_args(sys.argv[1:])
    width = max(len(n.label) for n in Notation)
    for notation in Notation:
        marker = " (default)" if notation is Notation.default() else ""
        print(f"{c.BOLD_WHITE}{notation.label:<{width}}{c.RESET}   {notation.display_label}{marker}")


if __name__ == "__main__":
    main()
