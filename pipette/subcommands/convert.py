#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/subcommands/convert.py

import argparse
import sys

from pipette.core import config as c
from pipette.core.color import Color
from pipette.logic.convert import engine
from pipette.notation import Notation
from pipette.shared.logger import PipetteArgumentParser
from pipette.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for the convert command."""
    parser = PipetteArgumentParser(
        prog="pipette convert",
        description="pipette convert: convert a color value from one notation to another",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    notations_list = " ".join(n.label for n in Notation)

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-f",
        "--from-format",
        required=True,
        type=INPUT_HANDLERS["from_format"],
        help="the notation to convert from\n" f"all notations: {notations_list}",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        help="the notation to convert to\n" f"all notations: {notations_list}",
    )

    sample = Color(255, 99, 71)
    examples = "\n".join(
        f'  -v "{n.format(sample)}"'.replace("%", "%%") for n in Notation
    )
    parser.add_argument(
        "-v",
        "--value",
        required=True,
        type=str,
        help="color value to convert, in quotes\nexamples:\n" + examples,
    )
    parser.add_argument(
        "-i",
        "--illuminant",
        type=INPUT_HANDLERS["illuminant"],
        default="D65",
        help="CIE illuminant for cielab and hunterlab (default: D65)\n"
        f"choices: {' '.join(c.ILLUMINANT_CHOICES)}",
    )
    parser.add_argument(
        "-o",
        "--observer",
        type=INPUT_HANDLERS["observer"],
        default="2",
        help="CIE standard observer angle in degrees: 2 or 10 (default: 2)",
    )
    parser.add_argument(
        "-a",
        "--alpha-position",
        type=INPUT_HANDLERS["alpha_position"],
        default="end",
        help="where alpha is read and written: none, end or start (default: end)",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def main() -> None:
    """Main entry point for the convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
