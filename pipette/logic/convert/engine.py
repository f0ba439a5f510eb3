#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/logic/convert/engine.py

import argparse

from pipette.core import config as c
from pipette.shared.preview import print_color_block
from .resolver import resolve_config, resolve_convert_input, resolve_notation
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for notation conversion"""
    source = resolve_notation(args.from_format)
    target = resolve_notation(args.to_format)
    config = resolve_config(args)

    color = resolve_convert_input(args.value, source, config)
    out = render_convert_info(color, target, config)

    if args.verbose:
        src = render_convert_info(color, source, config)
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
        print_color_block(color, title=target.display_label, label=target.format(color, config))
    else:
        print(out)
