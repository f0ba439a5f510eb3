#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/shared/logger.py

import argparse
import sys
from typing import NoReturn

from pipette.core import config as c

_STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    """Prints '[level] message' in the level's ANSI colors; info/success go to stdout."""
    level = str(level).lower()
    stream = sys.stdout if level in _STDOUT_LEVELS else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def exit_with_error(message: str, hint: str = "", code: int = 2) -> NoReturn:
    log("error", message)
    if hint:
        log("info", hint)
    sys.exit(code)


class PipetteArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Routes argparse usage errors through the logger, exiting with status 2."""
        exit_with_error(message, hint=f"use '{self.prog} -h' for usage")
