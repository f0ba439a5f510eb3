#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/shared/sanitizer.py

import argparse
import re

from pipette.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines, and trimming very long input.
    """
    if value is None:
        return ""
    s = " ".join(str(value).split())
    if len(s) > 200:
        s = s[:197] + "..."
    return s


def strip_quotes(s: str) -> str:
    """Remove leading whitespace and matching surrounding quotes or backticks."""
    if not s:
        return ""
    s = s.strip()
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


def normalize_input(s: str) -> str:
    """
    Prepares raw user text for the notation parsers.
    Strips quotes and standardizes typographic minus signs and dashes,
    leaving the structure (wrappers, separators, units) untouched.
    """
    s = strip_quotes(s)
    # Typographic dashes and the unicode minus sign become ASCII '-'
    s = re.sub("[\u2012\u2013\u2014\u2212]", "-", s)
    # Non-breaking and thin spaces behave like plain spaces
    s = re.sub("[\u00a0\u2009\u202f]", " ", s)
    return s


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up notation labels and option names.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


def _extract_alnum(value: str) -> str:
    if value is None:
        return ""
    return "".join(re.findall(r"[0-9a-z]", str(value).lower()))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., notation labels)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_illuminant(v: str) -> str:
    """Validator for illuminant names such as 'd65' or 'F11'."""
    cleaned = _extract_alnum(v).upper()
    if cleaned not in c.ILLUMINANT_CHOICES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid illuminant: '{raw}' (choose from {', '.join(c.ILLUMINANT_CHOICES)})"
        )
    return cleaned


def handle_observer(v: str) -> str:
    """Validator for the observer angle, '2' or '10' degrees."""
    cleaned = "".join(re.findall(r"[0-9]", str(v)))
    if cleaned not in c.OBSERVER_CHOICES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid observer angle: '{raw}' (choose 2 or 10)")
    return cleaned


def handle_alpha_position(v: str) -> str:
    """Validator for the alpha position option."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.ALPHA_POSITION_CHOICES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid alpha position: '{raw}' (choose from {', '.join(c.ALPHA_POSITION_CHOICES)})"
        )
    return cleaned


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "from_format": handle_string_clean,
    "to_format": handle_string_clean,
    "illuminant": handle_illuminant,
    "observer": handle_observer,
    "alpha_position": handle_alpha_position,
}
