# SPDX-License-Identifier: MIT
"""Help flags and usage texts."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "CGET_USAGE",
    "CINFO_USAGE",
    "CSET_USAGE",
    "HELP_FLAGS",
    "TOOL_CONTEXT_SETTINGS",
    "wants_help",
]

HELP_FLAGS = ("-h", "--help", "/?")

# Tool commands take no options; anything unrecognized lands in ctx.args.
TOOL_CONTEXT_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}


def wants_help(args: Sequence[str]) -> bool:
    """True when the first argument is a help flag."""
    return bool(args) and args[0] in HELP_FLAGS


CGET_USAGE = """\
cget - Read text from clipboard and output to stdout
Copyright (c) 2025 thrashem

Usage:
  cget                 Read text from clipboard
  cget -h, --help, /?  Show this help

Examples:
  cget > output.txt    Save clipboard content to file
  cget | grep keyword  Search for keyword
  cget | findstr ABC   Search lines containing ABC

Exit codes:
  0  Success (text output)
  1  Cannot open clipboard
  2  No text data
  3  Character conversion failed
"""

CSET_USAGE = """\
cset - Read text from stdin and write to clipboard
Copyright (c) 2025 thrashem

Usage:
  cset                 Read text from stdin
  cset -h, --help, /?  Show this help

Examples:
  echo "Hello" | cset        Set string to clipboard
  type file.txt | cset       Set file content to clipboard
  cget | findstr ABC | cset  Filter and return to clipboard
  dir | cset                 Set directory list to clipboard

Exit codes:
  0  Success
  1  Memory allocation failed
  2  No stdin input
  3  Character conversion failed
  4  Cannot open clipboard
  5  Clipboard memory allocation failed
  6  Clipboard memory lock failed
  7  Clipboard set data failed
"""

CINFO_USAGE = """\
cinfo - List clipboard formats and their sizes
Copyright (c) 2025 thrashem

Usage:
  cinfo                 Show clipboard format list
  cinfo -h, --help, /?  Show this help

Examples:
  cinfo > formats.txt   Save format list to file

Exit codes:
  0  Success (formats listed)
  1  Cannot open clipboard
  2  No formats found
"""
