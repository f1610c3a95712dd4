# SPDX-License-Identifier: MIT
"""Clipboard text tools for the Windows console (cget, cset, cinfo)."""

from __future__ import annotations

__version__ = "0.1.0"
