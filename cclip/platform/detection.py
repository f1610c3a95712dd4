# SPDX-License-Identifier: MIT
"""Platform detection.

Simple, stateless functions; the clipboard backend and the terminal check
are chosen from the result.
"""

from __future__ import annotations

import platform as _platform
from enum import Enum

__all__ = ["Platform", "detect_platform"]


class Platform(Enum):
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"

    @property
    def is_windows(self) -> bool:
        return self is Platform.WINDOWS


def detect_platform() -> Platform:
    """Detect current operating system."""
    system = _platform.system().lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("darwin"):
        return Platform.MACOS
    if system.startswith("windows"):
        return Platform.WINDOWS
    return Platform.UNKNOWN
