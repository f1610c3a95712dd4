# SPDX-License-Identifier: MIT
"""Clipboard format identifiers and display names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "CF_TEXT",
    "CF_UNICODETEXT",
    "CUSTOM_FORMAT_BASE",
    "STANDARD_FORMATS",
    "FormatCategory",
    "FormatDescriptor",
    "resolve_format_name",
]

CF_TEXT = 1
CF_UNICODETEXT = 13

# Registered (custom) formats start here; everything below is reserved.
CUSTOM_FORMAT_BASE = 0xC000

STANDARD_FORMATS: dict[int, str] = {
    1: "CF_TEXT",
    2: "CF_BITMAP",
    3: "CF_METAFILEPICT",
    4: "CF_SYLK",
    5: "CF_DIF",
    6: "CF_TIFF",
    7: "CF_OEMTEXT",
    8: "CF_DIB",
    9: "CF_PALETTE",
    10: "CF_PENDATA",
    11: "CF_RIFF",
    12: "CF_WAVE",
    13: "CF_UNICODETEXT",
    14: "CF_ENHMETAFILE",
    15: "CF_HDROP",
    16: "CF_LOCALE",
    17: "CF_DIBV5",
    0x0080: "CF_OWNERDISPLAY",
}


class FormatCategory(Enum):
    STANDARD = "standard format"
    CUSTOM = "custom format"


@dataclass(frozen=True, slots=True)
class FormatDescriptor:
    """One line of the format report.

    ``size`` is None when the data is rendered lazily (no handle yet, or a
    handle reporting zero bytes).
    """

    index: int
    format_id: int
    name: str
    category: FormatCategory
    size: int | None

    @property
    def is_lazy(self) -> bool:
        return self.size is None


def resolve_format_name(
    format_id: int, registered_name: str | None = None
) -> tuple[str, FormatCategory]:
    """Return (display name, category) for a format id.

    ``registered_name`` is the OS-registered name, only consulted for
    custom format ids.
    """
    name = STANDARD_FORMATS.get(format_id)
    if name is not None:
        return name, FormatCategory.STANDARD
    if format_id < CUSTOM_FORMAT_BASE:
        return f"Unknown Standard (0x{format_id:04X})", FormatCategory.STANDARD
    if registered_name:
        return registered_name, FormatCategory.CUSTOM
    return f"Unknown Custom (0x{format_id:04X})", FormatCategory.CUSTOM
