# SPDX-License-Identifier: MIT
"""Exit codes and error types shared by the three tools."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

__all__ = [
    "ClipboardError",
    "ClipboardErrorKind",
    "InspectorExit",
    "ReaderExit",
    "ToolError",
    "WriterExit",
]


class ReaderExit(IntEnum):
    """Exit codes of cget."""

    OK = 0
    OPEN_FAILED = 1
    NO_TEXT = 2
    CONVERSION_FAILED = 3


class WriterExit(IntEnum):
    """Exit codes of cset."""

    OK = 0
    ALLOC_FAILED = 1
    NO_INPUT = 2
    CONVERSION_FAILED = 3
    OPEN_FAILED = 4
    CLIPBOARD_ALLOC_FAILED = 5
    CLIPBOARD_LOCK_FAILED = 6
    CLIPBOARD_SET_FAILED = 7


class InspectorExit(IntEnum):
    """Exit codes of cinfo."""

    OK = 0
    OPEN_FAILED = 1
    NO_FORMATS = 2


ClipboardErrorKind = Literal[
    "unavailable",
    "open_failed",
    "alloc_failed",
    "lock_failed",
    "set_failed",
]


@dataclass(frozen=True, slots=True)
class ClipboardError:
    """Failure reported by a clipboard backend."""

    kind: ClipboardErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class ToolError:
    """Failure of a tool operation, already mapped to its exit code."""

    code: IntEnum
    message: str
    hint: str | None = None

    @property
    def exit_code(self) -> int:
        return int(self.code)
