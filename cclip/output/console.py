# SPDX-License-Identifier: MIT
"""Diagnostics console.

All diagnostics go to stderr so they never mix with clipboard data written
to stdout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.markup import escape

__all__ = ["ConsoleProtocol", "MockConsole", "RichConsole", "Style"]


class Style(Enum):
    DEFAULT = ""
    DIM = "dim"
    ERROR = "bold red"
    WARNING = "yellow"


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...


class RichConsole:
    """Console backed by rich, writing to stderr."""

    def __init__(self, *, verbose: bool = False, console: Console | None = None) -> None:
        self._verbose = verbose
        self._console = console or Console(stderr=True, highlight=False)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._console.print(escape(message), style=style.value or None)

    def error(self, message: str) -> None:
        self.print(f"Error: {message}", Style.ERROR)

    def warning(self, message: str) -> None:
        self.print(f"Warning: {message}", Style.WARNING)

    def debug(self, message: str) -> None:
        if self._verbose:
            self.print(message, Style.DIM)


@dataclass
class MockConsole:
    """Records messages instead of printing them (tests)."""

    messages: list[tuple[str, str]] = field(default_factory=list)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.messages.append(("print", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def of(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.messages if lvl == level]
