# SPDX-License-Identifier: MIT
"""Standard stream probing.

A stream attached to an interactive console uses the console's active code
page; a redirected stream (file or pipe) uses a fixed code page so output
does not depend on the invoking shell.
"""

from __future__ import annotations

import locale
import os
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Protocol

from cclip.core.codepage import codepage_for_encoding
from cclip.platform.detection import Platform

__all__ = [
    "FixedTerminal",
    "PosixTerminal",
    "TerminalProtocol",
    "Win32Terminal",
    "detect_terminal",
    "input_codepage",
    "output_codepage",
]

_STD_INPUT_HANDLE = -10
_STD_OUTPUT_HANDLE = -11
_FILE_TYPE_CHAR = 0x0002


class TerminalProtocol(Protocol):
    def is_console_input(self) -> bool: ...

    def is_console_output(self) -> bool: ...

    def console_input_codepage(self) -> int: ...

    def console_output_codepage(self) -> int: ...

    def set_binary(self, stream: BinaryIO) -> None: ...


class Win32Terminal:
    """Console detection through GetFileType/GetConsoleCP."""

    def _is_char_device(self, std_handle: int) -> bool:
        from cclip.platform.win32 import load_api

        k32 = load_api().kernel32
        return k32.GetFileType(k32.GetStdHandle(std_handle)) == _FILE_TYPE_CHAR

    def is_console_input(self) -> bool:
        return self._is_char_device(_STD_INPUT_HANDLE)

    def is_console_output(self) -> bool:
        return self._is_char_device(_STD_OUTPUT_HANDLE)

    def console_input_codepage(self) -> int:
        from cclip.platform.win32 import load_api

        return int(load_api().kernel32.GetConsoleCP())

    def console_output_codepage(self) -> int:
        from cclip.platform.win32 import load_api

        return int(load_api().kernel32.GetConsoleOutputCP())

    def set_binary(self, stream: BinaryIO) -> None:
        import msvcrt

        msvcrt.setmode(stream.fileno(), os.O_BINARY)  # type: ignore[attr-defined]


class PosixTerminal:
    """Console detection through isatty and the locale encoding."""

    def is_console_input(self) -> bool:
        return sys.stdin is not None and sys.stdin.isatty()

    def is_console_output(self) -> bool:
        return sys.stdout is not None and sys.stdout.isatty()

    def console_input_codepage(self) -> int:
        return codepage_for_encoding(locale.getpreferredencoding(False))

    def console_output_codepage(self) -> int:
        return codepage_for_encoding(locale.getpreferredencoding(False))

    def set_binary(self, stream: BinaryIO) -> None:
        # No newline translation on POSIX.
        return None


@dataclass
class FixedTerminal:
    """Terminal with preset answers (tests)."""

    console_input: bool = False
    console_output: bool = False
    input_cp: int = 65001
    output_cp: int = 65001
    binary_streams: list[BinaryIO] = field(default_factory=list)

    def is_console_input(self) -> bool:
        return self.console_input

    def is_console_output(self) -> bool:
        return self.console_output

    def console_input_codepage(self) -> int:
        return self.input_cp

    def console_output_codepage(self) -> int:
        return self.output_cp

    def set_binary(self, stream: BinaryIO) -> None:
        self.binary_streams.append(stream)


def detect_terminal(platform: Platform) -> TerminalProtocol:
    if platform.is_windows:
        return Win32Terminal()
    return PosixTerminal()


def input_codepage(terminal: TerminalProtocol, *, pipe_codepage: int) -> int:
    """Code page for reading stdin."""
    if terminal.is_console_input():
        return terminal.console_input_codepage()
    return pipe_codepage


def output_codepage(terminal: TerminalProtocol, *, pipe_codepage: int) -> int:
    """Code page for writing stdout."""
    if terminal.is_console_output():
        return terminal.console_output_codepage()
    return pipe_codepage
