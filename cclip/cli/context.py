# SPDX-License-Identifier: MIT
"""Per-invocation collaborators for the tool commands."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass
from typing import BinaryIO

from cclip.core.config import Config, ConfigError, config_path_from_env, load_config
from cclip.output.console import ConsoleProtocol, RichConsole
from cclip.platform.clipboard import ClipboardProtocol, UnavailableClipboard
from cclip.platform.detection import Platform, detect_platform
from cclip.platform.terminal import TerminalProtocol, detect_terminal
from cclip.platform.win32 import Win32Clipboard

__all__ = ["CLIContext", "build_context", "std_streams"]


@dataclass(frozen=True, slots=True)
class CLIContext:
    console: ConsoleProtocol
    clipboard: ClipboardProtocol
    terminal: TerminalProtocol
    config: Config
    stdin: BinaryIO
    stdout: BinaryIO


def std_streams(platform: Platform, terminal: TerminalProtocol) -> tuple[BinaryIO, BinaryIO]:
    """Byte streams for stdin/stdout.

    On Windows the interpreter wraps console handles in a UTF-8 layer, which
    would ignore the console code page; console handles are reopened as
    plain file descriptors instead. Redirected streams keep the stdio buffers.
    """
    stdin: BinaryIO = sys.stdin.buffer
    stdout: BinaryIO = sys.stdout.buffer
    if not platform.is_windows:
        return stdin, stdout

    if terminal.is_console_input():
        stdin = io.BufferedReader(io.FileIO(sys.stdin.fileno(), "rb", closefd=False))
    if terminal.is_console_output():
        stdout.flush()
        stdout = io.BufferedWriter(io.FileIO(sys.stdout.fileno(), "wb", closefd=False))
    return stdin, stdout


def build_context() -> CLIContext:
    platform = detect_platform()

    config_error: ConfigError | None = None
    try:
        config = load_config(config_path_from_env())
    except ConfigError as e:
        config_error = e
        config = Config()

    console = RichConsole(verbose=config.verbose)
    if config_error is not None:
        console.warning(f"config ignored: {config_error}")

    clipboard: ClipboardProtocol
    if platform.is_windows:
        clipboard = Win32Clipboard()
    else:
        clipboard = UnavailableClipboard(f"no clipboard backend for {platform.value}")

    terminal = detect_terminal(platform)
    stdin, stdout = std_streams(platform, terminal)

    return CLIContext(
        console=console,
        clipboard=clipboard,
        terminal=terminal,
        config=config,
        stdin=stdin,
        stdout=stdout,
    )
