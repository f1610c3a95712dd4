# SPDX-License-Identifier: MIT
"""Clipboard access protocol.

The clipboard is a system-wide resource: ``acquire()`` opens it once (no
retry) and returns a session; leaving the session releases it. Everything
that reads or mutates clipboard content goes through the session.

``MemoryClipboard`` implements the same protocol in memory for tests and
for hosts without a native backend wired in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType
from typing import Iterator, Protocol

from cclip.core.errors import ClipboardError, ClipboardErrorKind
from cclip.core.result import Err, Ok, Result

__all__ = [
    "ClipboardProtocol",
    "ClipboardSession",
    "MemoryClipboard",
    "UnavailableClipboard",
]


class ClipboardSession(Protocol):
    def __enter__(self) -> ClipboardSession: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    def close(self) -> None: ...

    def clear(self) -> None: ...

    def set_data(self, format_id: int, data: bytes) -> Result[None, ClipboardError]: ...

    def get_data(self, format_id: int) -> bytes | None: ...

    def has_format(self, format_id: int) -> bool: ...

    def formats(self) -> Iterator[int]: ...

    def data_size(self, format_id: int) -> int | None: ...

    def format_name(self, format_id: int) -> str | None: ...


class ClipboardProtocol(Protocol):
    def acquire(self) -> Result[ClipboardSession, ClipboardError]: ...


class UnavailableClipboard:
    """Backend for platforms without a supported clipboard API."""

    def __init__(self, reason: str) -> None:
        self._reason = reason

    def acquire(self) -> Result[ClipboardSession, ClipboardError]:
        return Err(ClipboardError("unavailable", self._reason))


@dataclass
class MemoryClipboard:
    """In-memory clipboard.

    Attributes:
        entries: format id -> data, in registration order; None marks a
            lazily rendered format
        names: registered custom format names
        held_elsewhere: simulate another process holding the clipboard
        fail_set: format id -> failure kind returned by ``set_data``
        events: trace of open/clear/set/close calls
    """

    entries: dict[int, bytes | None] = field(default_factory=dict)
    names: dict[int, str] = field(default_factory=dict)
    held_elsewhere: bool = False
    fail_set: dict[int, ClipboardErrorKind] = field(default_factory=dict)
    events: list[str] = field(default_factory=list)
    is_open: bool = False

    def acquire(self) -> Result[ClipboardSession, ClipboardError]:
        if self.held_elsewhere or self.is_open:
            self.events.append("open_failed")
            return Err(ClipboardError("open_failed", "clipboard is held by another process"))
        self.is_open = True
        self.events.append("open")
        return Ok(_MemorySession(self))

    def register_format(self, name: str) -> int:
        for format_id, registered in self.names.items():
            if registered == name:
                return format_id
        format_id = max(self.names, default=0xC000 - 1) + 1
        self.names[format_id] = name
        return format_id


class _MemorySession:
    def __init__(self, board: MemoryClipboard) -> None:
        self._board = board
        self._open = True

    def __enter__(self) -> _MemorySession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _check_open(self) -> MemoryClipboard:
        if not self._open:
            raise RuntimeError("clipboard session used after release")
        return self._board

    def close(self) -> None:
        if self._open:
            self._open = False
            self._board.is_open = False
            self._board.events.append("close")

    def clear(self) -> None:
        board = self._check_open()
        board.entries.clear()
        board.events.append("clear")

    def set_data(self, format_id: int, data: bytes) -> Result[None, ClipboardError]:
        board = self._check_open()
        kind = board.fail_set.get(format_id)
        if kind is not None:
            board.events.append(f"set_failed:{format_id}")
            return Err(ClipboardError(kind, f"cannot set format {format_id}"))
        board.entries[format_id] = bytes(data)
        board.events.append(f"set:{format_id}")
        return Ok(None)

    def get_data(self, format_id: int) -> bytes | None:
        return self._check_open().entries.get(format_id)

    def has_format(self, format_id: int) -> bool:
        return format_id in self._check_open().entries

    def formats(self) -> Iterator[int]:
        yield from list(self._check_open().entries)

    def data_size(self, format_id: int) -> int | None:
        data = self._check_open().entries.get(format_id)
        if not data:
            return None
        return len(data)

    def format_name(self, format_id: int) -> str | None:
        return self._check_open().names.get(format_id)
