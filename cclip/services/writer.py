# SPDX-License-Identifier: MIT
"""stdin bytes -> clipboard text (cset).

All reading and transcoding happens before the clipboard is opened: while
it is open, no other process can use it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from cclip.core.codepage import decode, encode, encode_wide
from cclip.core.errors import ClipboardError, ToolError, WriterExit
from cclip.core.formats import CF_TEXT, CF_UNICODETEXT
from cclip.core.result import Err, Ok, Result
from cclip.services.base import BaseService

__all__ = ["ClipboardPayload", "InputBuffer", "WriterService", "read_all"]


class InputBuffer:
    """Growable byte buffer for stdin.

    Capacity starts at one chunk; when an append would leave no room for the
    terminator it grows to twice (bytes so far + incoming + one chunk).
    """

    def __init__(self, chunk_size: int) -> None:
        self._chunk_size = chunk_size
        self._buf = bytearray(chunk_size)
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def append(self, chunk: bytes) -> None:
        n = len(chunk)
        if self._size + n + 1 >= len(self._buf):
            new_capacity = (self._size + n + self._chunk_size) * 2
            self._buf.extend(bytes(new_capacity - len(self._buf)))
        self._buf[self._size : self._size + n] = chunk
        self._size += n

    def terminated(self) -> bytes:
        """Contents followed by a NUL terminator."""
        return bytes(self._buf[: self._size]) + b"\x00"


def read_all(stream: BinaryIO, chunk_size: int) -> InputBuffer:
    """Read ``stream`` to EOF.

    Raises:
        MemoryError: the buffer cannot grow.
    """
    buffer = InputBuffer(chunk_size)
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return buffer
        buffer.append(chunk)


@dataclass(frozen=True, slots=True)
class ClipboardPayload:
    """Terminated clipboard blobs ready to hand over."""

    text: str
    wide: bytes
    legacy: bytes | None


_SET_FAILURES: dict[str, WriterExit] = {
    "alloc_failed": WriterExit.CLIPBOARD_ALLOC_FAILED,
    "lock_failed": WriterExit.CLIPBOARD_LOCK_FAILED,
    "set_failed": WriterExit.CLIPBOARD_SET_FAILED,
}

_SET_MESSAGES: dict[WriterExit, str] = {
    WriterExit.CLIPBOARD_ALLOC_FAILED: "Clipboard memory allocation failed",
    WriterExit.CLIPBOARD_LOCK_FAILED: "Clipboard memory lock failed",
    WriterExit.CLIPBOARD_SET_FAILED: "Clipboard set data failed",
}


def _set_error(error: ClipboardError) -> ToolError:
    code = _SET_FAILURES.get(error.kind, WriterExit.CLIPBOARD_SET_FAILED)
    return ToolError(code, _SET_MESSAGES[code], hint=error.message)


class WriterService(BaseService):
    """Replace clipboard content with text from a byte stream."""

    def read_input(self, stream: BinaryIO) -> Result[bytes, ToolError]:
        """Read all of ``stream``; returns the terminated bytes."""
        try:
            buffer = read_all(stream, self._config.chunk_size)
        except MemoryError:
            return Err(ToolError(WriterExit.ALLOC_FAILED, "Memory allocation failed"))

        if buffer.size == 0:
            return Err(ToolError(WriterExit.NO_INPUT, "No stdin input"))

        self._console.debug(f"read {buffer.size} bytes (buffer capacity {buffer.capacity})")
        return Ok(buffer.terminated())

    def prepare(self, raw: bytes, *, codepage: int) -> Result[ClipboardPayload, ToolError]:
        """Transcode raw input into the Unicode and legacy blobs."""
        match decode(raw, codepage):
            case Err(e):
                return Err(
                    ToolError(WriterExit.CONVERSION_FAILED, "Character conversion failed", hint=e.message)
                )
            case Ok(text):
                pass

        legacy: bytes | None = None
        match encode(text, self._config.legacy_codepage):
            case Ok(data):
                legacy = data + b"\x00"
            case Err(e):
                self._console.debug(f"CF_TEXT copy skipped: {e.message}")

        return Ok(ClipboardPayload(text=text, wide=encode_wide(text), legacy=legacy))

    def store(self, payload: ClipboardPayload) -> Result[None, ToolError]:
        """Clear the clipboard and register the payload, Unicode first."""
        match self._clipboard.acquire():
            case Err(e):
                return Err(ToolError(WriterExit.OPEN_FAILED, "Cannot open clipboard", hint=e.message))
            case Ok(session):
                pass

        with session:
            session.clear()

            match session.set_data(CF_UNICODETEXT, payload.wide):
                case Err(e):
                    return Err(_set_error(e))
                case Ok(_):
                    pass

            if payload.legacy is not None:
                match session.set_data(CF_TEXT, payload.legacy):
                    case Err(e):
                        self._console.debug(f"CF_TEXT not set: {e.message}")
                    case Ok(_):
                        pass

        return Ok(None)

    def copy(self, stream: BinaryIO, *, codepage: int) -> Result[ClipboardPayload, ToolError]:
        """read_input -> prepare -> store."""
        match self.read_input(stream):
            case Err(e):
                return Err(e)
            case Ok(raw):
                pass

        match self.prepare(raw, codepage=codepage):
            case Err(e):
                return Err(e)
            case Ok(payload):
                pass

        match self.store(payload):
            case Err(e):
                return Err(e)
            case Ok(_):
                self._console.debug(f"{len(payload.text)} characters copied")
                return Ok(payload)
