# SPDX-License-Identifier: MIT
"""Win32 clipboard backend (ctypes).

Memory handed to ``SetClipboardData`` belongs to the system once the call
succeeds; every other path frees the block it allocated.
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass
from types import TracebackType
from typing import Iterator

from cclip.core.errors import ClipboardError
from cclip.core.result import Err, Ok, Result

__all__ = ["Win32Api", "Win32Clipboard", "load_api"]

GMEM_MOVEABLE = 0x0002
MAX_FORMAT_NAME = 256


@dataclass(frozen=True, slots=True)
class Win32Api:
    user32: ctypes.WinDLL
    kernel32: ctypes.WinDLL


_api: Win32Api | None = None


def load_api() -> Win32Api:
    """Load user32/kernel32 with explicit prototypes (Windows only)."""
    global _api
    if _api is not None:
        return _api

    from ctypes import wintypes

    user32 = ctypes.WinDLL("user32", use_last_error=True)
    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

    user32.OpenClipboard.argtypes = [wintypes.HWND]
    user32.OpenClipboard.restype = wintypes.BOOL
    user32.CloseClipboard.argtypes = []
    user32.CloseClipboard.restype = wintypes.BOOL
    user32.EmptyClipboard.argtypes = []
    user32.EmptyClipboard.restype = wintypes.BOOL
    user32.IsClipboardFormatAvailable.argtypes = [wintypes.UINT]
    user32.IsClipboardFormatAvailable.restype = wintypes.BOOL
    user32.GetClipboardData.argtypes = [wintypes.UINT]
    user32.GetClipboardData.restype = wintypes.HANDLE
    user32.SetClipboardData.argtypes = [wintypes.UINT, wintypes.HANDLE]
    user32.SetClipboardData.restype = wintypes.HANDLE
    user32.EnumClipboardFormats.argtypes = [wintypes.UINT]
    user32.EnumClipboardFormats.restype = wintypes.UINT
    user32.GetClipboardFormatNameW.argtypes = [wintypes.UINT, wintypes.LPWSTR, ctypes.c_int]
    user32.GetClipboardFormatNameW.restype = ctypes.c_int

    kernel32.GlobalAlloc.argtypes = [wintypes.UINT, ctypes.c_size_t]
    kernel32.GlobalAlloc.restype = wintypes.HGLOBAL
    kernel32.GlobalLock.argtypes = [wintypes.HGLOBAL]
    kernel32.GlobalLock.restype = wintypes.LPVOID
    kernel32.GlobalUnlock.argtypes = [wintypes.HGLOBAL]
    kernel32.GlobalUnlock.restype = wintypes.BOOL
    kernel32.GlobalFree.argtypes = [wintypes.HGLOBAL]
    kernel32.GlobalFree.restype = wintypes.HGLOBAL
    kernel32.GlobalSize.argtypes = [wintypes.HGLOBAL]
    kernel32.GlobalSize.restype = ctypes.c_size_t
    kernel32.GetStdHandle.argtypes = [wintypes.DWORD]
    kernel32.GetStdHandle.restype = wintypes.HANDLE
    kernel32.GetFileType.argtypes = [wintypes.HANDLE]
    kernel32.GetFileType.restype = wintypes.DWORD
    kernel32.GetConsoleCP.argtypes = []
    kernel32.GetConsoleCP.restype = wintypes.UINT
    kernel32.GetConsoleOutputCP.argtypes = []
    kernel32.GetConsoleOutputCP.restype = wintypes.UINT

    _api = Win32Api(user32=user32, kernel32=kernel32)
    return _api


class Win32Clipboard:
    """The Windows clipboard."""

    def __init__(self, api: Win32Api | None = None) -> None:
        self._api = api

    def acquire(self) -> Result[Win32Session, ClipboardError]:
        api = self._api or load_api()
        if not api.user32.OpenClipboard(None):
            code = ctypes.get_last_error()
            return Err(ClipboardError("open_failed", f"OpenClipboard failed (error {code})"))
        return Ok(Win32Session(api))


class Win32Session:
    def __init__(self, api: Win32Api) -> None:
        self._user32 = api.user32
        self._kernel32 = api.kernel32
        self._open = True

    def __enter__(self) -> Win32Session:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._open:
            self._open = False
            self._user32.CloseClipboard()

    def clear(self) -> None:
        self._user32.EmptyClipboard()

    def set_data(self, format_id: int, data: bytes) -> Result[None, ClipboardError]:
        k32 = self._kernel32
        handle = k32.GlobalAlloc(GMEM_MOVEABLE, len(data))
        if not handle:
            return Err(ClipboardError("alloc_failed", f"GlobalAlloc({len(data)}) failed"))

        ptr = k32.GlobalLock(handle)
        if not ptr:
            k32.GlobalFree(handle)
            return Err(ClipboardError("lock_failed", "GlobalLock failed"))
        ctypes.memmove(ptr, data, len(data))
        k32.GlobalUnlock(handle)

        if not self._user32.SetClipboardData(format_id, handle):
            code = ctypes.get_last_error()
            # Not owned by the system yet.
            k32.GlobalFree(handle)
            return Err(ClipboardError("set_failed", f"SetClipboardData failed (error {code})"))
        return Ok(None)

    def get_data(self, format_id: int) -> bytes | None:
        if not self._user32.IsClipboardFormatAvailable(format_id):
            return None
        handle = self._user32.GetClipboardData(format_id)
        if not handle:
            return None

        size = self._kernel32.GlobalSize(handle)
        ptr = self._kernel32.GlobalLock(handle)
        if not ptr:
            return None
        try:
            return ctypes.string_at(ptr, size)
        finally:
            self._kernel32.GlobalUnlock(handle)

    def has_format(self, format_id: int) -> bool:
        return bool(self._user32.IsClipboardFormatAvailable(format_id))

    def formats(self) -> Iterator[int]:
        format_id = 0
        while True:
            format_id = self._user32.EnumClipboardFormats(format_id)
            if format_id == 0:
                return
            yield format_id

    def data_size(self, format_id: int) -> int | None:
        # Delayed-render formats get materialized by GetClipboardData;
        # a missing handle or zero size means nothing is there yet.
        handle = self._user32.GetClipboardData(format_id)
        if not handle:
            return None
        size = int(self._kernel32.GlobalSize(handle))
        return size or None

    def format_name(self, format_id: int) -> str | None:
        buf = ctypes.create_unicode_buffer(MAX_FORMAT_NAME)
        if not self._user32.GetClipboardFormatNameW(format_id, buf, MAX_FORMAT_NAME):
            return None
        return buf.value
