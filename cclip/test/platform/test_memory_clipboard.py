from __future__ import annotations

import pytest

from cclip.core.formats import CF_TEXT, CF_UNICODETEXT
from cclip.core.result import Err, Ok
from cclip.platform.clipboard import MemoryClipboard, UnavailableClipboard


def test_second_acquire_fails_while_open() -> None:
    board = MemoryClipboard()

    first = board.acquire()
    assert isinstance(first, Ok)

    second = board.acquire()
    assert isinstance(second, Err)
    assert second.error.kind == "open_failed"

    first.value.close()
    assert board.acquire().is_ok()


def test_session_releases_on_exit() -> None:
    board = MemoryClipboard()
    result = board.acquire()
    assert isinstance(result, Ok)

    with result.value as session:
        session.clear()
        assert session.set_data(CF_UNICODETEXT, b"a\x00\x00\x00").is_ok()

    assert board.is_open is False
    assert board.events == ["open", "clear", f"set:{CF_UNICODETEXT}", "close"]


def test_session_unusable_after_release() -> None:
    board = MemoryClipboard(entries={CF_TEXT: b"x\x00"})
    result = board.acquire()
    assert isinstance(result, Ok)
    session = result.value
    session.close()

    with pytest.raises(RuntimeError):
        session.get_data(CF_TEXT)


def test_register_format_allocates_custom_ids() -> None:
    board = MemoryClipboard()
    a = board.register_format("HTML Format")
    b = board.register_format("Rich Text Format")

    assert a == 0xC000
    assert b == 0xC001
    assert board.register_format("HTML Format") == a


def test_unavailable_clipboard_never_opens() -> None:
    result = UnavailableClipboard("no backend").acquire()

    assert isinstance(result, Err)
    assert result.error.kind == "unavailable"
    assert result.error.message == "no backend"
