from __future__ import annotations

from cclip.core.codepage import encode_wide
from cclip.core.config import Config
from cclip.core.errors import ReaderExit
from cclip.core.formats import CF_TEXT, CF_UNICODETEXT
from cclip.core.result import Err, Ok
from cclip.output.console import MockConsole
from cclip.platform.clipboard import MemoryClipboard
from cclip.services.reader import ReaderService


def _service(board: MemoryClipboard) -> ReaderService:
    return ReaderService(clipboard=board, config=Config(), console=MockConsole())


def test_prefers_unicode_text() -> None:
    board = MemoryClipboard(
        entries={CF_UNICODETEXT: encode_wide("héllo\r\nworld"), CF_TEXT: b"other\x00"}
    )

    result = _service(board).read_text(codepage=65001)

    assert result == Ok("héllo\r\nworld".encode("utf-8"))
    assert board.events == ["open", "close"]


def test_console_code_page_output() -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: encode_wide("日本語")})

    result = _service(board).read_text(codepage=932)

    assert result == Ok("日本語".encode("cp932"))


def test_falls_back_to_legacy_text() -> None:
    board = MemoryClipboard(entries={CF_TEXT: "日本".encode("cp932") + b"\x00"})

    result = _service(board).read_text(codepage=65001)

    assert result == Ok("日本".encode("utf-8"))


def test_falls_back_when_unicode_text_has_no_data() -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: None, CF_TEXT: b"abc\x00"})

    assert _service(board).read_text(codepage=65001) == Ok(b"abc")


def test_empty_text_is_success_with_no_bytes() -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: b"\x00\x00"})

    assert _service(board).read_text(codepage=65001) == Ok(b"")


def test_no_text_formats() -> None:
    board = MemoryClipboard(entries={2: b"bitmap"})

    result = _service(board).read_text(codepage=65001)

    assert isinstance(result, Err)
    assert result.error.code == ReaderExit.NO_TEXT
    assert result.error.exit_code == 2
    assert board.is_open is False


def test_clipboard_held_elsewhere() -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: encode_wide("x")}, held_elsewhere=True)

    result = _service(board).read_text(codepage=65001)

    assert isinstance(result, Err)
    assert result.error.code == ReaderExit.OPEN_FAILED
    assert board.events == ["open_failed"]


def test_unsupported_output_code_page() -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: encode_wide("x")})

    result = _service(board).read_text(codepage=99999)

    assert isinstance(result, Err)
    assert result.error.code == ReaderExit.CONVERSION_FAILED
    assert result.error.exit_code == 3
    assert board.is_open is False
