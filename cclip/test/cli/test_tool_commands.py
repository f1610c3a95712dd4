from __future__ import annotations

import io

import pytest
from typer.testing import CliRunner

from cclip import __version__
from cclip.cli.app import app as cclip_app
from cclip.cli.commands.get_cmd import app as cget_app
from cclip.cli.commands.info_cmd import app as cinfo_app
from cclip.cli.commands.set_cmd import app as cset_app
from cclip.cli.context import CLIContext
from cclip.core.codepage import encode_wide
from cclip.core.config import Config
from cclip.core.formats import CF_TEXT, CF_UNICODETEXT
from cclip.output.console import MockConsole
from cclip.platform.clipboard import MemoryClipboard
from cclip.platform.terminal import FixedTerminal

runner = CliRunner()


def _context(
    board: MemoryClipboard,
    *,
    stdin: bytes = b"",
    terminal: FixedTerminal | None = None,
) -> CLIContext:
    return CLIContext(
        console=MockConsole(),
        clipboard=board,
        terminal=terminal or FixedTerminal(),
        config=Config(),
        stdin=io.BytesIO(stdin),
        stdout=io.BytesIO(),
    )


def _patch(monkeypatch: pytest.MonkeyPatch, module: str, ctx: CLIContext) -> None:
    monkeypatch.setattr(f"cclip.cli.commands.{module}.build_context", lambda: ctx)


def _stdout(ctx: CLIContext) -> bytes:
    assert isinstance(ctx.stdout, io.BytesIO)
    return ctx.stdout.getvalue()


@pytest.mark.parametrize("flag", ["-h", "--help", "/?"])
@pytest.mark.parametrize(
    ("tool_app", "title"),
    [
        (cget_app, "cget - Read text from clipboard"),
        (cset_app, "cset - Read text from stdin"),
        (cinfo_app, "cinfo - List clipboard formats"),
    ],
)
def test_help_flags_print_usage_without_clipboard(
    monkeypatch: pytest.MonkeyPatch, tool_app: object, title: str, flag: str
) -> None:
    def _no_context() -> CLIContext:
        raise AssertionError("help must not touch the clipboard")

    for module in ("get_cmd", "set_cmd", "info_cmd"):
        monkeypatch.setattr(f"cclip.cli.commands.{module}.build_context", _no_context)

    result = runner.invoke(tool_app, [flag])  # type: ignore[arg-type]

    assert result.exit_code == 0
    assert result.output.startswith(title)
    assert "Copyright (c) 2025 thrashem" in result.output
    assert "Exit codes:" in result.output


def test_cset_then_cget_through_pipes(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard()
    text = "grep me\r\n日本語\r\n"

    set_ctx = _context(board, stdin=text.encode("utf-8"))
    _patch(monkeypatch, "set_cmd", set_ctx)
    result = runner.invoke(cset_app, [])
    assert result.exit_code == 0
    assert list(board.entries) == [CF_UNICODETEXT, CF_TEXT]

    get_ctx = _context(board)
    _patch(monkeypatch, "get_cmd", get_ctx)
    result = runner.invoke(cget_app, [])
    assert result.exit_code == 0
    assert _stdout(get_ctx) == text.encode("utf-8")


def test_extra_arguments_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard()
    ctx = _context(board, stdin=b"abc")
    _patch(monkeypatch, "set_cmd", ctx)

    result = runner.invoke(cset_app, ["--bogus", "positional"])

    assert result.exit_code == 0
    assert board.entries[CF_UNICODETEXT] == encode_wide("abc")


def test_help_flag_only_counts_as_first_argument(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: encode_wide("x")})
    ctx = _context(board)
    _patch(monkeypatch, "get_cmd", ctx)

    result = runner.invoke(cget_app, ["extra", "/?"])

    assert result.exit_code == 0
    assert _stdout(ctx) == b"x"


def test_cget_console_uses_console_code_page(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: encode_wide("日本語")})
    terminal = FixedTerminal(console_output=True, output_cp=932)
    ctx = _context(board, terminal=terminal)
    _patch(monkeypatch, "get_cmd", ctx)

    result = runner.invoke(cget_app, [])

    assert result.exit_code == 0
    assert _stdout(ctx) == "日本語".encode("cp932")
    assert terminal.binary_streams == [ctx.stdout]


def test_cget_redirected_is_utf8_regardless_of_console(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: encode_wide("日本語")})
    terminal = FixedTerminal(console_output=False, output_cp=932)
    ctx = _context(board, terminal=terminal)
    _patch(monkeypatch, "get_cmd", ctx)

    result = runner.invoke(cget_app, [])

    assert result.exit_code == 0
    assert _stdout(ctx) == "日本語".encode("utf-8")


def test_cset_console_input_code_page(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard()
    terminal = FixedTerminal(console_input=True, input_cp=932)
    ctx = _context(board, stdin="表".encode("cp932"), terminal=terminal)
    _patch(monkeypatch, "set_cmd", ctx)

    result = runner.invoke(cset_app, [])

    assert result.exit_code == 0
    assert board.entries[CF_UNICODETEXT] == encode_wide("表")
    assert terminal.binary_streams == [ctx.stdin]


@pytest.mark.parametrize(
    ("module", "tool_app", "board", "stdin", "code", "message"),
    [
        ("get_cmd", cget_app, MemoryClipboard(held_elsewhere=True), b"", 1, "Cannot open clipboard"),
        ("get_cmd", cget_app, MemoryClipboard(), b"", 2, "No text data in clipboard"),
        ("set_cmd", cset_app, MemoryClipboard(), b"", 2, "No stdin input"),
        ("set_cmd", cset_app, MemoryClipboard(held_elsewhere=True), b"x", 4, "Cannot open clipboard"),
        (
            "set_cmd",
            cset_app,
            MemoryClipboard(fail_set={CF_UNICODETEXT: "set_failed"}),
            b"x",
            7,
            "Clipboard set data failed",
        ),
        ("info_cmd", cinfo_app, MemoryClipboard(held_elsewhere=True), b"", 1, "Cannot open clipboard"),
        ("info_cmd", cinfo_app, MemoryClipboard(), b"", 2, "No formats found in clipboard"),
    ],
)
def test_failures_exit_with_documented_codes(
    monkeypatch: pytest.MonkeyPatch,
    module: str,
    tool_app: object,
    board: MemoryClipboard,
    stdin: bytes,
    code: int,
    message: str,
) -> None:
    ctx = _context(board, stdin=stdin)
    _patch(monkeypatch, module, ctx)

    result = runner.invoke(tool_app, [])  # type: ignore[arg-type]

    assert result.exit_code == code
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.of("error") == [message]
    assert _stdout(ctx) == b""


def test_cinfo_writes_report(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard(entries={CF_UNICODETEXT: encode_wide("hello")})
    ctx = _context(board)
    _patch(monkeypatch, "info_cmd", ctx)

    result = runner.invoke(cinfo_app, [])

    assert result.exit_code == 0
    report = _stdout(ctx).decode("utf-8")
    assert "1. CF_UNICODETEXT\n" in report
    assert "   - size: 12 bytes\n" in report
    assert report.endswith("1 format(s) found.\n")


def test_cclip_version() -> None:
    result = runner.invoke(cclip_app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_cclip_subcommands(monkeypatch: pytest.MonkeyPatch) -> None:
    board = MemoryClipboard()
    set_ctx = _context(board, stdin=b"via cclip")
    _patch(monkeypatch, "set_cmd", set_ctx)
    assert runner.invoke(cclip_app, ["set"]).exit_code == 0

    get_ctx = _context(board)
    _patch(monkeypatch, "get_cmd", get_ctx)
    assert runner.invoke(cclip_app, ["get"]).exit_code == 0
    assert _stdout(get_ctx) == b"via cclip"

    result = runner.invoke(cclip_app, ["info", "/?"])
    assert result.exit_code == 0
    assert result.output.startswith("cinfo - List clipboard formats")
