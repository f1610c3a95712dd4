"""cset - stdin to clipboard text."""

from __future__ import annotations

import typer

from cclip.cli.context import build_context
from cclip.cli.usage import CSET_USAGE, TOOL_CONTEXT_SETTINGS, wants_help
from cclip.core.result import Err, Ok
from cclip.output.console import Style
from cclip.platform.terminal import input_codepage
from cclip.services.writer import WriterService


def set_(ctx: typer.Context) -> None:
    """Read stdin and place it on the clipboard."""
    if wants_help(ctx.args):
        typer.echo(CSET_USAGE, nl=False)
        raise typer.Exit(code=0)

    cli = build_context()
    codepage = input_codepage(cli.terminal, pipe_codepage=cli.config.pipe_codepage)
    cli.terminal.set_binary(cli.stdin)

    service = WriterService(clipboard=cli.clipboard, config=cli.config, console=cli.console)
    match service.copy(cli.stdin, codepage=codepage):
        case Err(e):
            cli.console.error(e.message)
            if e.hint:
                cli.console.print(f"hint: {e.hint}", Style.DIM)
            raise typer.Exit(code=e.exit_code)
        case Ok(_):
            pass


app = typer.Typer(add_completion=False)
app.command(name="set", context_settings=TOOL_CONTEXT_SETTINGS, add_help_option=False)(set_)


def main() -> None:
    app(prog_name="cset")
