"""cinfo - list clipboard formats."""

from __future__ import annotations

import typer

from cclip.cli.context import build_context
from cclip.cli.usage import CINFO_USAGE, TOOL_CONTEXT_SETTINGS, wants_help
from cclip.core.result import Err, Ok
from cclip.output.console import Style
from cclip.platform.terminal import output_codepage
from cclip.services.inspector import InspectorService


def info(ctx: typer.Context) -> None:
    """List clipboard formats and their sizes."""
    if wants_help(ctx.args):
        typer.echo(CINFO_USAGE, nl=False)
        raise typer.Exit(code=0)

    cli = build_context()
    codepage = output_codepage(cli.terminal, pipe_codepage=cli.config.pipe_codepage)
    cli.terminal.set_binary(cli.stdout)

    service = InspectorService(clipboard=cli.clipboard, config=cli.config, console=cli.console)
    match service.list_formats():
        case Err(e):
            cli.console.error(e.message)
            if e.hint:
                cli.console.print(f"hint: {e.hint}", Style.DIM)
            raise typer.Exit(code=e.exit_code)
        case Ok(descriptors):
            cli.stdout.write(service.report(descriptors, codepage=codepage))
            cli.stdout.flush()


app = typer.Typer(add_completion=False)
app.command(context_settings=TOOL_CONTEXT_SETTINGS, add_help_option=False)(info)


def main() -> None:
    app(prog_name="cinfo")
