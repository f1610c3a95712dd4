from __future__ import annotations

import typer

from cclip import __version__
from cclip.cli.commands.get_cmd import get
from cclip.cli.commands.info_cmd import info
from cclip.cli.commands.set_cmd import set_
from cclip.cli.usage import TOOL_CONTEXT_SETTINGS


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command(name="get", context_settings=TOOL_CONTEXT_SETTINGS, add_help_option=False)(get)
app.command(name="set", context_settings=TOOL_CONTEXT_SETTINGS, add_help_option=False)(set_)
app.command(name="info", context_settings=TOOL_CONTEXT_SETTINGS, add_help_option=False)(info)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False, "--version", callback=_show_version, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Clipboard text tools (get, set, info)."""


def main() -> None:
    app()
