import logging

import typer

from namesmith.common import bus, needle
from namesmith.needle import L, find_project_root
from .factories import get_project_root
from .rendering import CliRenderer

from .commands.apply import apply_command
from .commands.preview import parse_command, extract_command, check_command

app = typer.Typer(
    name="namesmith",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root: it picks the renderer and log level.
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    needle.set_project_root(find_project_root(get_project_root()))
    bus.set_renderer(CliRenderer(verbose=verbose))


app.command(name="apply", help=needle.get(L.cli.command.apply.help))(apply_command)
app.command(name="parse", help=needle.get(L.cli.command.parse.help))(parse_command)
app.command(name="extract", help=needle.get(L.cli.command.extract.help))(
    extract_command
)
app.command(name="check", help=needle.get(L.cli.command.check.help))(check_command)


if __name__ == "__main__":
    app()
