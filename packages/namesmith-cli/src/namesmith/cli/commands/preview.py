from typing import List

import typer

from namesmith.common import bus, needle
from namesmith.engine import extract_code_block, is_valid_identifier, parse_suggestions
from namesmith.needle import L
from namesmith.cli.factories import read_response


def _read_or_exit(response: str) -> str:
    try:
        return read_response(response)
    except (OSError, UnicodeDecodeError) as e:
        bus.error(L.error.generic, error=str(e))
        raise typer.Exit(code=1)


def parse_command(
    response: str = typer.Argument(..., help=needle.get(L.cli.argument.response.help)),
):
    directives = parse_suggestions(_read_or_exit(response))

    if not directives:
        bus.warning(L.parse.none)
        return

    for directive in directives:
        if directive.reason:
            bus.info(
                L.parse.directive_with_reason,
                old_name=directive.old_name,
                new_name=directive.new_name,
                reason=directive.reason,
            )
        else:
            bus.info(
                L.parse.directive,
                old_name=directive.old_name,
                new_name=directive.new_name,
            )
    bus.success(L.parse.summary, count=len(directives))


def extract_command(
    response: str = typer.Argument(..., help=needle.get(L.cli.argument.response.help)),
):
    code = extract_code_block(_read_or_exit(response))
    if not code:
        bus.error(L.extract.none)
        raise typer.Exit(code=1)

    typer.echo(code, nl=not code.endswith("\n"))


def check_command(
    names: List[str] = typer.Argument(..., help=needle.get(L.cli.argument.names.help)),
):
    all_valid = True
    for name in names:
        if is_valid_identifier(name):
            bus.success(L.check.valid, name=name)
        else:
            bus.error(L.check.invalid, name=name)
            all_valid = False

    if not all_valid:
        raise typer.Exit(code=1)
