from pathlib import Path

import typer

from namesmith.common import bus, needle
from namesmith.engine import run_pass
from namesmith.needle import L
from namesmith.spec import FunctionDocumentError
from namesmith.cli.factories import load_config, make_document_adapter, read_response


def apply_command(
    response: str = typer.Argument(..., help=needle.get(L.cli.argument.response.help)),
    function_path: Path = typer.Option(
        ...,
        "--function",
        "-f",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help=needle.get(L.cli.option.function.help),
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help=needle.get(L.cli.option.dry_run.help)
    ),
    no_report: bool = typer.Option(
        False, "--no-report", help=needle.get(L.cli.option.no_report.help)
    ),
):
    config = load_config()
    adapter = make_document_adapter()

    try:
        response_text = read_response(response)
        function = adapter.load(function_path, default_source=config.default_source)
    except FunctionDocumentError as e:
        bus.error(L.error.document, path=function_path, error=str(e))
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as e:
        bus.error(L.error.generic, error=str(e))
        raise typer.Exit(code=1)

    outcome = run_pass(function, response_text, report_width=config.report_width)

    if not no_report:
        typer.echo(outcome.report, nl=False)

    if outcome.applied_count:
        if dry_run or not config.write_back:
            bus.info(L.apply.document.dry_run, path=function_path)
        elif adapter.save(function_path, function):
            bus.info(L.apply.document.saved, path=function_path)
        else:
            bus.debug(L.apply.document.unchanged, path=function_path)

    if not outcome.result.success:
        raise typer.Exit(code=1)
