import typer

_STYLES = {
    "success": (typer.colors.GREEN, False),
    "warning": (typer.colors.YELLOW, True),
    "error": (typer.colors.RED, True),
    "debug": (typer.colors.BRIGHT_BLACK, True),
}


class CliRenderer:
    """
    Prints bus messages. Warnings, errors and debug output go to stderr so
    that stdout carries only reports and extracted code.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return

        color, to_stderr = _STYLES.get(level, (None, False))
        typer.secho(message, fg=color, err=to_stderr)
