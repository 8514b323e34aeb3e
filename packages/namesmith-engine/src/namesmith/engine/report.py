from typing import Sequence

from namesmith.spec import RenameDirective

DEFAULT_WIDTH = 50


def format_report(
    function_name: str,
    directives: Sequence[RenameDirective],
    applied_count: int,
    width: int = DEFAULT_WIDTH,
) -> str:
    lines = [
        f"Suggestion Report for {function_name}",
        "=" * width,
        f"Total suggestions: {len(directives)}",
        f"Successfully applied: {applied_count}",
        "",
    ]
    for directive in directives:
        line = f"• {directive.old_name} → {directive.new_name}"
        if directive.reason:
            line += f" ({directive.reason})"
        lines.append(line)

    return "".join(f"{line}\n" for line in lines)
