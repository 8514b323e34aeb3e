import re
from typing import List

from namesmith.spec import RenameDirective
from .validator import is_valid_identifier

# <ident> -> <ident>[: <free text>], matched against the whole stripped line.
SUGGESTION_PATTERN = re.compile(
    r"([a-zA-Z_][a-zA-Z0-9_]*) -> ([a-zA-Z_][a-zA-Z0-9_]*)(?::(.*))?"
)


def parse_suggestions(response_text: str) -> List[RenameDirective]:
    """
    Extracts rename directives from free-form model output.

    Lines that do not match the suggestion grammar are skipped, as are
    suggestions whose new name is not a valid C identifier. Order follows
    the input; duplicate old names are kept.
    """
    directives: List[RenameDirective] = []

    for line in response_text.splitlines():
        match = SUGGESTION_PATTERN.fullmatch(line.strip())
        if not match:
            continue

        old_name, new_name, reason = match.groups()
        if not is_valid_identifier(new_name):
            continue

        directives.append(RenameDirective(old_name, new_name, (reason or "").strip()))

    return directives
