import re

_FENCED_BLOCK = re.compile(r"```(?:c)?\s*\n(.*?)\n```", re.DOTALL)
_CALL_HEAD = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*\s*\(")


def extract_code_block(response_text: str) -> str:
    """
    Best-effort slice of C code from a model response.

    Prefers the first fenced block. Without one, captures from the first
    line that opens a brace or looks like `name(` up to the first line that
    is just `}`. Returns "" when neither is found.
    """
    match = _FENCED_BLOCK.search(response_text)
    if match:
        return match.group(1)

    captured = []
    in_code = False
    for line in response_text.splitlines():
        trimmed = line.strip()

        if "{" in trimmed or _CALL_HEAD.match(trimmed):
            in_code = True

        if in_code:
            captured.append(line + "\n")
            if trimmed == "}":
                break

    return "".join(captured)
