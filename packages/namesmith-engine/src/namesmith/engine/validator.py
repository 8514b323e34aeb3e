from typing import Any, FrozenSet

C_RESERVED_WORDS: FrozenSet[str] = frozenset(
    {
        "auto", "break", "case", "char", "const", "continue", "default", "do",
        "double", "else", "enum", "extern", "float", "for", "goto", "if",
        "int", "long", "register", "return", "short", "signed", "sizeof", "static",
        "struct", "switch", "typedef", "union", "unsigned", "void", "volatile", "while",
    }
)  # fmt: skip

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")
_HEAD_CHARS = _ASCII_LETTERS | {"_"}
_TAIL_CHARS = _HEAD_CHARS | _ASCII_DIGITS


def is_valid_identifier(name: Any) -> bool:
    """
    True if `name` can stand as a C identifier: ASCII letter or underscore
    first, then ASCII letters, digits or underscores, and not a reserved word.

    Never raises; anything that is not a non-empty str is invalid.
    """
    if not isinstance(name, str) or not name:
        return False

    if name[0] not in _HEAD_CHARS:
        return False

    if any(ch not in _TAIL_CHARS for ch in name[1:]):
        return False

    return name not in C_RESERVED_WORDS
