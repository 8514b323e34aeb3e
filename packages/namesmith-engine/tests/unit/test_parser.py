from textwrap import dedent

from namesmith.engine import parse_suggestions
from namesmith.spec import RenameDirective


def test_no_matching_lines_yields_nothing():
    text = dedent("""
        Here are my suggestions:
        The function copies a buffer.
        - rename uVar1 to count
    """)

    assert parse_suggestions(text) == []
    assert parse_suggestions("") == []


def test_plain_suggestion_has_empty_reason():
    assert parse_suggestions("x -> y") == [RenameDirective("x", "y", "")]


def test_reason_is_stripped():
    directives = parse_suggestions("x -> y:   improves clarity  ")

    assert directives == [RenameDirective("x", "y", "improves clarity")]


def test_reason_without_space_after_colon():
    assert parse_suggestions("x -> y:counter") == [RenameDirective("x", "y", "counter")]


def test_trailing_colon_without_reason():
    assert parse_suggestions("x -> y:") == [RenameDirective("x", "y", "")]


def test_surrounding_whitespace_is_ignored():
    text = "   \tuVar1 -> elementCount: tracks array size   \r"

    assert parse_suggestions(text) == [
        RenameDirective("uVar1", "elementCount", "tracks array size")
    ]


def test_reserved_word_target_is_dropped():
    text = "a -> int: it is an integer\nb -> count"

    assert parse_suggestions(text) == [RenameDirective("b", "count", "")]


def test_digit_leading_target_never_matches():
    assert parse_suggestions("a -> 1foo") == []


def test_whole_line_must_match():
    lines = [
        "- a -> b",
        "a -> b c",
        "a ->b",
        "a-> b",
        "a  -> b",
        "a -> b - note",
        "`a -> b`",
        "a -> b -> c",
    ]

    assert parse_suggestions("\n".join(lines)) == []


def test_order_and_duplicates_are_preserved():
    text = dedent("""
        param_1 -> buffer
        local_10 -> index: loop counter
        param_1 -> source
        garbage line
        iVar2 -> result
    """)

    assert parse_suggestions(text) == [
        RenameDirective("param_1", "buffer", ""),
        RenameDirective("local_10", "index", "loop counter"),
        RenameDirective("param_1", "source", ""),
        RenameDirective("iVar2", "result", ""),
    ]


def test_reason_may_contain_arrows_and_colons():
    directives = parse_suggestions("a -> b: maps x -> y: see notes")

    assert directives == [RenameDirective("a", "b", "maps x -> y: see notes")]


def test_windows_line_endings():
    text = "a -> b: first\r\nc -> d\r\n"

    assert parse_suggestions(text) == [
        RenameDirective("a", "b", "first"),
        RenameDirective("c", "d", ""),
    ]


def test_old_name_is_not_validated_against_reserved_words():
    assert parse_suggestions("int -> counter") == [RenameDirective("int", "counter", "")]
