import pytest

from namesmith.adapter import MemoryFunction
from namesmith.spec import DuplicateNameError, InvalidInputError, SymbolKind


@pytest.fixture
def function() -> MemoryFunction:
    function = MemoryFunction("FUN_00401000")
    function.add_parameter("param_1", "IMPORTED")
    function.add_local("uVar1")
    function.add_local("local_c", "ANALYSIS")
    return function


def test_collections_are_snapshots_of_current_names(function: MemoryFunction):
    locals_before = function.get_local_variables()
    locals_before[0].set_name("count", locals_before[0].source)

    assert [s.name for s in function.get_local_variables()] == ["count", "local_c"]
    assert locals_before[0].kind is SymbolKind.LOCAL
    assert function.get_parameters()[0].kind is SymbolKind.PARAMETER


def test_set_name_updates_name_and_source(function: MemoryFunction):
    symbol = function.find_symbol("local_c")

    symbol.set_name("isValid", "USER_DEFINED")

    assert symbol.name == "isValid"
    assert symbol.source == "USER_DEFINED"
    assert function.find_symbol("local_c") is None


def test_rename_to_existing_name_is_rejected(function: MemoryFunction):
    symbol = function.find_symbol("uVar1")

    with pytest.raises(DuplicateNameError, match="param_1"):
        symbol.set_name("param_1", symbol.source)

    assert symbol.name == "uVar1"


def test_rename_to_own_name_is_allowed(function: MemoryFunction):
    symbol = function.find_symbol("uVar1")

    symbol.set_name("uVar1", "DEFAULT")

    assert symbol.name == "uVar1"


@pytest.mark.parametrize("bad", ["", "two words", "tab\tname"])
def test_invalid_names_are_rejected(function: MemoryFunction, bad: str):
    symbol = function.find_symbol("uVar1")

    with pytest.raises(InvalidInputError):
        symbol.set_name(bad, symbol.source)


def test_local_may_share_a_parameter_name():
    function = MemoryFunction("f")
    function.add_parameter("v")
    function.add_local("v")

    # Locals are found first.
    assert function.find_symbol("v").kind is SymbolKind.LOCAL


def test_duplicate_within_one_collection_is_rejected():
    function = MemoryFunction("f")
    function.add_local("v")

    with pytest.raises(DuplicateNameError):
        function.add_local("v")
