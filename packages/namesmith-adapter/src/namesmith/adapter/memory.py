from typing import List, Optional, Tuple

from namesmith.spec import DuplicateNameError, InvalidInputError, SymbolKind


class MemorySymbol:
    def __init__(
        self,
        name: str,
        source: str,
        kind: SymbolKind,
        owner: Optional["MemoryFunction"] = None,
    ):
        self._name = name
        self._source = source
        self.kind = kind
        self.owner = owner

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> str:
        return self._source

    def set_name(self, new_name: str, source: str) -> None:
        if not new_name or any(ch.isspace() for ch in new_name):
            raise InvalidInputError(f"Invalid name: '{new_name}'")

        if new_name == self._name:
            self._source = source
            return

        if self.owner is not None and self.owner.find_symbol(new_name) is not None:
            raise DuplicateNameError(
                f"'{new_name}' is already defined in {self.owner.name}"
            )

        self._name = new_name
        self._source = source

    def __repr__(self) -> str:
        return f"<MemorySymbol {self.kind.value} '{self._name}' ({self._source})>"


class MemoryFunction:
    """
    A function held in memory, standing in for a host program model.

    Names are unique across parameters and locals, as in a decompiler's
    variable namespace.
    """

    def __init__(self, name: str):
        self._name = name
        self._parameters: List[MemorySymbol] = []
        self._locals: List[MemorySymbol] = []

    @property
    def name(self) -> str:
        return self._name

    def _add(
        self, bucket: List[MemorySymbol], name: str, source: str, kind: SymbolKind
    ) -> MemorySymbol:
        # A local may carry the same name as a parameter.
        if any(s.name == name for s in bucket):
            raise DuplicateNameError(f"'{name}' is already defined in {self._name}")
        symbol = MemorySymbol(name, source, kind, owner=self)
        bucket.append(symbol)
        return symbol

    def add_parameter(self, name: str, source: str = "DEFAULT") -> MemorySymbol:
        return self._add(self._parameters, name, source, SymbolKind.PARAMETER)

    def add_local(self, name: str, source: str = "DEFAULT") -> MemorySymbol:
        return self._add(self._locals, name, source, SymbolKind.LOCAL)

    def get_parameters(self) -> Tuple[MemorySymbol, ...]:
        return tuple(self._parameters)

    def get_local_variables(self) -> Tuple[MemorySymbol, ...]:
        return tuple(self._locals)

    def find_symbol(self, name: str) -> Optional[MemorySymbol]:
        for symbol in self._locals + self._parameters:
            if symbol.name == name:
                return symbol
        return None

    def __repr__(self) -> str:
        return (
            f"<MemoryFunction '{self._name}' params={len(self._parameters)} "
            f"locals={len(self._locals)}>"
        )
