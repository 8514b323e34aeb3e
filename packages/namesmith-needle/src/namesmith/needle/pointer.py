from typing import Any, Tuple


class SemanticPointer:
    """
    A dotted message key built by attribute access: `L.apply.run.summary`
    addresses "apply.run.summary".
    """

    __slots__ = ("_parts",)

    def __init__(self, *parts: str):
        object.__setattr__(self, "_parts", tuple(p for p in parts if p))

    def __getattr__(self, name: str) -> "SemanticPointer":
        # Private and dunder lookups (copy, pickle, mocks, unset slots) never mint keys.
        if name.startswith("_"):
            raise AttributeError(name)
        return SemanticPointer(*self._parts, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SemanticPointer is immutable")

    def __reduce__(self):
        return (SemanticPointer, self._parts)

    def __copy__(self) -> "SemanticPointer":
        return self

    def __deepcopy__(self, memo) -> "SemanticPointer":
        return self

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._parts

    def __str__(self) -> str:
        return ".".join(self._parts)

    def __repr__(self) -> str:
        return f"<SemanticPointer: '{self}'>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SemanticPointer):
            return self._parts == other._parts
        return str(other) == str(self)

    def __hash__(self) -> int:
        return hash(str(self))


L = SemanticPointer()
