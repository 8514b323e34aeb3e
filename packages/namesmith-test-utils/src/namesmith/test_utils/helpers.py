from typing import Iterable, Optional

from namesmith.adapter import MemoryFunction


def make_function(
    name: str = "FUN_00401000",
    parameters: Optional[Iterable[str]] = None,
    local_variables: Optional[Iterable[str]] = None,
    source: str = "DEFAULT",
) -> MemoryFunction:
    function = MemoryFunction(name)
    for param in parameters or []:
        function.add_parameter(param, source)
    for local in local_variables or []:
        function.add_local(local, source)
    return function
