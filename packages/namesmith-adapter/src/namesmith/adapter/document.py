import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from namesmith.common import YamlAdapter
from namesmith.spec import FunctionDocumentError, RenameRejectedError
from .memory import MemoryFunction, MemorySymbol

log = logging.getLogger(__name__)

_SECTIONS = (("parameters", "add_parameter"), ("locals", "add_local"))


class FunctionDocumentAdapter:
    """
    Reads and writes the YAML description of a single function:

        name: FUN_00401000
        parameters:
          - name: param_1
            source: DEFAULT
        locals:
          - uVar1
    """

    def __init__(self, yaml_adapter: Optional[YamlAdapter] = None):
        self._yaml = yaml_adapter or YamlAdapter()

    def from_data(
        self, data: Dict[str, Any], default_source: str = "DEFAULT"
    ) -> MemoryFunction:
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise FunctionDocumentError("missing function 'name'")

        function = MemoryFunction(name)
        for section, adder in _SECTIONS:
            entries = data.get(section, [])
            if not isinstance(entries, list):
                raise FunctionDocumentError(f"'{section}' must be a list")

            for index, entry in enumerate(entries):
                if isinstance(entry, str):
                    entry = {"name": entry}
                if not isinstance(entry, dict) or not entry.get("name"):
                    raise FunctionDocumentError(
                        f"entry {index} of '{section}' has no name"
                    )
                source = str(entry.get("source") or default_source)
                try:
                    getattr(function, adder)(str(entry["name"]), source)
                except RenameRejectedError as e:
                    raise FunctionDocumentError(str(e)) from e

        return function

    def to_data(self, function: MemoryFunction) -> Dict[str, Any]:
        def entries(symbols: List[MemorySymbol]) -> List[Dict[str, str]]:
            return [{"name": s.name, "source": s.source} for s in symbols]

        return {
            "name": function.name,
            "parameters": entries(list(function.get_parameters())),
            "locals": entries(list(function.get_local_variables())),
        }

    def load(self, path: Path, default_source: str = "DEFAULT") -> MemoryFunction:
        if not path.is_file():
            raise FileNotFoundError(f"Function document not found at: {path}")

        data = self._yaml.load(path)
        try:
            function = self.from_data(data, default_source)
        except FunctionDocumentError as e:
            raise FunctionDocumentError(f"{path}: {e}") from e

        log.debug(f"Loaded {function!r} from {path}")
        return function

    def save(self, path: Path, function: MemoryFunction) -> bool:
        return self._yaml.save(path, self.to_data(function))
