import logging
from pathlib import Path
from typing import Dict, List, Optional

from .interfaces import FileHandler
from .handlers import JsonHandler

log = logging.getLogger(__name__)


def _flatten(data: Dict[str, object], prefix: str = "") -> Dict[str, str]:
    # Nested objects are joined with dots, so {"apply": {"done": "x"}}
    # and {"apply.done": "x"} address the same key.
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, full_key))
        else:
            flat[full_key] = str(value)
    return flat


class Loader:
    def __init__(self, handlers: Optional[List[FileHandler]] = None):
        self.handlers = handlers or [JsonHandler()]

    def _load_and_merge_file(self, path: Path, registry: Dict[str, str]):
        for handler in self.handlers:
            if handler.match(path):
                try:
                    registry.update(_flatten(handler.load(path)))
                except (OSError, ValueError) as e:
                    log.warning(f"Skipping unreadable message file {path}: {e}")
                return

    def load_directory(self, root_path: Path) -> Dict[str, str]:
        registry: Dict[str, str] = {}

        if not root_path.is_dir():
            return registry

        # Sorted so that later files win deterministically on key clashes.
        for file_path in sorted(p for p in root_path.rglob("*") if p.is_file()):
            self._load_and_merge_file(file_path, registry)

        return registry
