import logging
from pathlib import Path
from typing import Any, Dict

import yaml

log = logging.getLogger(__name__)


class YamlAdapter:
    def load(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}

        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            log.warning(f"Could not parse YAML document {path}: {e}")
            return {}

        if not isinstance(content, dict):
            return {}

        return {str(k): v for k, v in content.items() if v is not None}

    def dump(self, data: Dict[str, Any]) -> str:
        # Insertion order is kept: documents read top-down as name, then
        # parameters, then locals.
        return yaml.safe_dump(
            data,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )

    def save(self, path: Path, data: Dict[str, Any]) -> bool:
        """Writes `data` to `path`. Returns False if the file was already current."""
        new_content = self.dump(data)

        if path.exists():
            try:
                if path.read_text(encoding="utf-8") == new_content:
                    return False
            except (OSError, UnicodeDecodeError):
                pass

        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            f.write(new_content)
        return True
