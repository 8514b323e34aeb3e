import logging
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

log = logging.getLogger(__name__)

DEFAULT_REPORT_WIDTH = 50


@dataclass
class NamesmithConfig:
    report_width: int = DEFAULT_REPORT_WIDTH
    # Name-source tag for symbols whose function document does not give one.
    default_source: str = "DEFAULT"
    write_back: bool = True


def _find_pyproject_toml(search_path: Path) -> Optional[Path]:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            return None
        current_dir = current_dir.parent


def _coerce(data: Dict[str, Any], config_path: Path) -> Dict[str, Any]:
    accepted: Dict[str, Any] = {}
    for f in fields(NamesmithConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        expected = type(f.default)
        # bool is a subclass of int; a boolean report_width is still wrong.
        if type(value) is not expected:
            log.warning(
                f"Ignoring tool.namesmith.{f.name} in {config_path}: "
                f"expected {expected.__name__}, got {type(value).__name__}"
            )
            continue
        accepted[f.name] = value

    if "report_width" in accepted and accepted["report_width"] <= 0:
        log.warning(f"Ignoring non-positive tool.namesmith.report_width in {config_path}")
        del accepted["report_width"]

    unknown = sorted(set(data) - {f.name for f in fields(NamesmithConfig)})
    if unknown:
        log.warning(f"Unknown keys in tool.namesmith of {config_path}: {unknown}")

    return accepted


def load_config_from_path(search_path: Path) -> NamesmithConfig:
    config_path = _find_pyproject_toml(search_path)
    if config_path is None:
        return NamesmithConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        log.warning(f"Could not read {config_path}: {e}")
        return NamesmithConfig()

    namesmith_data = data.get("tool", {}).get("namesmith", {})
    if not isinstance(namesmith_data, dict):
        log.warning(f"tool.namesmith in {config_path} is not a table; using defaults")
        return NamesmithConfig()

    return NamesmithConfig(**_coerce(namesmith_data, config_path))
