import sys
from pathlib import Path

from namesmith.adapter import FunctionDocumentAdapter
from namesmith.config import NamesmithConfig, load_config_from_path

STDIN_MARKER = "-"


def get_project_root() -> Path:
    return Path.cwd()


def load_config() -> NamesmithConfig:
    return load_config_from_path(get_project_root())


def make_document_adapter() -> FunctionDocumentAdapter:
    return FunctionDocumentAdapter()


def read_response(source: str) -> str:
    if source == STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Response file not found at: {path}")
    return path.read_text(encoding="utf-8")
