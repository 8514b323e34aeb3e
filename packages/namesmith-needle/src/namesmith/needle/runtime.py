import os
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from .loader import Loader
from .pointer import SemanticPointer

LANG_ENV_VAR = "NAMESMITH_LANG"


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    """
    Walks upwards from `start_dir` (default: cwd) looking for a
    pyproject.toml or a .git directory.
    """
    origin = (start_dir or Path.cwd()).resolve()
    current_dir = origin
    while current_dir.parent != current_dir:
        if (current_dir / "pyproject.toml").is_file():
            return current_dir
        if (current_dir / ".git").is_dir():
            return current_dir
        current_dir = current_dir.parent
    return origin


class Needle:
    """
    Resolves semantic pointers to message templates.

    Each root may contribute `needle/<lang>/` (packaged assets) and
    `.namesmith/needle/<lang>/` (project overrides). Roots later in the
    list override earlier ones.
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.default_lang = "en"
        self._registry: Dict[str, Dict[str, str]] = {}
        self._loader = Loader()
        self._loaded_langs: Set[str] = set()
        self.roots: List[Path] = list(roots) if roots else [find_project_root()]

    def add_root(self, path: Path):
        """Prepends a root, giving it the lowest precedence."""
        if path not in self.roots:
            self.roots.insert(0, path)
            self.reset()

    def set_project_root(self, path: Path):
        """Replaces the highest-precedence root with the given project."""
        path = path.resolve()
        if self.roots[-1] == path:
            return
        self.roots[-1] = path
        self.reset()

    def reset(self):
        self._registry.clear()
        self._loaded_langs.clear()

    def _ensure_lang_loaded(self, lang: str):
        if lang in self._loaded_langs:
            return

        merged: Dict[str, str] = {}
        for root in self.roots:
            asset_path = root / "needle" / lang
            if asset_path.is_dir():
                merged.update(self._loader.load_directory(asset_path))

            override_path = root / ".namesmith" / "needle" / lang
            if override_path.is_dir():
                merged.update(self._loader.load_directory(override_path))

        self._registry[lang] = merged
        self._loaded_langs.add(lang)

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        Lookup order: requested language, then the default language, then
        the key itself.
        """
        key = str(pointer)
        target_lang = lang or os.getenv(LANG_ENV_VAR, self.default_lang)

        self._ensure_lang_loaded(target_lang)
        val = self._registry[target_lang].get(key)
        if val is not None:
            return val

        if target_lang != self.default_lang:
            self._ensure_lang_loaded(self.default_lang)
            val = self._registry[self.default_lang].get(key)
            if val is not None:
                return val

        return key


needle = Needle()
