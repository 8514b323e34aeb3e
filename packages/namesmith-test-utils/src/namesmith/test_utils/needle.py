from contextlib import contextmanager
from typing import Dict, Any, Optional


class MockNeedle:
    """
    Replaces template lookup on the global needle runtime with a dict.
    """

    def __init__(self, templates: Dict[str, str]):
        self._templates = templates

    def _mock_get(self, key: Any, lang: Optional[str] = None) -> str:
        key_str = str(key)
        return self._templates.get(key_str, key_str)

    @contextmanager
    def patch(self, monkeypatch: Any):
        import namesmith.common

        monkeypatch.setattr(namesmith.common.needle, "get", self._mock_get)
        yield
