from contextlib import contextmanager
from typing import List, Dict, Any, Optional, Union

import namesmith.common
from namesmith.needle import SemanticPointer


class SpyRenderer:
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        pass

    def record(self, level: str, msg_id: Union[str, SemanticPointer], params: Dict[str, Any]):
        self.messages.append({"level": level, "id": str(msg_id), "params": params})


class SpyBus:
    """
    Spies on the global `namesmith.common.bus` singleton.

    Modules import the instance with `from namesmith.common import bus`, so
    the instance is patched in place instead of being replaced.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        real_bus = namesmith.common.bus

        def intercept_render(
            level: str, msg_id: Union[str, SemanticPointer], **kwargs: Any
        ) -> None:
            self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)

        yield self

    def get_messages(self, level: Optional[str] = None) -> List[Dict[str, Any]]:
        messages = self._spy_renderer.messages
        if level is None:
            return list(messages)
        return [m for m in messages if m["level"] == level]

    def assert_id_called(self, msg_id: SemanticPointer, level: Optional[str] = None):
        key = str(msg_id)
        captured = self.get_messages()

        for msg in captured:
            if msg["id"] == key and (level is None or msg["level"] == level):
                return

        ids_seen = [m["id"] for m in captured]
        raise AssertionError(
            f"Message with ID '{key}' was not sent.\nCaptured IDs: {ids_seen}"
        )

    def assert_id_not_called(self, msg_id: SemanticPointer):
        key = str(msg_id)
        if any(m["id"] == key for m in self.get_messages()):
            raise AssertionError(f"Message with ID '{key}' was sent unexpectedly.")
